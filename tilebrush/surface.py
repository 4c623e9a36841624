"""The abstract painting surface that the brush engine draws dabs onto."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class Rectangle:
    """An integer pixel rectangle; a width of zero marks it as empty."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def expand_to_include_point(self, x: int, y: int) -> None:
        """Grow the rectangle so that it covers pixel ``(x, y)``."""
        if self.width == 0:
            self.x, self.y = x, y
            self.width = self.height = 1
            return
        if x < self.x:
            self.width += self.x - x
            self.x = x
        elif x >= self.x + self.width:
            self.width = x - self.x + 1
        if y < self.y:
            self.height += self.y - y
            self.y = y
        elif y >= self.y + self.height:
            self.height = y - self.y + 1

    def expand_to_include_rect(self, other: "Rectangle") -> None:
        """Grow the rectangle so that it covers ``other``; empty rectangles add nothing."""
        if other.is_empty:
            return
        self.expand_to_include_point(other.x, other.y)
        self.expand_to_include_point(
            other.x + other.width - 1, other.y + other.height - 1
        )


@dataclass(frozen=True)
class Color:
    """A colour sample with straight (non-premultiplied) channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b, self.a))


class Surface(ABC):
    """Something the brush engine can render dabs onto and pick colours from."""

    @abstractmethod
    def draw_dab(
        self,
        x: float,
        y: float,
        radius: float,
        color_r: float,
        color_g: float,
        color_b: float,
        opaque: float,
        hardness: float,
        softness: float,
        alpha_eraser: float,
        aspect_ratio: float,
        angle: float,
        lock_alpha: float,
        colorize: float,
        posterize: float,
        posterize_num: float,
        paint: float,
    ) -> bool:
        """Draw one dab; return True if the surface was modified."""

    @abstractmethod
    def get_color(self, x: float, y: float, radius: float, paint: float) -> Color:
        """Return the average colour under a dab at ``(x, y)``."""

    def get_alpha(self, x: float, y: float, radius: float) -> float:
        """Return the average alpha under a dab at ``(x, y)``."""
        return self.get_color(x, y, radius, 1.0).a

    def save_png(self, path: str, x: int, y: int, width: int, height: int) -> None:
        """Write a region to a PNG file; surfaces without that ability ignore it."""

    def begin_atomic(self) -> None:
        """Start a group of drawing operations."""

    @abstractmethod
    def end_atomic(self, max_rectangles: Optional[int] = 1) -> List[Rectangle]:
        """Finish a group of operations; return at most ``max_rectangles`` changed areas."""

    @contextmanager
    def atomic(self, max_rectangles: Optional[int] = 1) -> Iterator[List[Rectangle]]:
        """Bracket drawing in begin/end; the yielded list receives the changed areas."""
        self.begin_atomic()
        changed: List[Rectangle] = []
        try:
            yield changed
        finally:
            changed.extend(self.end_atomic(max_rectangles))