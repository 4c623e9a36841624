"""Per-tile FIFO queues of pending dab operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

from .tilemap import TileIndex, TileMap


@dataclass
class DrawDabOperation:
    """A dab queued for rendering onto one tile."""

    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    color_r: int = 0
    color_g: int = 0
    color_b: int = 0
    color_a: float = 0.0
    opaque: float = 0.0
    hardness: float = 0.0
    softness: float = 0.0
    aspect_ratio: float = 1.0
    angle: float = 0.0
    normal: float = 0.0
    lock_alpha: float = 0.0
    colorize: float = 0.0
    posterize: float = 0.0
    posterize_num: float = 0.0
    paint: float = 0.0


def remove_duplicate_tiles(tiles: Iterable[TileIndex]) -> list[TileIndex]:
    """Return the tiles with repeats dropped, keeping first occurrences in order."""
    return list(dict.fromkeys(tuple(t) for t in tiles))


class OperationQueue:
    """Queues operations per tile and tracks which tiles have work pending."""

    def __init__(self, size: int = 10) -> None:
        self._map = TileMap(size)
        self._dirty: list[TileIndex] = []

    @property
    def size(self) -> int:
        return self._map.size

    def _capacity(self) -> int:
        return (2 * self._map.size) ** 2

    def _grow(self) -> None:
        bigger = TileMap(self._map.size * 2)
        self._map.copy_to(bigger)
        self._map = bigger

    def add(self, index: TileIndex, op: DrawDabOperation) -> None:
        """Queue ``op`` for tile ``index``; an operation spanning tiles is added once per tile."""
        index = tuple(index)
        while not self._map.contains(index):
            self._grow()

        queue = self._map.get(index)
        if queue is None:
            queue = deque()
            self._map.set(index, queue)

        if not queue:
            if len(self._dirty) >= self._capacity():
                self._dirty = remove_duplicate_tiles(self._dirty)
            if len(self._dirty) >= self._capacity():
                raise RuntimeError("dirty tile list is full")
            self._dirty.append(index)
        queue.append(op)

    def pop(self, index: TileIndex) -> Optional[DrawDabOperation]:
        """Remove and return the oldest operation for ``index``, or None if there is none."""
        index = tuple(index)
        if not self._map.contains(index):
            return None
        queue = self._map.get(index)
        if not queue:
            self._map.set(index, None)
            return None
        op = queue.popleft()
        if not queue:
            self._map.set(index, None)
        return op

    def _queue(self, index: TileIndex) -> Optional[deque]:
        index = tuple(index)
        if not self._map.contains(index):
            return None
        return self._map.get(index)

    def peek_first(self, index: TileIndex) -> Optional[DrawDabOperation]:
        """Return the oldest queued operation for ``index`` without removing it."""
        queue = self._queue(index)
        return queue[0] if queue else None

    def peek_last(self, index: TileIndex) -> Optional[DrawDabOperation]:
        """Return the newest queued operation for ``index`` without removing it."""
        queue = self._queue(index)
        return queue[-1] if queue else None

    def dirty_tiles(self) -> list[TileIndex]:
        """Return the distinct tiles that have had operations queued, in order."""
        self._dirty = remove_duplicate_tiles(self._dirty)
        return list(self._dirty)

    def clear_dirty_tiles(self) -> None:
        """Forget the dirty tiles; call after all of them have been processed."""
        self._dirty.clear()