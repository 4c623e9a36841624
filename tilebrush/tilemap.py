"""A fixed-size square grid of per-tile slots addressed by signed tile indices."""

from __future__ import annotations

from typing import Any, Iterator, Tuple

TileIndex = Tuple[int, int]


class TileMap:
    """Grid of slots covering tiles with x and y in ``[-size, size)``.

    A size of 10 spans x in [-10, 9] and y in [-10, 9]. Every slot starts
    out holding ``None``.
    """

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError(f"tile map size must be positive, got {size}")
        self.size = size
        self._cells: list[Any] = [None] * (2 * size) ** 2

    def contains(self, index: TileIndex) -> bool:
        """Return True if ``index`` lies inside the map."""
        x, y = index
        return -self.size <= x < self.size and -self.size <= y < self.size

    def __contains__(self, index: object) -> bool:
        return isinstance(index, tuple) and len(index) == 2 and self.contains(index)

    def _offset(self, index: TileIndex) -> int:
        if not self.contains(index):
            raise IndexError(f"tile {index} is outside a map of size {self.size}")
        x, y = index
        rowstride = 2 * self.size
        return (self.size + y) * rowstride + self.size + x

    def get(self, index: TileIndex) -> Any:
        """Return the value stored for ``index``."""
        return self._cells[self._offset(index)]

    def set(self, index: TileIndex, value: Any) -> None:
        """Store ``value`` for ``index``."""
        self._cells[self._offset(index)] = value

    def indices(self) -> Iterator[TileIndex]:
        """Yield every tile index covered by the map, row by row."""
        for y in range(-self.size, self.size):
            for x in range(-self.size, self.size):
                yield (x, y)

    def copy_to(self, other: "TileMap") -> None:
        """Copy every slot into ``other``, which must be at least as large."""
        if other.size < self.size:
            raise ValueError(
                f"target map of size {other.size} is smaller than source of size {self.size}"
            )
        for index in self.indices():
            other.set(index, self.get(index))