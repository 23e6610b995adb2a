"""Flat tile buffer backing a generated map."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from dungeon_geometry import TilePos
from dungeon_models import TileType


class TileGrid:
    """Stores one ``TileType`` per cell in a single row-major buffer.

    The buffer is indexed ``y * width + x`` with the origin at the top-left.
    ``carve`` and ``mark_door`` are the only mutators used during generation;
    they bounds-check and only ever move a cell one step forward
    (WALL -> FLOOR -> DOOR).
    """

    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int, fill: TileType = TileType.WALL) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"TileGrid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[TileType] = [fill] * (width * height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile {(x, y)} outside {self.width}x{self.height} grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> TileType:
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, tile: TileType) -> None:
        self._cells[self._index(x, y)] = tile

    def __getitem__(self, pos: Tuple[int, int]) -> TileType:
        x, y = pos
        return self.get(x, y)

    def is_floor(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._cells[y * self.width + x] is TileType.FLOOR

    def carve(self, x: int, y: int) -> bool:
        """Turn a wall into floor. Returns True if the cell changed."""
        if not self.in_bounds(x, y):
            return False
        index = y * self.width + x
        if self._cells[index] is not TileType.WALL:
            return False
        self._cells[index] = TileType.FLOOR
        return True

    def mark_door(self, x: int, y: int) -> bool:
        """Turn a floor cell into a door. Returns True if the cell changed."""
        if not self.in_bounds(x, y):
            return False
        index = y * self.width + x
        if self._cells[index] is not TileType.FLOOR:
            return False
        self._cells[index] = TileType.DOOR
        return True

    def count(self, tile: TileType) -> int:
        return self._cells.count(tile)

    def positions_of(self, tile: TileType) -> Iterator[TilePos]:
        for index, value in enumerate(self._cells):
            if value is tile:
                yield TilePos(index % self.width, index // self.width)

    def rows(self) -> List[List[TileType]]:
        """Nested-row view for consumers that expect ``grid[y][x]``."""
        return [self._cells[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def cells(self) -> Tuple[TileType, ...]:
        return tuple(self._cells)

    def copy(self) -> TileGrid:
        clone = TileGrid.__new__(TileGrid)
        clone.width = self.width
        clone.height = self.height
        clone._cells = list(self._cells)
        return clone

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> TileGrid:
        materialized = [[TileType(value) for value in row] for row in rows]
        height = len(materialized)
        width = len(materialized[0]) if materialized else 0
        if any(len(row) != width for row in materialized):
            raise ValueError("All grid rows must have the same length")
        grid = cls(width, height)
        grid._cells = [tile for row in materialized for tile in row]
        return grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return (self.width, self.height, self._cells) == (other.width, other.height, other._cells)

    def __repr__(self) -> str:
        return f"TileGrid({self.width}x{self.height}, floor={self.count(TileType.FLOOR)}, doors={self.count(TileType.DOOR)})"
