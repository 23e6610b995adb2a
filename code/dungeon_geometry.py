"""Tile coordinates, cardinal directions, and rectangle footprints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Direction(Enum):
    """Unit steps on the tile grid; iteration order is N, E, S, W."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True, order=True)
class TilePos:
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def step(self, direction: Direction) -> TilePos:
        return TilePos(self.x + direction.dx, self.y + direction.dy)

    def neighbors(self) -> Tuple[TilePos, ...]:
        return tuple(self.step(direction) for direction in Direction)

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Rect:
    """Axis-aligned footprint; ``max_x`` and ``max_y`` are exclusive."""

    x: int
    y: int
    width: int
    height: int

    @property
    def max_x(self) -> int:
        return self.x + self.width

    @property
    def max_y(self) -> int:
        return self.y + self.height

    def overlaps(self, other: Rect) -> bool:
        # Touching edges do not count as overlap.
        return (
            self.x < other.max_x
            and other.x < self.max_x
            and self.y < other.max_y
            and other.y < self.max_y
        )

    def expand(self, margin: int) -> Rect:
        return Rect(self.x - margin, self.y - margin, self.width + 2 * margin, self.height + 2 * margin)

    def contains(self, point: TilePos) -> bool:
        return self.x <= point.x < self.max_x and self.y <= point.y < self.max_y

    def iter_tiles(self) -> Iterator[TilePos]:
        """Row-major walk over every tile of the footprint."""
        for ty in range(self.y, self.max_y):
            for tx in range(self.x, self.max_x):
                yield TilePos(tx, ty)

    def corners(self) -> Tuple[TilePos, TilePos, TilePos, TilePos]:
        """Top-left, top-right, bottom-left, bottom-right."""
        right, bottom = self.max_x - 1, self.max_y - 1
        return (
            TilePos(self.x, self.y),
            TilePos(right, self.y),
            TilePos(self.x, bottom),
            TilePos(right, bottom),
        )
