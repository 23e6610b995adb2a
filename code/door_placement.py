"""Door placement along room boundaries."""

from __future__ import annotations

from typing import Iterable

from dungeon_models import Room, TileType
from tile_grid import TileGrid


def place_doors(grid: TileGrid, rooms: Iterable[Room]) -> int:
    """Turn room edge tiles into doors wherever floor touches them from outside.

    Runs once after rooms and corridors are carved. A corridor entering at a
    room corner can produce two adjacent doors; both are kept. Returns the
    number of doors placed.
    """
    doors = 0
    for room in rooms:
        for outside, inside in room.perimeter():
            if not grid.in_bounds(outside.x, outside.y):
                continue
            if grid.get(outside.x, outside.y) is not TileType.FLOOR:
                continue
            doors += grid.mark_door(inside.x, inside.y)
    return doors
