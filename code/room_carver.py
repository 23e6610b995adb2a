"""Rasterize room footprints into the tile grid, one strategy per room style."""

from __future__ import annotations

import math
import random
from typing import Callable, Dict, Optional, Tuple

from dungeon_constants import (
    FORMAL_CIRCLE_MIN_SIZE,
    FORMAL_CIRCLE_PROBABILITY,
    IRREGULAR_JITTER,
    ORGANIC_CORNER_PROBABILITY,
)
from dungeon_models import Room, RoomStyle
from tile_grid import TileGrid

RoomCarver = Callable[[TileGrid, Room, random.Random], int]


def _geometric_center(room: Room) -> Tuple[float, float]:
    # Measured between tile centers, so an even-sized room centers on a tile corner.
    return room.x + (room.width - 1) / 2.0, room.y + (room.height - 1) / 2.0


def carve_rectangular(grid: TileGrid, room: Room, rng: random.Random) -> int:
    carved = 0
    for tile in room.bounds.iter_tiles():
        carved += grid.carve(tile.x, tile.y)
    return carved


def carve_circular(grid: TileGrid, room: Room, rng: random.Random) -> int:
    radius = min(room.width, room.height) / 2.0 - 1
    cx, cy = _geometric_center(room)
    carved = 0
    for tile in room.bounds.iter_tiles():
        if math.hypot(tile.x - cx, tile.y - cy) <= radius:
            carved += grid.carve(tile.x, tile.y)
    return carved


def carve_irregular(grid: TileGrid, room: Room, rng: random.Random) -> int:
    """Cave-like blob: a disc whose edge is jittered independently per tile."""
    radius = min(room.width, room.height) / 2.0
    cx, cy = _geometric_center(room)
    carved = 0
    for tile in room.bounds.iter_tiles():
        jitter = rng.uniform(-IRREGULAR_JITTER, IRREGULAR_JITTER)
        if math.hypot(tile.x - cx, tile.y - cy) <= radius + jitter:
            carved += grid.carve(tile.x, tile.y)
    return carved


def carve_formal(grid: TileGrid, room: Room, rng: random.Random) -> int:
    if min(room.width, room.height) >= FORMAL_CIRCLE_MIN_SIZE and rng.random() < FORMAL_CIRCLE_PROBABILITY:
        return carve_circular(grid, room, rng)
    return carve_rectangular(grid, room, rng)


def carve_organic(grid: TileGrid, room: Room, rng: random.Random) -> int:
    """Rectangle whose four corners are each kept as wall most of the time."""
    corners = set(room.bounds.corners())
    carved = 0
    for tile in room.bounds.iter_tiles():
        if tile in corners and rng.random() >= ORGANIC_CORNER_PROBABILITY:
            continue
        carved += grid.carve(tile.x, tile.y)
    return carved


ROOM_CARVERS: Dict[RoomStyle, RoomCarver] = {
    RoomStyle.RECTANGULAR: carve_rectangular,
    RoomStyle.IRREGULAR: carve_irregular,
    RoomStyle.FORMAL: carve_formal,
    RoomStyle.ORGANIC: carve_organic,
}


def carve_room(
    grid: TileGrid,
    room: Room,
    style: RoomStyle,
    rng: Optional[random.Random] = None,
) -> int:
    """Carve ``room`` using the strategy for ``style``; returns the number of tiles opened."""
    generator = rng if rng is not None else random
    return ROOM_CARVERS[style](grid, room, generator)  # type: ignore[arg-type]
