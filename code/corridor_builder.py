"""Corridor routing between grid points and the room-linking policy."""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional

from dungeon_geometry import TilePos
from dungeon_layout import DungeonLayout
from dungeon_models import Corridor, RoomStyle
from tile_grid import TileGrid

CorridorRouter = Callable[[int, int, int, int], List[TilePos]]


def _step_toward(current: int, target: int) -> int:
    return current + (1 if current < target else -1)


def route_l_shaped(x1: int, y1: int, x2: int, y2: int) -> List[TilePos]:
    """Horizontal run to ``x2`` then vertical run to ``y2``, both endpoints included."""
    path: List[TilePos] = []
    x, y = x1, y1
    while x != x2:
        path.append(TilePos(x, y))
        x = _step_toward(x, x2)
    while y != y2:
        path.append(TilePos(x, y))
        y = _step_toward(y, y2)
    path.append(TilePos(x, y))
    return path


def route_staircase(x1: int, y1: int, x2: int, y2: int) -> List[TilePos]:
    """Greedy path that always closes the larger remaining gap first.

    Ties step horizontally. The result looks like a diagonal staircase rather
    than a single bend.
    """
    path: List[TilePos] = []
    x, y = x1, y1
    while x != x2 or y != y2:
        path.append(TilePos(x, y))
        if abs(x2 - x) >= abs(y2 - y):
            x = _step_toward(x, x2)
        else:
            y = _step_toward(y, y2)
    path.append(TilePos(x, y))
    return path


CORRIDOR_ROUTERS: Dict[RoomStyle, CorridorRouter] = {
    RoomStyle.RECTANGULAR: route_l_shaped,
    RoomStyle.IRREGULAR: route_l_shaped,
    RoomStyle.FORMAL: route_l_shaped,
    RoomStyle.ORGANIC: route_staircase,
}


def connect(
    grid: TileGrid,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    style: RoomStyle = RoomStyle.RECTANGULAR,
) -> List[TilePos]:
    """Carve floor from ``(x1, y1)`` to ``(x2, y2)`` and return the path.

    Corridors ignore obstacles and may cut through other rooms. Tiles
    outside the grid are skipped; existing doors are left in place.
    """
    path = CORRIDOR_ROUTERS[style](x1, y1, x2, y2)
    for tile in path:
        grid.carve(tile.x, tile.y)
    return path


def _link_rooms(
    layout: DungeonLayout,
    room_a_index: int,
    room_b_index: int,
    style: RoomStyle,
    kind: str,
) -> Corridor:
    start = layout.placed_rooms[room_a_index].center
    end = layout.placed_rooms[room_b_index].center
    path = connect(layout.grid, start.x, start.y, end.x, end.y, style)
    corridor = Corridor(
        start=start,
        end=end,
        tiles=tuple(path),
        room_a_index=room_a_index,
        room_b_index=room_b_index,
        kind=kind,
    )
    layout.register_corridor(corridor)
    return corridor


def connect_rooms(
    layout: DungeonLayout,
    style: RoomStyle,
    rng: Optional[random.Random] = None,
) -> List[Corridor]:
    """Chain rooms in placement order, then add a few random extra links.

    Extra links pick both ends independently, so a room can be linked to
    itself; that yields a single-tile corridor and is harmless.
    """
    generator = rng if rng is not None else random
    config = layout.config
    room_count = len(layout.placed_rooms)
    created: List[Corridor] = []

    for index in range(room_count - 1):
        created.append(_link_rooms(layout, index, index + 1, style, "chain"))

    if room_count >= config.extra_corridor_min_rooms and room_count > 0:
        for _ in range(config.extra_corridor_count):
            room_a_index = generator.randrange(room_count)
            room_b_index = generator.randrange(room_count)
            created.append(_link_rooms(layout, room_a_index, room_b_index, style, "extra"))

    return created
