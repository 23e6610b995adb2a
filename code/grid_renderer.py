"""Render a generated map to an ASCII grid for debugging."""

from __future__ import annotations

import string
from typing import Dict, List

from dungeon_models import ElementType, GenerationResult, TileType

TILE_GLYPHS: Dict[TileType, str] = {
    TileType.WALL: "#",
    TileType.FLOOR: ".",
    TileType.DOOR: "+",
}

ELEMENT_GLYPHS: Dict[ElementType, str] = {
    ElementType.TREASURE: "$",
    ElementType.TRAP: "^",
    ElementType.MONSTER: "M",
}

ROOM_LABELS = string.digits[1:] + string.ascii_uppercase


def draw_to_grid(
    result: GenerationResult,
    *,
    show_elements: bool = True,
    label_rooms: bool = False,
) -> List[List[str]]:
    """Returns rows of glyphs; elements and room labels are drawn over tiles."""
    grid = [[TILE_GLYPHS[tile] for tile in row] for row in result.grid.rows()]
    if label_rooms:
        # Rooms are numbered from 1 in placement order; labels wrap after Z.
        for index, room in enumerate(result.rooms):
            center = room.center
            if result.grid.is_floor(center.x, center.y):
                grid[center.y][center.x] = ROOM_LABELS[index % len(ROOM_LABELS)]
    if show_elements:
        for element in result.elements:
            grid[element.y][element.x] = ELEMENT_GLYPHS[element.type]
    return grid


def render_ascii(
    result: GenerationResult,
    *,
    show_elements: bool = True,
    label_rooms: bool = False,
    horizontal_sep: str = "",
) -> str:
    rows = draw_to_grid(result, show_elements=show_elements, label_rooms=label_rooms)
    return "\n".join(horizontal_sep.join(row) for row in rows)


def print_grid(result: GenerationResult, horizontal_sep: str = "", label_rooms: bool = False) -> None:
    """Prints the ASCII grid to the console."""
    print(render_ascii(result, label_rooms=label_rooms, horizontal_sep=horizontal_sep))
