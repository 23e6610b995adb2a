"""Room sampling with margin-based overlap rejection."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from dungeon_constants import FAR_EDGE_BORDER, FORMAL_WIDTH_BONUS, ROOM_MARGIN
from dungeon_layout import DungeonLayout
from dungeon_models import Room, RoomStyle
from room_carver import carve_room
from themes import Theme


def rooms_overlap(candidate: Room, existing: Room, margin: int = ROOM_MARGIN) -> bool:
    """True when the two footprints, each grown by ``margin``, intersect."""
    return candidate.bounds.expand(margin).overlaps(existing.bounds.expand(margin))


def propose_room(
    existing_rooms: Sequence[Room],
    grid_width: int,
    grid_height: int,
    theme: Theme,
    min_size: int,
    max_size: int,
    rng: Optional[random.Random] = None,
) -> Optional[Room]:
    """Draw one random room footprint; None if it doesn't fit or crowds an existing room."""
    generator = rng if rng is not None else random
    width = generator.randint(min_size, max_size)
    height = generator.randint(min_size, max_size)
    if theme.room_style is RoomStyle.FORMAL:
        width += FORMAL_WIDTH_BONUS

    max_x = grid_width - width - FAR_EDGE_BORDER
    max_y = grid_height - height - FAR_EDGE_BORDER
    if max_x < 1 or max_y < 1:
        return None
    x = generator.randint(1, max_x)
    y = generator.randint(1, max_y)

    candidate = Room(x, y, width, height)
    for room in existing_rooms:
        if rooms_overlap(candidate, room):
            return None
    return candidate


def place_rooms(
    layout: DungeonLayout,
    theme: Theme,
    rng: Optional[random.Random] = None,
) -> int:
    """Propose and carve rooms until the target count or the attempt budget is reached.

    Running out of attempts is not an error; the layout simply ends up with
    fewer rooms. Returns the number of rooms placed.
    """
    config = layout.config
    target = config.room_count
    if config.verbose:
        print(f"Attempting to place {target} rooms...")

    attempts = 0
    placed = 0
    while placed < target and attempts < config.max_placement_attempts:
        attempts += 1
        room = propose_room(
            layout.placed_rooms,
            layout.width,
            layout.height,
            theme,
            config.min_room_size,
            config.max_room_size,
            rng,
        )
        if room is None:
            continue
        layout.register_room(room)
        carve_room(layout.grid, room, theme.room_style, rng)
        placed += 1

    if config.verbose:
        if placed < target:
            print(f"Exceeded attempt limit {config.max_placement_attempts}; placed {placed} of {target} rooms.")
        else:
            print(f"Successfully placed {placed} rooms in {attempts} attempts.")
    return placed
