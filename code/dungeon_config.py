"""Configuration container for the dungeon map generator."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeon_constants import (
    DEFAULT_MAX_ROOM_SIZE,
    DEFAULT_MIN_ROOM_SIZE,
    EXTRA_CORRIDOR_COUNT,
    EXTRA_CORRIDOR_MIN_ROOMS,
    MAX_PLACEMENT_ATTEMPTS,
)
from themes import DEFAULT_THEME_KEY, Theme, ThemeLike, resolve_theme


@dataclass
class DungeonConfig:
    """Aggregates all tunable parameters for map generation."""

    width: int
    height: int
    theme: ThemeLike = DEFAULT_THEME_KEY
    # Requested number of rooms; fewer are placed if the attempt budget runs out.
    room_count: int = 8

    min_room_size: int = DEFAULT_MIN_ROOM_SIZE
    max_room_size: int = DEFAULT_MAX_ROOM_SIZE
    # Room proposals per pass, counting rejected ones.
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    # Random room-to-room links added after the sequential chain.
    extra_corridor_count: int = EXTRA_CORRIDOR_COUNT
    # Extra links are only added when at least this many rooms were placed.
    extra_corridor_min_rooms: int = EXTRA_CORRIDOR_MIN_ROOMS
    random_seed: int | None = None
    collect_metrics: bool = False
    verbose: bool = False
    _theme: Theme = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("DungeonConfig width and height must be non-negative")
        if self.room_count < 0:
            raise ValueError("DungeonConfig room_count cannot be negative")
        if self.min_room_size <= 0:
            raise ValueError("DungeonConfig min_room_size must be positive")
        if self.max_room_size < self.min_room_size:
            raise ValueError("DungeonConfig max_room_size must be >= min_room_size")
        if self.max_placement_attempts <= 0:
            raise ValueError("DungeonConfig max_placement_attempts must be positive")
        if self.extra_corridor_count < 0:
            raise ValueError("DungeonConfig extra_corridor_count cannot be negative")
        if self.extra_corridor_min_rooms < 0:
            raise ValueError("DungeonConfig extra_corridor_min_rooms cannot be negative")

        self._theme = resolve_theme(self.theme)

    @property
    def resolved_theme(self) -> Theme:
        return self._theme
