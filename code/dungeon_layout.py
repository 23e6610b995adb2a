"""Data container for dungeon layout state during a generation pass."""

from __future__ import annotations

from typing import Dict, List, Optional

from dungeon_config import DungeonConfig
from dungeon_models import Corridor, GenerationResult, Room
from tile_grid import TileGrid


class DungeonLayout:
    """Stores the mutable state for one generation pass.

    The layout exclusively owns its grid until ``freeze`` hands out a
    snapshot; nothing else writes to it.
    """

    def __init__(self, config: DungeonConfig) -> None:
        self.config = config
        self.grid = TileGrid(config.width, config.height)
        self.placed_rooms: List[Room] = []
        self.corridors: List[Corridor] = []

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def register_room(self, room: Room) -> int:
        self.placed_rooms.append(room)
        return len(self.placed_rooms) - 1

    def register_corridor(self, corridor: Corridor) -> int:
        self.corridors.append(corridor)
        return len(self.corridors) - 1

    def freeze(
        self,
        *,
        seed: Optional[int] = None,
        metrics: Optional[Dict[str, Dict[str, float | int]]] = None,
    ) -> GenerationResult:
        """Return an immutable snapshot; later layout edits do not leak into it."""
        return GenerationResult(
            grid=self.grid.copy(),
            rooms=tuple(self.placed_rooms),
            width=self.width,
            height=self.height,
            theme=self.config.resolved_theme,
            corridors=tuple(self.corridors),
            seed=seed,
            metrics=dict(metrics or {}),
        )
