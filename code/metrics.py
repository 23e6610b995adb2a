"""Per-stage instrumentation for map generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict

from dungeon_models import TileType

if TYPE_CHECKING:
    from dungeon_layout import DungeonLayout


@dataclass(frozen=True)
class LayoutTally:
    """What a layout holds at one moment; the difference of two tallies is a stage's effect."""

    rooms: int = 0
    corridors: int = 0
    open_cells: int = 0  # floor and door tiles
    doors: int = 0

    @classmethod
    def of(cls, layout: DungeonLayout) -> LayoutTally:
        grid = layout.grid
        doors = grid.count(TileType.DOOR)
        return cls(
            rooms=len(layout.placed_rooms),
            corridors=len(layout.corridors),
            open_cells=grid.count(TileType.FLOOR) + doors,
            doors=doors,
        )

    def __sub__(self, other: LayoutTally) -> LayoutTally:
        return LayoutTally(
            self.rooms - other.rooms,
            self.corridors - other.corridors,
            self.open_cells - other.open_cells,
            self.doors - other.doors,
        )


@dataclass
class StageMetrics:
    name: str
    invocations: int = 0
    total_time: float = 0.0
    rooms_placed: int = 0
    corridors_routed: int = 0
    # Wall tiles opened up. Turning floor into a door does not count here.
    cells_carved: int = 0
    doors_placed: int = 0

    def record(self, duration: float, change: LayoutTally) -> None:
        self.invocations += 1
        self.total_time += duration
        self.rooms_placed += change.rooms
        self.corridors_routed += change.corridors
        self.cells_carved += change.open_cells
        self.doors_placed += change.doors

    def to_dict(self) -> Dict[str, float | int]:
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": self.total_time / self.invocations if self.invocations else 0.0,
            "rooms_placed": self.rooms_placed,
            "corridors_routed": self.corridors_routed,
            "cells_carved": self.cells_carved,
            "doors_placed": self.doors_placed,
        }


@dataclass
class GenerationMetrics:
    """Stage metrics keyed by stage name, in the order stages first ran."""

    stages: Dict[str, StageMetrics] = field(default_factory=dict)

    def record_stage_run(self, name: str, duration: float, change: LayoutTally) -> None:
        self.stages.setdefault(name, StageMetrics(name=name)).record(duration, change)

    def snapshot(self) -> Dict[str, Dict[str, float | int]]:
        return {name: stage.to_dict() for name, stage in self.stages.items()}
