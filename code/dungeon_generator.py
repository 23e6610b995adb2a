"""DungeonGenerator orchestrates room placement, corridor routing, and door placement."""

from __future__ import annotations

import random
from time import perf_counter
from typing import Callable, Optional

from corridor_builder import connect_rooms
from door_placement import place_doors
from dungeon_config import DungeonConfig
from dungeon_layout import DungeonLayout
from dungeon_models import GenerationResult
from metrics import GenerationMetrics, LayoutTally
from room_placement import place_rooms
from themes import DEFAULT_THEME_KEY, ThemeLike

MAX_RANDOM_SEED = 1_000_000


class DungeonGenerator:
    """Manages the overall process of generating a dungeon tile map.

    Randomness comes from ``rng`` when given, otherwise from a private
    ``random.Random`` seeded with ``config.random_seed``. When neither is set
    a seed is drawn and recorded on the result so any map can be reproduced.
    """

    def __init__(self, config: DungeonConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.theme = config.resolved_theme
        self.seed = config.random_seed
        if rng is None:
            if self.seed is None:
                self.seed = random.randint(0, MAX_RANDOM_SEED)
            rng = random.Random(self.seed)
        self.rng = rng
        self.layout = DungeonLayout(config)
        self.metrics = GenerationMetrics() if config.collect_metrics else None

    def _run_stage(self, name: str, func: Callable[..., object], *args, **kwargs) -> object:
        if self.metrics is None:
            return func(*args, **kwargs)

        before = LayoutTally.of(self.layout)
        start = perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            self.metrics.record_stage_run(name, perf_counter() - start, LayoutTally.of(self.layout) - before)

    def generate(self) -> GenerationResult:
        """Builds a fresh map; any previous layout and its elements are discarded."""
        self.layout = DungeonLayout(self.config)
        if self.metrics is not None:
            self.metrics = GenerationMetrics()

        style = self.theme.room_style
        self._run_stage("place_rooms", place_rooms, self.layout, self.theme, self.rng)
        # With zero or one room both passes below are no-ops.
        self._run_stage("connect_rooms", connect_rooms, self.layout, style, self.rng)
        self._run_stage("place_doors", place_doors, self.layout.grid, self.layout.placed_rooms)

        if self.config.verbose:
            print(
                f"Generated {len(self.layout.placed_rooms)} rooms, "
                f"{len(self.layout.corridors)} corridors on a "
                f"{self.layout.width}x{self.layout.height} grid ({self.theme.name})."
            )

        return self.layout.freeze(
            seed=self.seed,
            metrics=self.metrics.snapshot() if self.metrics is not None else None,
        )


def generate(
    width: int,
    height: int,
    theme: ThemeLike = DEFAULT_THEME_KEY,
    room_count: int = 8,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    **config_overrides,
) -> GenerationResult:
    """Generate a map in one call. Extra keyword arguments go to ``DungeonConfig``."""
    config = DungeonConfig(
        width=width,
        height=height,
        theme=theme,
        room_count=room_count,
        random_seed=seed,
        **config_overrides,
    )
    return DungeonGenerator(config, rng=rng).generate()
