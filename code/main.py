#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import random
from typing import List, Optional

from dungeon_config import DungeonConfig
from dungeon_constants import RANDOM_SEED
from dungeon_generator import MAX_RANDOM_SEED, DungeonGenerator
from dungeon_models import ElementType, GenerationResult, TileType
from element_registry import add_element
from grid_renderer import print_grid
from themes import DEFAULT_THEME_KEY, theme_keys


def scatter_elements(result: GenerationResult, count: int, rng: random.Random) -> GenerationResult:
    """Drop ``count`` random elements on random floor tiles, for demo output."""
    floor_tiles = list(result.grid.positions_of(TileType.FLOOR))
    if not floor_tiles:
        return result
    for tile in rng.sample(floor_tiles, min(count, len(floor_tiles))):
        result, _ = add_element(result, rng.choice(list(ElementType)), tile.x, tile.y)
    return result


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a dungeon tile map and print it as ASCII.")
    parser.add_argument("--width", type=int, default=40, help="Map width in tiles (default: 40)")
    parser.add_argument("--height", type=int, default=30, help="Map height in tiles (default: 30)")
    parser.add_argument("--rooms", type=int, default=8, help="Requested room count (default: 8)")
    parser.add_argument(
        "--theme",
        default=DEFAULT_THEME_KEY,
        choices=theme_keys(),
        help=f"Theme key or room style (default: {DEFAULT_THEME_KEY})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed; picked at random when omitted")
    parser.add_argument("--elements", type=int, default=0, help="Scatter this many random elements on floor tiles")
    parser.add_argument("--labels", action="store_true", help="Number rooms in placement order")
    parser.add_argument("--metrics", action="store_true", help="Print per-stage generation metrics")
    parser.add_argument("--verbose", action="store_true", help="Print progress while generating")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    seed = args.seed if args.seed is not None else RANDOM_SEED
    if seed is None:
        # Print the drawn seed so a map can be reproduced with --seed.
        seed = random.randint(0, MAX_RANDOM_SEED)
    print(f"Using random seed {seed}")

    try:
        config = DungeonConfig(
            width=args.width,
            height=args.height,
            theme=args.theme,
            room_count=args.rooms,
            random_seed=seed,
            collect_metrics=args.metrics,
            verbose=args.verbose,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    generator = DungeonGenerator(config)
    result = generator.generate()
    if args.elements > 0:
        result = scatter_elements(result, args.elements, random.Random(seed))

    print_grid(result, label_rooms=args.labels)
    print(f"Generated {len(result.rooms)} rooms, {result.width}x{result.height} grid, theme {result.theme.name}")
    if args.metrics:
        print(json.dumps(result.metrics, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
