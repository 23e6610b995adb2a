#!/usr/bin/env python3

# This file performs multiple runs of map generation per theme, collecting and reporting metrics.
# Used for checking both performance of the algorithm and quality of resulting maps.

from __future__ import annotations

import argparse
import datetime
import json
import math
import os
import random
import statistics
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

import networkx as nx

from dungeon_config import DungeonConfig
from dungeon_generator import MAX_RANDOM_SEED, DungeonGenerator
from dungeon_models import GenerationResult, TileType
from themes import THEMES

DEFAULT_CONFIG_KWARGS = dict(
    width=60,
    height=50,
    room_count=15,
    collect_metrics=True,
)

DEFAULT_ROOM_COMPLETION_THRESHOLD_RATIO = 0.8

PERCENTILES = [5.0, 25.0, 50.0, 75.0, 95.0]


def build_config(theme: str, seed: int) -> DungeonConfig:
    return DungeonConfig(theme=theme, random_seed=seed, **DEFAULT_CONFIG_KWARGS) # type: ignore


@dataclass
class GenerationRunResult:
    theme: str
    seed: int
    duration: float
    total_rooms: int
    total_corridors: int
    total_doors: int
    room_target: int
    meets_room_threshold: bool
    floor_fraction: float
    largest_region_fraction: float
    rooms_in_largest_region: float
    cycle_count: int
    stage_metrics: Dict[str, Dict[str, float | int]]


def percentile(values: List[float], pct: float) -> float:
    if not values:
        return float("nan")
    if pct <= 0:
        return min(values)
    if pct >= 100:
        return max(values)
    ordered = sorted(values)
    rank = (len(ordered) - 1) * (pct / 100.0)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if lower == upper:
        return ordered[int(rank)]
    fraction = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * fraction


def json_safe_number(value: float | int | None) -> float | int | None:
    if value is None:
        return None
    numeric = float(value)
    if math.isnan(numeric) or math.isinf(numeric):
        return None
    if isinstance(value, int):
        return value
    return numeric


def compute_basic_stats(values: Sequence[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "min": min(values),
        "max": max(values),
        "stdev": statistics.stdev(values) if len(values) > 1 else float("nan"),
    }


def build_walkable_graph(result: GenerationResult) -> nx.Graph:
    """Graph of non-wall tiles with edges between orthogonal neighbours."""
    graph = nx.Graph()
    grid = result.grid
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.get(x, y) is TileType.WALL:
                continue
            graph.add_node((x, y))
            for nx_, ny in ((x + 1, y), (x, y + 1)):
                if grid.in_bounds(nx_, ny) and grid.get(nx_, ny) is not TileType.WALL:
                    graph.add_edge((x, y), (nx_, ny))
    return graph


def build_room_graph(result: GenerationResult) -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(range(len(result.rooms)))
    for corridor in result.corridors:
        if corridor.room_a_index is None or corridor.room_b_index is None or corridor.is_self_link:
            continue
        graph.add_edge(corridor.room_a_index, corridor.room_b_index)
    return graph


def walkable_region_stats(result: GenerationResult) -> tuple[float, float]:
    """Return (largest region share of walkable tiles, share of room centers in that region)."""
    graph = build_walkable_graph(result)
    if graph.number_of_nodes() == 0:
        return 0.0, 0.0
    largest = max(nx.connected_components(graph), key=len)
    region_fraction = len(largest) / graph.number_of_nodes()
    if not result.rooms:
        return region_fraction, 0.0
    rooms_inside = sum(1 for room in result.rooms if room.center.to_tuple() in largest)
    return region_fraction, rooms_inside / len(result.rooms)


def run_single_generation(theme: str, seed: int, room_completion_ratio: float) -> GenerationRunResult:
    """Run one map generation with the provided seed and collect metrics."""
    config = build_config(theme, seed)
    generator = DungeonGenerator(config)

    start = time.perf_counter()
    result = generator.generate()
    end = time.perf_counter()

    total_tiles = result.width * result.height
    walkable = total_tiles - result.grid.count(TileType.WALL)
    region_fraction, rooms_fraction = walkable_region_stats(result)
    room_threshold = math.floor(config.room_count * room_completion_ratio)

    return GenerationRunResult(
        theme=theme,
        seed=seed,
        duration=end - start,
        total_rooms=len(result.rooms),
        total_corridors=len(result.corridors),
        total_doors=result.grid.count(TileType.DOOR),
        room_target=config.room_count,
        meets_room_threshold=len(result.rooms) >= room_threshold,
        floor_fraction=walkable / total_tiles if total_tiles else 0.0,
        largest_region_fraction=region_fraction,
        rooms_in_largest_region=rooms_fraction,
        cycle_count=len(nx.cycle_basis(build_room_graph(result))),
        stage_metrics=result.metrics,
    )


def run_benchmark(
    num_runs: int,
    themes: Sequence[str],
    seed: int | None,
    room_completion_ratio: float,
) -> List[GenerationRunResult]:
    """Run the generator repeatedly for every theme and collect run-level metrics."""
    rng = random.Random(seed)
    results: List[GenerationRunResult] = []
    for _ in range(num_runs):
        run_seed = rng.randint(0, MAX_RANDOM_SEED)
        for theme in themes:
            results.append(run_single_generation(theme, run_seed, room_completion_ratio))
    return results


def format_seconds(value: float) -> str:
    if value >= 1.0:
        return f"{value:.3f}s"
    return f"{value * 1000:.1f}ms"


def summarize(values: List[float], formatter: Callable[[float], str]) -> Dict[str, Any]:
    stats = compute_basic_stats(values)
    summary: Dict[str, Any] = {key: json_safe_number(value) for key, value in stats.items()}
    summary["percentiles"] = {f"p{int(pct)}": json_safe_number(percentile(values, pct)) for pct in PERCENTILES}
    summary["display"] = "mean {mean}, median {median}, min {min}, max {max}".format(
        mean=formatter(stats["mean"]),
        median=formatter(stats["median"]),
        min=formatter(stats["min"]),
        max=formatter(stats["max"]),
    )
    return summary


def summarize_theme(results: List[GenerationRunResult]) -> Dict[str, Dict[str, Any]]:
    metric_columns: Dict[str, tuple[Callable[[GenerationRunResult], float], Callable[[float], str]]] = {
        "generation_time": (lambda r: r.duration, format_seconds),
        "rooms_placed": (lambda r: float(r.total_rooms), lambda v: f"{v:.1f}"),
        "corridors": (lambda r: float(r.total_corridors), lambda v: f"{v:.1f}"),
        "doors": (lambda r: float(r.total_doors), lambda v: f"{v:.1f}"),
        "floor_fraction": (lambda r: r.floor_fraction, lambda v: f"{v:.1%}"),
        "largest_region_fraction": (lambda r: r.largest_region_fraction, lambda v: f"{v:.1%}"),
        "rooms_in_largest_region": (lambda r: r.rooms_in_largest_region, lambda v: f"{v:.1%}"),
        "cycle_count": (lambda r: float(r.cycle_count), lambda v: f"{v:.1f}"),
    }
    summary: Dict[str, Dict[str, Any]] = {}
    for key, (getter, formatter) in metric_columns.items():
        summary[key] = summarize([getter(result) for result in results], formatter)
    successes = sum(1 for result in results if result.meets_room_threshold)
    summary["room_threshold"] = {"success_rate": successes / len(results)}
    return summary


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run the map generator multiple times per theme and report timing and quality statistics."
    )
    parser.add_argument(
        "-n",
        "--runs",
        type=int,
        default=20,
        help="Number of generations per theme (default: 20)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional seed for the benchmark harness RNG; keeps run seeds reproducible",
    )
    parser.add_argument(
        "--theme",
        action="append",
        choices=sorted(THEMES),
        help="Theme to benchmark; repeat for several (default: all themes)",
    )
    parser.add_argument(
        "--room-completion-threshold-ratio",
        type=float,
        default=DEFAULT_ROOM_COMPLETION_THRESHOLD_RATIO,
        help="Fraction of the target room count required for a run to be considered successful",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the JSON report (default: benchmarks/ next to code/)",
    )
    args = parser.parse_args()

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")
    if not (0.0 < args.room_completion_threshold_ratio <= 1.0):
        raise SystemExit("Room completion threshold ratio must be within (0, 1]")

    themes = args.theme or sorted(THEMES)
    results = run_benchmark(args.runs, themes, args.seed, args.room_completion_threshold_ratio)

    report: Dict[str, Any] = {}
    for theme in themes:
        theme_results = [result for result in results if result.theme == theme]
        summary = summarize_theme(theme_results)
        report[theme] = summary
        print(f"{theme} ({len(theme_results)} runs):")
        for key, values in summary.items():
            if "display" in values:
                print(f"  {key}: {values['display']}")
        print(f"  room threshold success rate: {summary['room_threshold']['success_rate']:.1%}")

    timestamp = datetime.datetime.now(datetime.timezone.utc)
    filename_stamp = timestamp.strftime("%Y%m%dT%H%M%SZ")
    if args.output_dir is None:
        script_dir = os.path.dirname(os.path.abspath(__file__))
        output_dir = os.path.abspath(os.path.join(script_dir, "..", "benchmarks"))
    else:
        output_dir = os.path.abspath(args.output_dir)
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"benchmark-{filename_stamp}.json")

    benchmark_data = {
        "benchmark_run_info": {
            "timestamp": timestamp.replace(microsecond=0).isoformat(),
            "num_iterations": args.runs,
            "parameters": {
                "seed": args.seed,
                "themes": themes,
                "room_completion_threshold_ratio": args.room_completion_threshold_ratio,
                **{key: value for key, value in DEFAULT_CONFIG_KWARGS.items()},
            },
        },
        "aggregated_results": report,
        "results": [
            {
                "theme": result.theme,
                "seed": result.seed,
                "total_time_seconds": result.duration,
                "num_rooms": result.total_rooms,
                "num_corridors": result.total_corridors,
                "num_doors": result.total_doors,
                "largest_region_fraction": result.largest_region_fraction,
                "num_cycles": result.cycle_count,
                "stage_times": {
                    name: metrics.get("total_time", 0.0) for name, metrics in sorted(result.stage_metrics.items())
                },
            }
            for result in results
        ],
    }

    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(benchmark_data, handle, indent=2, sort_keys=True)
        handle.write("\n")

    print(f"\nSaved benchmark results to {os.path.relpath(output_path)}")


if __name__ == "__main__":
    main()
