"""Shared constants for the dungeon map generator."""

from __future__ import annotations

RANDOM_SEED = None  # Set to a number for reproducible behavior (for debugging); set to None to produce a different map on every run.

DEFAULT_MIN_ROOM_SIZE = 4
DEFAULT_MAX_ROOM_SIZE = 10
MAX_PLACEMENT_ATTEMPTS = 100 # Room proposals per generation pass, accepted or not.

# Rooms are compared with both footprints grown by this many tiles, so neighbours never share a wall.
ROOM_MARGIN = 1
# Proposed rooms keep this many tiles clear of the right and bottom map edges (left and top keep one).
FAR_EDGE_BORDER = 2

EXTRA_CORRIDOR_COUNT = 2
EXTRA_CORRIDOR_MIN_ROOMS = 4 # Extra links are only added once more than three rooms exist.

FORMAL_WIDTH_BONUS = 2
FORMAL_CIRCLE_PROBABILITY = 0.3
FORMAL_CIRCLE_MIN_SIZE = 6

ORGANIC_CORNER_PROBABILITY = 0.4

IRREGULAR_JITTER = 1.0
