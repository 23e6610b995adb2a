"""Core dataclasses used by the dungeon map generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from dungeon_geometry import Direction, Rect, TilePos

if TYPE_CHECKING:
    from themes import Theme
    from tile_grid import TileGrid


class TileType(IntEnum):
    """Per-cell classification. Integer values are the codes consumers render."""

    WALL = 0
    FLOOR = 1
    DOOR = 2


class RoomStyle(Enum):
    """Closed set of room shapes; selects both the sampler bias and the carver."""

    RECTANGULAR = "rectangular"
    IRREGULAR = "irregular"
    FORMAL = "formal"
    ORGANIC = "organic"


class ElementType(Enum):
    """Kinds of interactive point annotations layered on floor tiles."""

    TREASURE = "treasure"
    TRAP = "trap"
    MONSTER = "monster"

    @classmethod
    def coerce(cls, value: "ElementType | str") -> ElementType:
        if isinstance(value, ElementType):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown element type {value!r}; expected one of: {valid}") from exc


@dataclass(frozen=True)
class Room:
    """Axis-aligned rectangular room footprint, immutable once placed."""

    x: int
    y: int
    width: int
    height: int

    @property
    def max_x(self) -> int:
        return self.x + self.width

    @property
    def max_y(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> TilePos:
        return TilePos(self.x + self.width // 2, self.y + self.height // 2)

    @property
    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        return self.bounds.contains(TilePos(x, y))

    def edge_pairs(self, direction: Direction) -> List[Tuple[TilePos, TilePos]]:
        """Pair each tile just outside the ``direction`` edge with the room tile across from it."""
        if direction is Direction.NORTH:
            return [(TilePos(x, self.y - 1), TilePos(x, self.y)) for x in range(self.x, self.max_x)]
        if direction is Direction.SOUTH:
            return [(TilePos(x, self.max_y), TilePos(x, self.max_y - 1)) for x in range(self.x, self.max_x)]
        if direction is Direction.WEST:
            return [(TilePos(self.x - 1, y), TilePos(self.x, y)) for y in range(self.y, self.max_y)]
        if direction is Direction.EAST:
            return [(TilePos(self.max_x, y), TilePos(self.max_x - 1, y)) for y in range(self.y, self.max_y)]
        raise AssertionError(f"Unhandled direction {direction}")

    def perimeter(self) -> List[Tuple[TilePos, TilePos]]:
        """All four perimeter rings as ``(outside, inside)`` pairs: top, bottom, left, right."""
        pairs: List[Tuple[TilePos, TilePos]] = []
        for direction in (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST):
            pairs.extend(self.edge_pairs(direction))
        return pairs

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Corridor:
    """A carved path between two points, usually two room centers."""

    start: TilePos
    end: TilePos
    tiles: Tuple[TilePos, ...]
    room_a_index: Optional[int] = None
    room_b_index: Optional[int] = None
    kind: str = "chain"  # "chain" links consecutive rooms, "extra" adds loops

    @property
    def length(self) -> int:
        return len(self.tiles)

    @property
    def is_self_link(self) -> bool:
        return self.room_a_index is not None and self.room_a_index == self.room_b_index


@dataclass(frozen=True)
class InteractiveElement:
    """Point annotation (treasure, trap, monster) sitting on a floor tile."""

    type: ElementType
    x: int
    y: int
    id: str

    @property
    def pos(self) -> TilePos:
        return TilePos(self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "x": self.x, "y": self.y, "id": self.id}


@dataclass(frozen=True)
class GenerationResult:
    """Snapshot handed to rendering and export collaborators.

    Element edits never mutate a result; see ``element_registry.add_element``.
    """

    grid: TileGrid
    rooms: Tuple[Room, ...]
    width: int
    height: int
    theme: Theme
    corridors: Tuple[Corridor, ...] = ()
    elements: Tuple[InteractiveElement, ...] = ()
    seed: Optional[int] = None
    next_element_id: int = 1
    metrics: Dict[str, Dict[str, float | int]] = field(default_factory=dict, compare=False)

    def tile_at(self, x: int, y: int) -> Optional[TileType]:
        """Return the tile at ``(x, y)`` or None when out of bounds."""
        if not self.grid.in_bounds(x, y):
            return None
        return self.grid.get(x, y)

    def elements_at(self, x: int, y: int) -> Tuple[InteractiveElement, ...]:
        return tuple(element for element in self.elements if element.x == x and element.y == y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "theme": self.theme.key,
            "room_style": self.theme.room_style.value,
            "seed": self.seed,
            "grid": [[int(tile) for tile in row] for row in self.grid.rows()],
            "rooms": [room.to_dict() for room in self.rooms],
            "corridors": [
                {
                    "kind": corridor.kind,
                    "room_a_index": corridor.room_a_index,
                    "room_b_index": corridor.room_b_index,
                    "tiles": [tile.to_tuple() for tile in corridor.tiles],
                }
                for corridor in self.corridors
            ],
            "elements": [element.to_dict() for element in self.elements],
        }
