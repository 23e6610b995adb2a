"""Interactive point elements layered on floor tiles, with copy-on-edit helpers."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator, List, Tuple

from dungeon_models import ElementType, GenerationResult, InteractiveElement
from tile_grid import TileGrid


class ElementRegistry:
    """Sparse list of ``InteractiveElement`` annotations over one grid.

    Elements may only be added on floor tiles. IDs come from a monotonic
    counter that callers carry between snapshots so ids are never reused.
    """

    def __init__(
        self,
        grid: TileGrid,
        elements: Iterable[InteractiveElement] = (),
        next_id: int = 1,
    ) -> None:
        self.grid = grid
        self._elements: List[InteractiveElement] = list(elements)
        self.next_id = next_id

    def add(self, element_type: ElementType | str, x: int, y: int) -> bool:
        """Append an element at ``(x, y)`` if that tile is in bounds and floor."""
        kind = ElementType.coerce(element_type)
        if not self.grid.is_floor(x, y):
            return False
        element_id = f"{kind.value}-{self.next_id}"
        self.next_id += 1
        self._elements.append(InteractiveElement(type=kind, x=x, y=y, id=element_id))
        return True

    def remove(self, x: int, y: int) -> int:
        """Drop every element at ``(x, y)``; returns how many were removed."""
        before = len(self._elements)
        self._elements = [element for element in self._elements if (element.x, element.y) != (x, y)]
        return before - len(self._elements)

    def elements_at(self, x: int, y: int) -> Tuple[InteractiveElement, ...]:
        return tuple(element for element in self._elements if element.x == x and element.y == y)

    @property
    def elements(self) -> Tuple[InteractiveElement, ...]:
        return tuple(self._elements)

    def __iter__(self) -> Iterator[InteractiveElement]:
        return iter(tuple(self._elements))

    def __len__(self) -> int:
        return len(self._elements)


def _editable_copy(result: GenerationResult) -> Tuple[TileGrid, ElementRegistry]:
    grid = result.grid.copy()
    return grid, ElementRegistry(grid, result.elements, result.next_element_id)


def _snapshot(result: GenerationResult, grid: TileGrid, registry: ElementRegistry) -> GenerationResult:
    return dataclasses.replace(
        result,
        grid=grid,
        rooms=tuple(result.rooms),
        corridors=tuple(result.corridors),
        elements=registry.elements,
        next_element_id=registry.next_id,
        metrics=dict(result.metrics),
    )


def add_element(
    result: GenerationResult,
    element_type: ElementType | str,
    x: int,
    y: int,
) -> Tuple[GenerationResult, bool]:
    """Return a copy of ``result`` with an element added, plus whether it was accepted.

    The input snapshot is never modified; on rejection the copy has the same
    elements as the input.
    """
    grid, registry = _editable_copy(result)
    added = registry.add(element_type, x, y)
    return _snapshot(result, grid, registry), added


def remove_element(result: GenerationResult, x: int, y: int) -> GenerationResult:
    """Return a copy of ``result`` without any elements at ``(x, y)``."""
    grid, registry = _editable_copy(result)
    registry.remove(x, y)
    return _snapshot(result, grid, registry)
