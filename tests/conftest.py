import random
import sys
from collections import deque
from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon_config import DungeonConfig
from dungeon_layout import DungeonLayout
from dungeon_models import Room
from room_carver import carve_rectangular
from themes import Theme, resolve_theme


class ScriptedRandom:
    """Stand-in for ``random.Random`` that replays queued values per method.

    Methods without queued values fall back to ``default`` (randint returns
    its lower bound, randrange returns 0).
    """

    def __init__(
        self,
        *,
        randint: Iterable[int] = (),
        random: Iterable[float] = (),
        uniform: Iterable[float] = (),
        randrange: Iterable[int] = (),
        default_random: float = 0.0,
        default_uniform: float = 0.0,
    ) -> None:
        self._randint = deque(randint)
        self._random = deque(random)
        self._uniform = deque(uniform)
        self._randrange = deque(randrange)
        self.default_random = default_random
        self.default_uniform = default_uniform
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append(("randint", a, b))
        value = self._randint.popleft() if self._randint else a
        assert a <= value <= b, f"scripted randint {value} outside [{a}, {b}]"
        return value

    def random(self) -> float:
        self.calls.append(("random",))
        return self._random.popleft() if self._random else self.default_random

    def uniform(self, a: float, b: float) -> float:
        self.calls.append(("uniform", a, b))
        return self._uniform.popleft() if self._uniform else self.default_uniform

    def randrange(self, stop: int) -> int:
        self.calls.append(("randrange", stop))
        value = self._randrange.popleft() if self._randrange else 0
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def dungeon_theme() -> Theme:
    return resolve_theme("dungeon")


@pytest.fixture
def make_config() -> Callable[..., DungeonConfig]:
    def _make_config(**overrides) -> DungeonConfig:
        kwargs = dict(width=40, height=30, theme="dungeon", room_count=8)
        kwargs.update(overrides)
        return DungeonConfig(**kwargs)

    return _make_config


@pytest.fixture
def make_layout(make_config) -> Callable[..., DungeonLayout]:
    def _make_layout(rooms: Optional[Iterable[Room]] = None, **overrides) -> DungeonLayout:
        layout = DungeonLayout(make_config(**overrides))
        for room in rooms or ():
            layout.register_room(room)
            carve_rectangular(layout.grid, room, random.Random(0))
        return layout

    return _make_layout
