import random

import pytest

from dungeon_generator import generate
from dungeon_models import TileType
from main import main, scatter_elements


def test_main_prints_seed_map_and_summary(capsys):
    main(["--width", "30", "--height", "20", "--rooms", "4", "--seed", "3", "--theme", "cave"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Using random seed 3"
    assert len(lines[1]) == 30
    assert lines[-1].startswith("Generated ")
    assert "30x20 grid" in lines[-1]


def test_main_rejects_invalid_sizes():
    with pytest.raises(SystemExit, match="non-negative"):
        main(["--width", "-3"])


def test_scatter_elements_only_uses_floor():
    result = generate(40, 30, "dungeon", 6, seed=11)

    scattered = scatter_elements(result, 5, random.Random(0))

    assert len(scattered.elements) == 5
    assert all(result.grid.get(e.x, e.y) is TileType.FLOOR for e in scattered.elements)
    assert len({e.id for e in scattered.elements}) == 5
