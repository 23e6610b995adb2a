
from dungeon_geometry import TilePos
from dungeon_models import Corridor, Room, TileType


def test_new_layout_is_solid_wall(make_layout):
    layout = make_layout(width=12, height=7)

    assert (layout.width, layout.height) == (12, 7)
    assert layout.grid.count(TileType.WALL) == 12 * 7
    assert layout.placed_rooms == []
    assert layout.corridors == []


def test_register_returns_sequential_indices(make_layout):
    layout = make_layout()

    assert layout.register_room(Room(2, 2, 4, 4)) == 0
    assert layout.register_room(Room(10, 2, 4, 4)) == 1
    corridor = Corridor(start=TilePos(4, 4), end=TilePos(12, 4), tiles=(TilePos(4, 4),))
    assert layout.register_corridor(corridor) == 0


def test_freeze_snapshots_state(make_layout):
    layout = make_layout([Room(2, 2, 4, 4)], width=20, height=12, theme="forest")

    result = layout.freeze(seed=42, metrics={"place_rooms": {"invocations": 1}})
    layout.register_room(Room(10, 2, 4, 4))
    layout.grid.carve(15, 8)

    assert result.rooms == (Room(2, 2, 4, 4),)
    assert result.grid.get(15, 8) is TileType.WALL
    assert result.theme.key == "forest"
    assert result.seed == 42
    assert result.metrics == {"place_rooms": {"invocations": 1}}
    assert result.elements == ()
