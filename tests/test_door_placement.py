import random

from corridor_builder import connect
from door_placement import place_doors
from dungeon_models import Room, RoomStyle, TileType
from room_carver import carve_room
from tile_grid import TileGrid


def _doors(grid):
    return {pos.to_tuple() for pos in grid.positions_of(TileType.DOOR)}


def test_corridor_entering_from_the_side_makes_one_door():
    grid = TileGrid(20, 20)
    room = Room(5, 5, 4, 4)
    carve_room(grid, room, RoomStyle.RECTANGULAR)
    connect(grid, 1, 7, 7, 7)

    placed = place_doors(grid, [room])

    assert placed == 1
    assert _doors(grid) == {(5, 7)}
    assert grid.get(4, 7) is TileType.FLOOR


def test_room_without_corridors_gets_no_doors():
    grid = TileGrid(20, 20)
    room = Room(5, 5, 4, 4)
    carve_room(grid, room, RoomStyle.RECTANGULAR)

    assert place_doors(grid, [room]) == 0
    assert grid.count(TileType.DOOR) == 0


def test_corridor_through_room_opens_both_sides():
    grid = TileGrid(20, 20)
    room = Room(5, 5, 4, 4)
    carve_room(grid, room, RoomStyle.RECTANGULAR)
    connect(grid, 1, 6, 15, 6)

    place_doors(grid, [room])

    assert _doors(grid) == {(5, 6), (8, 6)}


def test_corner_entry_from_two_sides_shares_one_door():
    grid = TileGrid(20, 20)
    room = Room(5, 5, 4, 4)
    carve_room(grid, room, RoomStyle.RECTANGULAR)
    grid.carve(4, 5)
    grid.carve(5, 4)

    place_doors(grid, [room])

    # Top ring converts (5, 5) first; the left ring then finds it already a door.
    assert _doors(grid) == {(5, 5)}


def test_corridor_hugging_an_edge_turns_the_edge_into_doors():
    grid = TileGrid(20, 20)
    room = Room(5, 5, 4, 4)
    carve_room(grid, room, RoomStyle.RECTANGULAR)
    connect(grid, 3, 4, 12, 4)

    place_doors(grid, [room])

    assert _doors(grid) == {(5, 5), (6, 5), (7, 5), (8, 5)}


def test_perimeter_outside_grid_is_skipped():
    grid = TileGrid(6, 6)
    room = Room(0, 0, 4, 4)
    carve_room(grid, room, RoomStyle.RECTANGULAR)
    grid.carve(4, 1)

    assert place_doors(grid, [room]) == 1
    assert _doors(grid) == {(3, 1)}


def test_wall_interior_tiles_never_become_doors():
    grid = TileGrid(12, 12)
    room = Room(3, 3, 5, 5)
    # Organic corner left as wall: every draw is above the corner probability.
    carve_room(grid, room, RoomStyle.ORGANIC, _AlwaysHigh())
    grid.carve(2, 3)
    grid.carve(3, 2)

    assert place_doors(grid, [room]) == 0
    assert grid.get(3, 3) is TileType.WALL


def test_doors_keep_a_floor_neighbour_outside_the_room():
    grid = TileGrid(30, 20)
    rooms = [Room(2, 2, 5, 5), Room(12, 10, 6, 4), Room(22, 3, 4, 6)]
    rng = random.Random(5)
    for room in rooms:
        carve_room(grid, room, RoomStyle.RECTANGULAR, rng)
    for a, b in zip(rooms, rooms[1:]):
        connect(grid, a.center.x, a.center.y, b.center.x, b.center.y)

    place_doors(grid, rooms)

    assert grid.count(TileType.DOOR) > 0
    for door in grid.positions_of(TileType.DOOR):
        owner = next(room for room in rooms if room.contains(door.x, door.y))
        outside = [
            n for n in door.neighbors()
            if grid.in_bounds(n.x, n.y) and not owner.contains(n.x, n.y)
        ]
        assert any(grid.get(n.x, n.y) is TileType.FLOOR for n in outside)


class _AlwaysHigh:
    def random(self) -> float:
        return 0.99
