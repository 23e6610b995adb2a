import pytest

from dungeon_geometry import Direction, Rect, TilePos


@pytest.mark.parametrize(
    "rect_a,rect_b,expected",
    [
        (Rect(0, 0, 3, 3), Rect(2, 2, 3, 3), True),
        (Rect(0, 0, 2, 2), Rect(2, 2, 2, 2), False),
        (Rect(0, 0, 5, 5), Rect(5, 0, 3, 3), False),
    ],
)
def test_rect_overlaps(rect_a, rect_b, expected):
    assert rect_a.overlaps(rect_b) is expected
    assert rect_b.overlaps(rect_a) is expected


def test_rect_expand_grows_every_side():
    rect = Rect(2, 3, 4, 5)

    assert rect.expand(2) == Rect(0, 1, 8, 9)
    assert rect.expand(0) == rect


def test_expanded_rects_with_one_tile_gap_touch():
    left = Rect(1, 1, 4, 4)
    right = Rect(6, 1, 4, 4)

    assert not left.overlaps(right)
    assert left.expand(1).overlaps(right.expand(1))


def test_rect_iter_tiles_and_corners():
    rect = Rect(1, 2, 3, 2)

    tiles = list(rect.iter_tiles())

    assert len(tiles) == 6
    assert tiles[0] == TilePos(1, 2)
    assert tiles[-1] == TilePos(3, 3)
    assert rect.corners() == (TilePos(1, 2), TilePos(3, 2), TilePos(1, 3), TilePos(3, 3))
    assert all(rect.contains(tile) for tile in tiles)
    assert not rect.contains(TilePos(4, 2))


def test_tile_pos_neighbors_and_steps():
    pos = TilePos(5, 5)

    assert pos.neighbors() == (TilePos(5, 4), TilePos(6, 5), TilePos(5, 6), TilePos(4, 5))
    assert pos.step(Direction.WEST) == TilePos(4, 5)
    assert tuple(pos) == (5, 5)
    assert pos.to_tuple() == (5, 5)
    assert (Direction.SOUTH.dx, Direction.SOUTH.dy) == (0, 1)
