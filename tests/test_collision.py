import pytest

from flatpack.collision import (
    CollisionSide,
    collision_side,
    polygons_collide,
    sat_overlap,
    transformed_corners,
)
from flatpack.geometry import Rect, Vec2


def square(x, y, size):
    return [Vec2(x, y), Vec2(x + size, y), Vec2(x + size, y + size), Vec2(x, y + size)]


def test_disjoint_rects_have_no_side():
    assert collision_side(Rect(0, 0, 5, 5), Rect(50, 50, 5, 5)) is CollisionSide.NONE


def test_horizontal_overlap_sides():
    a = Rect(0, 0, 10, 10)
    b = Rect(9, 0, 10, 10)
    assert collision_side(a, b) is CollisionSide.RIGHT
    assert collision_side(b, a) is CollisionSide.LEFT


def test_vertical_overlap_sides():
    a = Rect(0, 0, 10, 10)
    b = Rect(0, 9, 10, 10)
    assert collision_side(a, b) is CollisionSide.BOTTOM
    assert collision_side(b, a) is CollisionSide.TOP


def test_identical_squares_collide():
    s = square(0, 0, 10)
    assert polygons_collide(s, s)


def test_far_squares_do_not_collide():
    assert not polygons_collide(square(0, 0, 10), square(100, 100, 10))


def test_diamond_near_corner_separated_despite_bbox_overlap():
    box = square(0, 0, 10)
    diamond = [Vec2(16, 9), Vec2(23, 16), Vec2(16, 23), Vec2(9, 16)]
    assert Rect(0, 0, 10, 10).intersects(Rect(9, 9, 14, 14))
    assert not polygons_collide(box, diamond)
    assert not polygons_collide(diamond, box)


def test_sat_one_direction_from_box_misses_separation():
    box = square(0, 0, 10)
    diamond = [Vec2(16, 9), Vec2(23, 16), Vec2(16, 23), Vec2(9, 16)]
    assert sat_overlap(box, diamond)
    assert not sat_overlap(diamond, box)


def test_corners_without_transform():
    pos = Vec2(5.0, 7.0)
    corners = transformed_corners(pos, (0, 0), (1, 1), 0.0, 3.0, 2.0)
    assert corners == [
        pos,
        pos + Vec2(3.0, 0.0),
        pos + Vec2(3.0, 2.0),
        pos + Vec2(0.0, 2.0),
    ]


def test_corners_centred_origin_average_to_position():
    pos = Vec2(40.0, 25.0)
    corners = transformed_corners(pos, (6.0, 4.0), (2.0, 1.5), 33.0, 12.0, 8.0)
    cx = sum(c.x for c in corners) / len(corners)
    cy = sum(c.y for c in corners) / len(corners)
    assert cx == pytest.approx(pos.x)
    assert cy == pytest.approx(pos.y)


def test_rotation_preserves_side_lengths():
    corners = transformed_corners((0, 0), (0, 0), (1, 1), 90.0, 3.0, 2.0)
    assert (corners[1] - corners[0]).length() == pytest.approx(3.0)
    assert (corners[2] - corners[1]).length() == pytest.approx(2.0)


def test_full_turn_matches_no_rotation():
    a = transformed_corners((1, 2), (0.5, 0.5), (1, 1), 0.0, 4.0, 4.0)
    b = transformed_corners((1, 2), (0.5, 0.5), (1, 1), 360.0, 4.0, 4.0)
    for p, q in zip(a, b):
        assert p.x == pytest.approx(q.x)
        assert p.y == pytest.approx(q.y)