import math

import pytest

from flatpack.geometry import Rect, Vec2, dot, normalize


def test_vector_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.25, 4.0)
    assert (a + b) - b == a


def test_vector_scale_and_divide_round_trip():
    v = Vec2(2.0, -6.0)
    assert (v * 4.0) / 4.0 == v
    assert 4.0 * v == v * 4.0


def test_negation_cancels():
    v = Vec2(7.0, -3.0)
    assert v + (-v) == Vec2(0.0, 0.0)


def test_vector_unpacks():
    x, y = Vec2(9.0, 11.0)
    assert (x, y) == (9.0, 11.0)


def test_length_matches_self_dot():
    v = Vec2(3.0, 4.0)
    assert v.length() ** 2 == pytest.approx(dot(v, v))


def test_dot_orthogonal_is_zero():
    assert dot(Vec2(2.0, 0.0), Vec2(0.0, 5.0)) == 0.0


@pytest.mark.parametrize("v", [Vec2(3.0, 4.0), Vec2(-1.0, 0.5), Vec2(0.0, -9.0)])
def test_normalize_gives_unit_length(v):
    n = normalize(v)
    assert n.length() == pytest.approx(1.0)
    assert math.copysign(1.0, n.x) == math.copysign(1.0, v.x) or v.x == 0


def test_normalize_zero_vector_unchanged():
    assert normalize(Vec2(0.0, 0.0)) == Vec2(0.0, 0.0)


def test_rect_contains_edges():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.contains(r.left, r.top)
    assert not r.contains(r.right, r.top)
    assert not r.contains(r.left, r.bottom)


def test_rect_intersection_with_itself():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    assert r.intersection(r) == r


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(10.0, 0.0, 10.0, 10.0)
    assert not a.intersects(b)
    assert a.intersection(b) is None


def test_rect_intersection_is_symmetric_and_inside_both():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 3.0, 10.0, 10.0)
    inter = a.intersection(b)
    assert inter == b.intersection(a)
    assert inter.left >= a.left and inter.left >= b.left
    assert inter.right <= a.right and inter.right <= b.right
    assert inter.bottom <= a.bottom and inter.bottom <= b.bottom


def test_rect_negative_size_is_handled():
    r = Rect(10.0, 10.0, -5.0, -5.0)
    assert r.contains(7.0, 7.0)
    assert r.intersects(Rect(6.0, 6.0, 2.0, 2.0))


def test_rect_center():
    r = Rect(0.0, 0.0, 8.0, 6.0)
    assert r.center == Vec2(8.0 / 2, 6.0 / 2)