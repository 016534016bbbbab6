import pytest

from starforge.rect import Rect
from starforge.vector import Vector2


def test_from_vectors_round_trip():
    r = Rect.from_vectors(Vector2(3, 4), Vector2(10, 20))
    assert r == Rect(3, 4, 10, 20)
    assert r.position() == Vector2(3, 4)
    assert r.size() == Vector2(10, 20)


def test_contains_is_half_open():
    r = Rect(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert r.contains(Vector2(9, 9))
    assert not r.contains(10, 5)
    assert not r.contains(5, 10)


def test_contains_with_negative_dimensions():
    r = Rect(10, 10, -10, -10)
    assert r.contains(5, 5)
    assert not r.contains(10, 10)


def test_contains_bad_arguments():
    with pytest.raises(TypeError):
        Rect(0, 0, 1, 1).contains(1, 2, 3)


def test_intersection_with_itself():
    r = Rect(2, 3, 7, 8)
    assert r.find_intersection(r) == r


def test_intersection_overlap():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.find_intersection(b) == Rect(5, 5, 5, 5)


def test_intersection_is_symmetric():
    a = Rect(-4, 1, 9, 6)
    b = Rect(2, -3, 5, 7)
    assert a.find_intersection(b) == b.find_intersection(a)


def test_intersection_disjoint_is_none():
    assert Rect(0, 0, 5, 5).find_intersection(Rect(20, 20, 5, 5)) is None


def test_touching_edges_do_not_intersect():
    assert Rect(0, 0, 5, 5).find_intersection(Rect(5, 0, 5, 5)) is None


def test_intersection_normalises_negative_rect():
    a = Rect(10, 10, -10, -10)
    b = Rect(0, 0, 10, 10)
    assert a.find_intersection(b) == b


def test_intersection_lies_within_both():
    a = Rect(0, 0, 8, 6)
    b = Rect(3, 2, 10, 10)
    inter = a.find_intersection(b)
    corner = inter.position()
    assert a.contains(corner) and b.contains(corner)