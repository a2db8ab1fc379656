import math

import pytest
from geomkern.point import *
from geomkern.mbr import Mbr
from geomkern.errors import UnsupportedGeometryError
## unit tests for geomkern point.py

class TestPoint:
    """unit tests for Point"""

    def test_create(self):
        a = Point(5, 0)
        assert a.x == 5 and a.y == 0
        assert a == Point(5.0, 0.0)
        assert a != Point(0, 5)
        assert Point.ZERO == Point(0, 0)

    def test_invalid(self):
        assert Point(1, 2).is_valid()
        assert not Point.INVALID.is_valid()
        assert not Point(math.nan, 0).is_valid()
        assert not Point(0, math.nan).is_valid()

    def test_point_is_not_vector(self):
        assert Point(1, 2) != Vector(1, 2)

    def test_order(self):
        assert Point(1, 5) < Point(2, 0)
        assert Point(1, 1) < Point(1, 2)
        assert not Point(1, 2) < Point(1, 2)
        assert Point(3, 3).compare(Point(3, 3)) == 0
        assert Point(3, 3).compare(Point(3, 4)) == -1
        assert Point(4, 0).compare(Point(3, 9)) == 1
        assert sorted([Point(2, 1), Point(1, 2), Point(1, 1)]) == \
            [Point(1, 1), Point(1, 2), Point(2, 1)]

    def test_hashable(self):
        assert len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}) == 2

    def test_arithmetic(self):
        a = Point(1, 2)
        b = Point(4, 6)
        assert b - a == Vector(3, 4)
        assert a + Vector(3, 4) == b
        assert b - Vector(3, 4) == a
        assert a * 2 == Point(2, 4)
        assert 2 * a == Point(2, 4)
        with pytest.raises(TypeError):
            a + b

    def test_distance(self):
        a = Point(1, 2)
        b = Point(4, 6)
        assert a.distance(b) == 5.0
        assert a.distance_squared(b) == 25.0
        assert b.distance(a) == 5.0
        assert math.isnan(a.distance(Point.INVALID))

    def test_get_mbr(self):
        m = Point(3, -2).get_mbr()
        assert m == Mbr.from_bounds(3, -2, 3, -2)
        assert m.width == 0 and m.height == 0

    def test_relations(self):
        a = Point(1, 2)
        b = Point(1, 2)
        c = Point(2, 1)
        assert a.spatially_equal(b)
        assert a.within(b) and a.contains(b) and a.intersects(b)
        assert not a.disjoint(b)
        assert a.disjoint(c)
        assert not a.within(c) and not a.contains(c) and not a.intersects(c)
        for q in (b, c):
            assert not a.touches(q)
            assert not a.crosses(q)
            assert not a.overlaps(q)

    def test_relation_bad_operand(self):
        with pytest.raises(UnsupportedGeometryError):
            Point(1, 2).within(Vector(1, 2))
        with pytest.raises(TypeError):
            Point(1, 2).touches(None)


class TestVector:
    """unit tests for Vector"""

    def test_constants(self):
        assert Vector.ZERO == Vector(0, 0)
        assert Vector.X_UNIT == Vector(1, 0)
        assert Vector.Y_UNIT == Vector(0, 1)
        assert not Vector.INVALID.is_valid()
        assert Vector.ZERO.is_zero()
        assert not Vector.X_UNIT.is_zero()

    def test_magnitude(self):
        v = Vector(3, -4)
        assert v.magnitude() == 5.0
        assert v.magnitude_squared() == 25
        assert Vector.ZERO.magnitude() == 0.0

    def test_arithmetic(self):
        v = Vector(1, 2)
        w = Vector(3, -1)
        assert v + w == Vector(4, 1)
        assert v - w == Vector(-2, 3)
        assert -v == Vector(-1, -2)
        assert v.negated() == Vector(-1, -2)
        assert v * 3 == Vector(3, 6)
        assert 3 * v == Vector(3, 6)
        assert v.scaled(0.5) == Vector(0.5, 1.0)
        assert v + Point(1, 1) == Point(2, 3)

    def test_products(self):
        v = Vector(1, 2)
        w = Vector(3, -1)
        assert v.dot(w) == 1
        assert v @ w == 1
        assert v.perp_dot(w) == -7
        assert w.perp_dot(v) == 7
        assert v.perp_dot(v * 4) == 0

    def test_normalized(self):
        n = Vector(3, 4).normalized()
        assert math.isclose(n.x, 0.6)
        assert math.isclose(n.y, 0.8)
        assert math.isclose(n.magnitude(), 1.0)
        assert Vector.ZERO.normalized() == Vector.ZERO

    def test_perpendiculars(self):
        v = Vector(2, 1)
        assert v.perpendicular_clockwise() == Vector(1, -2)
        assert v.perpendicular_counter_clockwise() == Vector(-1, 2)
        assert v.dot(v.perpendicular_clockwise()) == 0
        assert v.perp_dot(v.perpendicular_counter_clockwise()) > 0

    def test_conversion(self):
        assert Vector(1, 2).as_point() == Point(1, 2)
        assert Point(1, 2).as_vector() == Vector(1, 2)


class TestOrdering:
    """canonicalization helpers"""

    def test_order(self):
        a = Point(2, 0)
        b = Point(1, 5)
        assert order(a, b) == (b, a)
        assert order(b, a) == (b, a)
        assert order(a, a) == (a, a)

    def test_segment_order_pairs(self):
        a, b, c, d = Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 0)
        expected = segment_order(a, b, c, d)
        assert expected == (a, b, c, d)
        assert segment_order(b, a, d, c) == expected
        assert segment_order(c, d, a, b) == expected
        assert segment_order(d, c, b, a) == expected

    def test_segment_order_tiebreak(self):
        a = Point(0, 0)
        b = Point(3, 3)
        d = Point(1, 1)
        # same first point, ordered by second point
        assert segment_order(a, b, a, d) == (a, d, a, b)
        assert segment_order(a, d, a, b) == (a, d, a, b)

    def test_segment_order_is_pure(self):
        pts = [Point(5, 5), Point(0, 0), Point(3, 1), Point(1, 3)]
        segment_order(*pts)
        assert pts == [Point(5, 5), Point(0, 0), Point(3, 1), Point(1, 3)]
