## lines, rays and segments for geomkern
## Born on 18 October 2026
## Copyright (c) 2020 Richard DeVaul

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Linear primitives: ``Line`` (unbounded), ``Ray`` (half-bounded) and
``Segment`` (bounded).

Lines and rays are an origin ``p`` plus a ``direction``; a segment is
two endpoints ``a`` and ``b`` with no preferred orientation.  A zero
direction or a zero-length segment is legal and behaves like the
single point it collapses to.

Each primitive offers the same contract: ``magnitude``, ``get_mbr``,
``distance``/``distance_squared`` to a point, ``intersects_point`` and
the generic ``intersects``/``intersection`` which dispatch through
:mod:`geomkern.intersect`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from geomkern.interval import Range
from geomkern.mbr import Mbr
from geomkern.point import Point, Vector, order

__all__ = ["Line", "Ray", "Segment"]

_EVERYWHERE = Range(-math.inf, math.inf)


def _clamp(value: float) -> float:
    # rounding must never produce a negative squared distance; NaN passes
    return 0.0 if value < 0.0 else value


def _perp_distance_squared(d: Vector, v: Vector) -> float:
    """Squared distance from the tip of ``v`` to the line along ``d``."""
    c = d.perp_dot(v)
    return _clamp(c * c / d.magnitude_squared())


class _Curve:
    """Dispatch shared by the linear primitives."""

    def distance(self, point: Point) -> float:
        return math.sqrt(self.distance_squared(point))

    def intersects(self, other) -> bool:
        from geomkern.intersect import intersects

        return intersects(self, other)

    def intersection(self, other):
        from geomkern.intersect import intersection

        return intersection(self, other)


@dataclass(frozen=True)
class Line(_Curve):
    """Infinite line through ``p`` along ``direction``."""

    p: Point
    direction: Vector

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Line:
        return cls(a, b - a)

    @classmethod
    def slope_intercept(cls, slope: float, intercept: float) -> Line:
        """The line ``y = slope * x + intercept``."""
        return cls(Point(0.0, intercept), Vector(1.0, slope))

    @classmethod
    def standard(cls, a: float, b: float, c: float) -> Line:
        """The line ``a*x + b*y = c``."""
        if a != 0:
            p = Point(c / a, 0.0)
        elif b != 0:
            p = Point(0.0, c / b)
        else:
            raise ValueError('bad values passed to Line.standard(), a and b are both zero')
        return cls(p, Vector(b, -a))

    @classmethod
    def general(cls, a: float, b: float, c: float) -> Line:
        """The line ``a*x + b*y + c = 0``."""
        return cls.standard(a, b, -c)

    def is_valid(self) -> bool:
        return self.p.is_valid() and self.direction.is_valid() and not self.direction.is_zero()

    def magnitude(self) -> float:
        return 0.0 if self.direction.is_zero() else math.inf

    def magnitude_squared(self) -> float:
        return self.magnitude()

    def get_mbr(self) -> Mbr:
        d = self.direction
        x = Range(self.p.x) if d.x == 0.0 else _EVERYWHERE
        y = Range(self.p.y) if d.y == 0.0 else _EVERYWHERE
        return Mbr(x, y)

    def distance_squared(self, point: Point) -> float:
        v = point - self.p
        if self.direction.is_zero():
            return v.magnitude_squared()
        return _perp_distance_squared(self.direction, v)

    def intersects_point(self, point: Point) -> bool:
        if self.direction.is_zero():
            return point == self.p
        return self.direction.perp_dot(point - self.p) == 0.0


@dataclass(frozen=True)
class Ray(_Curve):
    """Half-line starting at ``p`` and heading along ``direction``."""

    p: Point
    direction: Vector

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Ray:
        """Ray from ``a`` through ``b``."""
        return cls(a, b - a)

    def is_valid(self) -> bool:
        return self.p.is_valid() and self.direction.is_valid() and not self.direction.is_zero()

    def reversed(self) -> Ray:
        return Ray(self.p, -self.direction)

    def spatially_equal(self, other: Ray) -> bool:
        """Same origin and same heading, whatever the direction magnitudes."""
        d0, d1 = self.direction, other.direction
        if d0.is_zero() or d1.is_zero():
            return self.p == other.p and d0.is_zero() and d1.is_zero()
        return self.p == other.p and d0.perp_dot(d1) == 0.0 and d0.dot(d1) > 0.0

    def magnitude(self) -> float:
        return 0.0 if self.direction.is_zero() else math.inf

    def magnitude_squared(self) -> float:
        return self.magnitude()

    def get_mbr(self) -> Mbr:
        # each axis runs from the origin toward the infinity the ray heads for
        p, d = self.p, self.direction
        if d.x > 0.0:
            x = Range(p.x, math.inf)
        elif d.x < 0.0:
            x = Range(-math.inf, p.x)
        else:
            x = Range(p.x)
        if d.y > 0.0:
            y = Range(p.y, math.inf)
        elif d.y < 0.0:
            y = Range(-math.inf, p.y)
        else:
            y = Range(p.y)
        return Mbr(x, y)

    def distance_squared(self, point: Point) -> float:
        v = point - self.p
        if self.direction.dot(v) <= 0.0:
            return v.magnitude_squared()
        return _perp_distance_squared(self.direction, v)

    def intersects_point(self, point: Point) -> bool:
        v = point - self.p
        if v.is_zero():
            return True
        if self.direction.dot(v) <= 0.0:
            return False
        return self.direction.perp_dot(v) == 0.0


@dataclass(frozen=True)
class Segment(_Curve):
    """Bounded segment between ``a`` and ``b``."""

    a: Point
    b: Point

    @classmethod
    def from_direction(cls, p: Point, d: Vector) -> Segment:
        return cls(p, p + d)

    @property
    def direction(self) -> Vector:
        return self.b - self.a

    def is_valid(self) -> bool:
        return self.a.is_valid() and self.b.is_valid()

    def reversed(self) -> Segment:
        return Segment(self.b, self.a)

    def compare(self, other: Segment) -> int:
        """Total order on segments, returning -1, 0 or 1.

        Endpoints are sorted within each segment first, so orientation
        is ignored; then the low endpoints decide and the high endpoints
        break a tie.
        """
        a, b = order(self.a, self.b)
        c, d = order(other.a, other.b)
        return a.compare(c) or b.compare(d)

    def __lt__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self.compare(other) < 0

    def spatially_equal(self, other: Segment) -> bool:
        """Same endpoints in either orientation."""
        return ((self.a == other.a and self.b == other.b)
                or (self.a == other.b and self.b == other.a))

    def magnitude(self) -> float:
        return self.a.distance(self.b)

    def magnitude_squared(self) -> float:
        return self.a.distance_squared(self.b)

    def get_mbr(self) -> Mbr:
        return Mbr.from_points(self.a, self.b)

    def centroid(self) -> Point:
        return Point((self.a.x + self.b.x) / 2.0, (self.a.y + self.b.y) / 2.0)

    def distance_squared(self, point: Point) -> float:
        a, b = order(self.a, self.b)
        d = b - a
        v = point - a
        along = d.dot(v)
        if along <= 0.0:
            return v.magnitude_squared()
        if along >= d.magnitude_squared():
            return point.distance_squared(b)
        return _perp_distance_squared(d, v)

    def intersects_point(self, point: Point) -> bool:
        if point == self.a or point == self.b:
            return True
        a, b = order(self.a, self.b)
        d = b - a
        v = point - a
        along = d.dot(v)
        if along <= 0.0 or along >= d.magnitude_squared():
            return False
        return d.perp_dot(v) == 0.0
