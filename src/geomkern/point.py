## planar point and vector value types for geomkern
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
Points and vectors in the XY plane.

Both types are immutable two-component values with exact (bitwise
float) equality and a lexicographic total order: X first, then Y.  A
``Point`` is a location, a ``Vector`` is a displacement, and the
arithmetic operators keep the two apart::

    Point + Vector -> Point
    Point - Point  -> Vector
    Point - Vector -> Point
    Vector + Vector -> Vector

A ``Point`` never compares equal to a ``Vector``, even with identical
coordinates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, ClassVar, Tuple

from geomkern.errors import UnsupportedGeometryError

if TYPE_CHECKING:  # pragma: no cover
    from geomkern.mbr import Mbr

__all__ = ["Point", "Vector", "order", "segment_order"]


def _compare(ax: float, ay: float, bx: float, by: float) -> int:
    if ax < bx:
        return -1
    if ax > bx:
        return 1
    if ay < by:
        return -1
    if ay > by:
        return 1
    return 0


@dataclass(frozen=True, order=True)
class Vector:
    """Immutable 2D displacement."""

    x: float
    y: float

    ZERO: ClassVar["Vector"]
    INVALID: ClassVar["Vector"]
    X_UNIT: ClassVar["Vector"]
    Y_UNIT: ClassVar["Vector"]

    def is_valid(self) -> bool:
        return not (math.isnan(self.x) or math.isnan(self.y))

    def is_zero(self) -> bool:
        """``True`` for the "no direction" sentinel."""
        return self.x == 0.0 and self.y == 0.0

    def compare(self, other: Vector) -> int:
        """Lexicographic comparison, returning -1, 0 or 1."""
        return _compare(self.x, self.y, other.x, other.y)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def perp_dot(self, other: Vector) -> float:
        """2D cross product; zero iff the vectors are parallel."""
        return self.x * other.y - self.y * other.x

    def normalized(self) -> Vector:
        """Unit vector with the same heading; the zero vector stays zero."""
        m = self.magnitude()
        if m == 0.0:
            return Vector.ZERO
        return Vector(self.x / m, self.y / m)

    def scaled(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    def negated(self) -> Vector:
        return Vector(-self.x, -self.y)

    def perpendicular_clockwise(self) -> Vector:
        return Vector(self.y, -self.x)

    def perpendicular_counter_clockwise(self) -> Vector:
        return Vector(-self.y, self.x)

    def as_point(self) -> Point:
        return Point(self.x, self.y)

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __neg__(self) -> Vector:
        return self.negated()

    def __mul__(self, factor):
        if isinstance(factor, Real):
            return self.scaled(factor)
        return NotImplemented

    __rmul__ = __mul__

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return self.dot(other)
        return NotImplemented


@dataclass(frozen=True, order=True)
class Point:
    """Immutable 2D location.

    ``Point.INVALID`` carries NaN coordinates and is what degenerate
    computations hand back instead of raising.
    """

    x: float
    y: float

    ZERO: ClassVar["Point"]
    INVALID: ClassVar["Point"]

    def is_valid(self) -> bool:
        return not (math.isnan(self.x) or math.isnan(self.y))

    def compare(self, other: Point) -> int:
        """Lexicographic comparison, returning -1, 0 or 1."""
        return _compare(self.x, self.y, other.x, other.y)

    def distance(self, other: Point) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Point) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def as_vector(self) -> Vector:
        return Vector(self.x, self.y)

    def get_mbr(self) -> Mbr:
        from geomkern.mbr import Mbr

        return Mbr.from_point(self)

    # point/point relations.  A point has no boundary, so it can never
    # touch, cross or overlap another point.

    def _require_point(self, operation: str, other) -> Point:
        if not isinstance(other, Point):
            raise UnsupportedGeometryError(operation, self, other)
        return other

    def spatially_equal(self, other: Point) -> bool:
        return self == self._require_point("spatially_equal", other)

    def within(self, other: Point) -> bool:
        return self == self._require_point("within", other)

    def contains(self, other: Point) -> bool:
        return self == self._require_point("contains", other)

    def disjoint(self, other: Point) -> bool:
        return self != self._require_point("disjoint", other)

    def touches(self, other: Point) -> bool:
        self._require_point("touches", other)
        return False

    def crosses(self, other: Point) -> bool:
        self._require_point("crosses", other)
        return False

    def overlaps(self, other: Point) -> bool:
        self._require_point("overlaps", other)
        return False

    def intersects(self, other) -> bool:
        from geomkern.intersect import intersects

        return intersects(self, other)

    def intersection(self, other):
        from geomkern.intersect import intersection

        return intersection(self, other)

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, factor):
        if isinstance(factor, Real):
            return Point(self.x * factor, self.y * factor)
        return NotImplemented

    __rmul__ = __mul__


Vector.ZERO = Vector(0.0, 0.0)
Vector.INVALID = Vector(math.nan, math.nan)
Vector.X_UNIT = Vector(1.0, 0.0)
Vector.Y_UNIT = Vector(0.0, 1.0)

Point.ZERO = Point(0.0, 0.0)
Point.INVALID = Point(math.nan, math.nan)


def order(a: Point, b: Point) -> Tuple[Point, Point]:
    """Return ``(a, b)`` sorted lexicographically."""

    if a.compare(b) > 0:
        return b, a
    return a, b


def segment_order(a: Point, b: Point, c: Point, d: Point) -> Tuple[Point, Point, Point, Point]:
    """Canonical order for the endpoints of two segments ``ab`` and ``cd``.

    Each pair is sorted first, then the pairs are sorted against each
    other by their first point, falling back to the second point on a
    tie.  Any permutation of the same two segments maps to the same
    tuple, which is what makes segment intersection order-invariant.
    """

    a, b = order(a, b)
    c, d = order(c, d)
    cmp = a.compare(c)
    if cmp > 0 or (cmp == 0 and b.compare(d) > 0):
        return c, d, a, b
    return a, b, c, d
