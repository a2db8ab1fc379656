## minimum bounding rectangles for geomkern
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
Axis-aligned minimum bounding rectangles.

An ``Mbr`` is the product of two ``Range`` objects.  Most predicates are
the componentwise lift of the ``Range`` predicates, but ``crosses`` and
``overlaps`` depend on the dimension of each rectangle: a rectangle
with zero width or zero height is really a segment, and one with both
is really a point.  The rules follow the DE-9IM model restricted to
axis-aligned boxes:

* ``crosses`` needs exactly one 1D operand and one 2D operand, with the
  1D operand passing through the interior of the other and leaving it.
* ``overlaps`` needs two operands of the same shape (never points)
  whose interiors meet, where neither contains the other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from geomkern.errors import UnsupportedGeometryError
from geomkern.interval import Range
from geomkern.point import Point, Vector

__all__ = ["Mbr"]

MbrLike = Union["Mbr", Point]


@dataclass(frozen=True)
class Mbr:
    """Minimum bounding rectangle built from an X and a Y range."""

    x: Range
    y: Range

    @classmethod
    def from_bounds(cls, xa: float, ya: float, xb: float, yb: float) -> Mbr:
        """Rectangle with corners ``(xa, ya)`` and ``(xb, yb)``, in any order."""
        return cls(Range(xa, xb), Range(ya, yb))

    @classmethod
    def from_point(cls, p: Point) -> Mbr:
        return cls(Range(p.x), Range(p.y))

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Mbr:
        return cls(Range(a.x, b.x), Range(a.y, b.y))

    @classmethod
    def create(cls, points: Iterable[Point]) -> Optional[Mbr]:
        """Smallest rectangle enclosing ``points``, or ``None`` if empty.

        Single pass with a running min/max, so any iterable works.
        """
        if points is None:
            raise TypeError("create() requires an iterable of points, not None")
        it = iter(points)
        try:
            first = next(it)
        except StopIteration:
            return None
        xmin = xmax = first.x
        ymin = ymax = first.y
        for p in it:
            if p.x < xmin:
                xmin = p.x
            elif p.x > xmax:
                xmax = p.x
            if p.y < ymin:
                ymin = p.y
            elif p.y > ymax:
                ymax = p.y
        return cls(Range(xmin, xmax), Range(ymin, ymax))

    @classmethod
    def from_array(cls, coords) -> Optional[Mbr]:
        """Rectangle enclosing an ``(N, 2)`` array of XY coordinates.

        Returns ``None`` for an empty array.
        """
        arr = np.asarray(coords, dtype=float)
        if arr.size == 0:
            return None
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"coordinate array must have shape (N, 2), got {arr.shape}")
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(Range(float(lo[0]), float(hi[0])), Range(float(lo[1]), float(hi[1])))

    @property
    def x_min(self) -> float:
        return self.x.low

    @property
    def x_max(self) -> float:
        return self.x.high

    @property
    def y_min(self) -> float:
        return self.y.low

    @property
    def y_max(self) -> float:
        return self.y.high

    @property
    def min_point(self) -> Point:
        return Point(self.x.low, self.y.low)

    @property
    def max_point(self) -> Point:
        return Point(self.x.high, self.y.high)

    @property
    def width(self) -> float:
        return self.x.magnitude()

    @property
    def height(self) -> float:
        return self.y.magnitude()

    def area(self) -> float:
        return self.width * self.height

    def centroid(self) -> Point:
        return Point(self.x.mid, self.y.mid)

    def dimension(self) -> int:
        """0 for a point, 1 for a horizontal or vertical segment, 2 otherwise."""
        return (self.x.low != self.x.high) + (self.y.low != self.y.high)

    def encompass(self, other: Optional[MbrLike]) -> Mbr:
        if other is None:
            return self
        ox, oy = self._ranges("encompass", other)
        return Mbr(self.x.encompass(ox), self.y.encompass(oy))

    def scaled(self, fx, fy: Optional[float] = None) -> Mbr:
        """Scale about the centroid by one factor, two factors or a ``Vector``."""
        if isinstance(fx, Vector):
            fx, fy = fx.x, fx.y
        elif fy is None:
            fy = fx
        return Mbr(self.x.scaled(fx), self.y.scaled(fy))

    def _ranges(self, operation: str, other) -> Tuple[Range, Range]:
        if isinstance(other, Mbr):
            return other.x, other.y
        if isinstance(other, Point):
            return Range(other.x), Range(other.y)
        raise UnsupportedGeometryError(operation, self, other)

    def distance(self, other: MbrLike) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: MbrLike) -> float:
        ox, oy = self._ranges("distance_squared", other)
        return self.x.distance_squared(ox) + self.y.distance_squared(oy)

    def spatially_equal(self, other: MbrLike) -> bool:
        ox, oy = self._ranges("spatially_equal", other)
        return self.x.spatially_equal(ox) and self.y.spatially_equal(oy)

    def intersects(self, other: MbrLike) -> bool:
        ox, oy = self._ranges("intersects", other)
        return self.x.intersects(ox) and self.y.intersects(oy)

    def intersects_segment(self, a: Point, b: Point) -> bool:
        """Test against the bounding box of the segment ``ab``."""
        return self.x.intersects_pair(a.x, b.x) and self.y.intersects_pair(a.y, b.y)

    def disjoint(self, other: MbrLike) -> bool:
        return not self.intersects(other)

    def contains(self, other: MbrLike) -> bool:
        ox, oy = self._ranges("contains", other)
        return self.x.contains(ox) and self.y.contains(oy)

    def within(self, other: MbrLike) -> bool:
        ox, oy = self._ranges("within", other)
        return self.x.within(ox) and self.y.within(oy)

    def touches(self, other: MbrLike) -> bool:
        """Boundaries meet and interiors do not.

        A shared corner counts, since both axes touch there.
        """
        ox, oy = self._ranges("touches", other)
        return ((self.x.touches(ox) and self.y.intersects(oy))
                or (self.y.touches(oy) and self.x.intersects(ox)))

    def _require_mbr(self, operation: str, other) -> bool:
        """``False`` for a point, which never crosses or overlaps anything."""
        if isinstance(other, Mbr):
            return True
        if isinstance(other, Point):
            return False
        raise UnsupportedGeometryError(operation, self, other)

    def crosses(self, other: MbrLike) -> bool:
        if not self._require_mbr("crosses", other):
            return False
        dims = (self.dimension(), other.dimension())
        if sorted(dims) != [1, 2]:
            return False
        line, box = (self, other) if dims[0] == 1 else (other, self)
        if line.x.low == line.x.high:
            fixed, span = line.x, line.y
            box_fixed, box_span = box.x, box.y
        else:
            fixed, span = line.y, line.x
            box_fixed, box_span = box.y, box.x
        # the segment must pass through the interior and leave it
        return (box_fixed.crosses(fixed)
                and span.low < box_span.high and box_span.low < span.high
                and not span.within(box_span))

    def overlaps(self, other: MbrLike) -> bool:
        if not self._require_mbr("overlaps", other):
            return False
        dim = self.dimension()
        if dim == 0 or dim != other.dimension():
            return False
        if dim == 1 and (self.x.low == self.x.high) != (other.x.low == other.x.high):
            return False
        if self.contains(other) or self.within(other):
            return False
        return self.x.overlaps(other.x) and self.y.overlaps(other.y)
