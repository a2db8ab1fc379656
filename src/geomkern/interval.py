## closed 1D intervals for geomkern
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
Closed intervals ``[low, high]`` and their relation algebra.

A ``Range`` is the 1D building block of ``Mbr``.  Every predicate takes
either another ``Range`` or a bare number, which is treated as the
degenerate range ``[v, v]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Optional, Tuple, Union

from geomkern.errors import UnsupportedGeometryError

__all__ = ["Range"]

RangeLike = Union["Range", float]


@dataclass(frozen=True)
class Range:
    """Closed interval.  ``Range(v)`` is the degenerate interval ``[v, v]``
    and reversed bounds are swapped so that ``low <= high``."""

    low: float
    high: Optional[float] = None

    def __post_init__(self):
        low = self.low
        high = low if self.high is None else self.high
        if high < low:
            low, high = high, low
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    def _bounds(self, operation: str, value: RangeLike) -> Tuple[float, float]:
        if isinstance(value, Range):
            return value.low, value.high
        if isinstance(value, Real):
            return value, value
        raise UnsupportedGeometryError(operation, self, value)

    @property
    def mid(self) -> float:
        return (self.low + self.high) / 2.0

    def magnitude(self) -> float:
        return self.high - self.low

    def magnitude_squared(self) -> float:
        m = self.high - self.low
        return m * m

    def is_degenerate(self) -> bool:
        return self.low == self.high

    def distance(self, value: RangeLike) -> float:
        """Gap between the nearer ends, zero when the ranges intersect."""
        low, high = self._bounds("distance", value)
        if high < self.low:
            return self.low - high
        if self.high < low:
            return low - self.high
        return 0.0

    def distance_squared(self, value: RangeLike) -> float:
        d = self.distance(value)
        return d * d

    def spatially_equal(self, value: RangeLike) -> bool:
        low, high = self._bounds("spatially_equal", value)
        return self.low == low and self.high == high

    def intersects(self, value: RangeLike) -> bool:
        low, high = self._bounds("intersects", value)
        return self.low <= high and low <= self.high

    def intersects_pair(self, a: float, b: float) -> bool:
        """Test against the range spanned by two unordered values."""
        if b < a:
            a, b = b, a
        return self.low <= b and a <= self.high

    def disjoint(self, value: RangeLike) -> bool:
        return not self.intersects(value)

    def touches(self, value: RangeLike) -> bool:
        """Share exactly one boundary value without interior overlap.

        Two identical degenerate ranges are equal, not touching.
        """
        low, high = self._bounds("touches", value)
        if self.low == self.high and low == high:
            return False
        return self.low == high or self.high == low

    def contains(self, value: RangeLike) -> bool:
        low, high = self._bounds("contains", value)
        return self.low <= low and high <= self.high

    def within(self, value: RangeLike) -> bool:
        low, high = self._bounds("within", value)
        return low <= self.low and self.high <= high

    def overlaps(self, value: RangeLike) -> bool:
        """Interiors intersect, or the ranges are equal."""
        low, high = self._bounds("overlaps", value)
        if self.low < high and low < self.high:
            return True
        return self.low == low and self.high == high

    def crosses(self, value: RangeLike) -> bool:
        """A degenerate range strictly inside a non-degenerate one."""
        low, high = self._bounds("crosses", value)
        if low == high:
            return self.low < low < self.high
        if self.low == self.high:
            return low < self.low < high
        return False

    def encompass(self, value: RangeLike) -> Range:
        low, high = self._bounds("encompass", value)
        return Range(min(self.low, low), max(self.high, high))

    def centered(self, center: float) -> Range:
        """Same size, moved so ``mid == center``."""
        half = (self.high - self.low) / 2.0
        return Range(center - half, center + half)

    def resized(self, size: float) -> Range:
        """Same midpoint, new magnitude ``abs(size)``."""
        if size == 0:
            return Range(self.mid)
        size = abs(size)
        high = (self.low + self.high + size) / 2.0
        return Range(high - size, high)

    def scaled(self, factor: float) -> Range:
        return self.resized(self.magnitude() * factor)
