## intersection engine for geomkern linear primitives
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
Pairwise intersection of points, lines, rays and segments.

Every pair routine follows the same plan:

1. canonicalize the operands, so that both call orders run the same
   arithmetic and produce bit-identical answers;
2. if the directions are not parallel (``cross != 0``), solve for the
   parameters with Cramer's rule and clip them to each operand's
   bounds, returning a stored endpoint whenever a parameter lands
   exactly on one;
3. if they are parallel, test collinearity and, when collinear, clip
   the 1D overlap along the shared line.

The type of the result reflects the shape of the overlap: ``None`` for
nothing, then ``Point``, ``Segment``, ``Ray`` or ``Line``.

All zero tests are exact.  There is no tolerance anywhere in here;
callers that need one should snap their coordinates first.

For mixed pairs the bounded operand is always "this" (parameter
``s``) and the other one supplies ``t``::

    s = (e x d1) / (d0 x d1)      t = (e x d0) / (d0 x d1)

where ``e`` is the vector from this origin to the other origin.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from geomkern.errors import UnsupportedGeometryError
from geomkern.linear import Line, Ray, Segment
from geomkern.point import Point, order, segment_order

logger = logging.getLogger(__name__)

__all__ = [
    "Geometry",
    "intersection",
    "intersects",
    "line_line",
    "ray_line",
    "ray_ray",
    "segment_intersection",
    "segment_intersects",
    "segment_line",
    "segment_ray",
    "segment_segment",
]

Geometry = Union[Point, Segment, Ray, Line]


def _collapse(q: Point, other) -> Optional[Point]:
    """A degenerate operand behaves as the point ``q``."""
    logger.debug("degenerate operand treated as point %r", q)
    return q if other.intersects_point(q) else None


def _origin_order(g1, g2):
    """Order two lines or rays by origin, then by direction."""
    cmp = g1.p.compare(g2.p)
    if cmp > 0 or (cmp == 0 and g1.direction.compare(g2.direction) > 0):
        return g2, g1
    return g1, g2


## segment / segment

def segment_intersection(a: Point, b: Point, c: Point, d: Point) -> Optional[Geometry]:
    """Intersect the segments ``ab`` and ``cd``.

    The result is the same for any ordering of the endpoints within
    each pair and for either order of the pairs.
    """

    a, b, c, d = segment_order(a, b, c, d)

    if a == b:
        return _collapse(a, Segment(c, d))
    if c == d:
        return _collapse(c, Segment(a, b))

    d0 = b - a
    d1 = d - c
    e = c - a
    cross = d0.perp_dot(d1)

    if cross != 0.0:
        s = e.perp_dot(d1) / cross
        if s < 0.0 or s > 1.0:
            return None
        t = e.perp_dot(d0) / cross
        if t < 0.0 or t > 1.0:
            return None
        if s == 0.0:
            return a
        if s == 1.0:
            return b
        if t == 0.0:
            return c
        if t == 1.0:
            return d
        return a + d0 * s

    if e.perp_dot(d0) != 0.0:
        return None

    # Collinear.  Both pairs are sorted, so they run the same way along
    # the shared line and lexicographic order is parameter order.  With
    # a <= c the overlap is [c, min(b, d)].
    cmp = c.compare(b)
    if cmp > 0:
        return None
    if cmp == 0:
        return b
    if d.compare(b) < 0:
        return Segment(c, d)
    return Segment(c, b)


def segment_intersects(a: Point, b: Point, c: Point, d: Point) -> bool:
    return segment_intersection(a, b, c, d) is not None


def segment_segment(s1: Segment, s2: Segment) -> Optional[Geometry]:
    return segment_intersection(s1.a, s1.b, s2.a, s2.b)


## segment / ray

def segment_ray(seg: Segment, ray: Ray) -> Optional[Geometry]:
    a, b = order(seg.a, seg.b)
    p, d1 = ray.p, ray.direction

    if d1.is_zero():
        return _collapse(p, seg)
    if a == b:
        return _collapse(a, ray)

    d0 = b - a
    e = p - a
    cross = d0.perp_dot(d1)

    if cross != 0.0:
        s = e.perp_dot(d1) / cross
        if s < 0.0 or s > 1.0:
            return None
        t = e.perp_dot(d0) / cross
        if t < 0.0:
            return None
        if s == 0.0:
            return a
        if s == 1.0:
            return b
        if t == 0.0:
            return p
        return a + d0 * s

    if e.perp_dot(d0) != 0.0:
        return None

    # collinear: the ray covers everything on one side of p
    if d0.dot(d1) > 0.0:
        if p.compare(b) > 0:
            return None
        if p == b:
            return b
        if p.compare(a) <= 0:
            return Segment(a, b)
        return Segment(p, b)
    if p.compare(a) < 0:
        return None
    if p == a:
        return a
    if p.compare(b) >= 0:
        return Segment(a, b)
    return Segment(a, p)


## segment / line

def segment_line(seg: Segment, line: Line) -> Optional[Geometry]:
    a, b = order(seg.a, seg.b)
    p, d1 = line.p, line.direction

    if d1.is_zero():
        return _collapse(p, seg)
    if a == b:
        return _collapse(a, line)

    # endpoints lying on the line come back exactly
    on_a = line.intersects_point(a)
    on_b = line.intersects_point(b)
    if on_a and on_b:
        return Segment(a, b)
    if on_a:
        return a
    if on_b:
        return b

    d0 = b - a
    cross = d0.perp_dot(d1)
    if cross == 0.0:
        return None
    s = (p - a).perp_dot(d1) / cross
    if s <= 0.0 or s >= 1.0:
        return None
    return a + d0 * s


## ray / ray

def ray_ray(r1: Ray, r2: Ray) -> Optional[Geometry]:
    r1, r2 = _origin_order(r1, r2)
    a, d0 = r1.p, r1.direction
    c, d1 = r2.p, r2.direction

    if d0.is_zero():
        return _collapse(a, r2)
    if d1.is_zero():
        return _collapse(c, r1)
    if r1 == r2:
        return r1

    e = c - a
    cross = d0.perp_dot(d1)

    if cross != 0.0:
        s = e.perp_dot(d1) / cross
        t = e.perp_dot(d0) / cross
        if s < 0.0 or t < 0.0:
            return None
        if s == 0.0:
            return a
        if t == 0.0:
            return c
        return a + d0 * s

    if e.perp_dot(d0) != 0.0:
        return None

    ahead = d0.dot(e)
    if d0.dot(d1) < 0.0:
        # facing each other, or back to back
        if ahead > 0.0:
            return Segment(*order(a, c))
        if ahead == 0.0:
            return a
        return None
    # same heading: the one further along is the overlap
    if ahead > 0.0:
        return r2
    return r1


## ray / line

def ray_line(ray: Ray, line: Line) -> Optional[Geometry]:
    p, d0 = ray.p, ray.direction
    q, d1 = line.p, line.direction

    if d0.is_zero():
        return _collapse(p, line)
    if d1.is_zero():
        return _collapse(q, ray)

    cross = d0.perp_dot(d1)
    if line.intersects_point(p):
        return ray if cross == 0.0 else p
    if cross == 0.0:
        return None

    # p is off the line, so s is nonzero
    s = (q - p).perp_dot(d1) / cross
    if s < 0.0:
        return None
    return p + d0 * s


## line / line

def line_line(l1: Line, l2: Line) -> Optional[Geometry]:
    l1, l2 = _origin_order(l1, l2)
    a, d0 = l1.p, l1.direction
    c, d1 = l2.p, l2.direction

    if d0.is_zero():
        return _collapse(a, l2)
    if d1.is_zero():
        return _collapse(c, l1)

    cross = d0.perp_dot(d1)
    if cross == 0.0:
        return l1 if l1.intersects_point(c) else None

    if l2.intersects_point(a):
        return a
    if l1.intersects_point(c):
        return c
    s = (c - a).perp_dot(d1) / cross
    return a + d0 * s


## generic dispatch

# bounded kinds first, so a mixed pair always runs bounded-as-this
_RANK = {Segment: 0, Ray: 1, Line: 2}

_PAIRS = {
    (Segment, Segment): segment_segment,
    (Segment, Ray): segment_ray,
    (Segment, Line): segment_line,
    (Ray, Ray): ray_ray,
    (Ray, Line): ray_line,
    (Line, Line): line_line,
}


def _curve_pair(operation: str, g1, g2):
    k1 = type(g1)
    k2 = type(g2)
    if k1 not in _RANK or k2 not in _RANK:
        raise UnsupportedGeometryError(operation, g1, g2)
    if _RANK[k1] > _RANK[k2]:
        return _PAIRS[(k2, k1)], g2, g1
    return _PAIRS[(k1, k2)], g1, g2


def intersection(g1, g2) -> Optional[Geometry]:
    """Intersection of any two of ``Point``, ``Segment``, ``Ray`` and
    ``Line``, in either order.  Returns ``None`` when they are disjoint.
    """

    if isinstance(g1, Point):
        return g1 if intersects(g1, g2) else None
    if isinstance(g2, Point):
        return g2 if intersects(g1, g2) else None
    fn, first, second = _curve_pair("intersection", g1, g2)
    return fn(first, second)


def intersects(g1, g2) -> bool:
    """``True`` iff ``intersection(g1, g2)`` is not ``None``."""

    if isinstance(g1, Point):
        if isinstance(g2, Point):
            return g1 == g2
        if type(g2) in _RANK:
            return g2.intersects_point(g1)
        raise UnsupportedGeometryError("intersects", g1, g2)
    if isinstance(g2, Point):
        if type(g1) in _RANK:
            return g1.intersects_point(g2)
        raise UnsupportedGeometryError("intersects", g1, g2)
    fn, first, second = _curve_pair("intersects", g1, g2)
    return fn(first, second) is not None
