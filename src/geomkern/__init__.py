# -*- coding: utf-8 -*-
"""geomkern: a planar computational geometry kernel."""

from importlib.metadata import PackageNotFoundError, version

from geomkern.errors import GeometryError, UnsupportedGeometryError
from geomkern.interval import Range
from geomkern.point import Point, Vector, order, segment_order
from geomkern.mbr import Mbr
from geomkern.linear import Line, Ray, Segment
from geomkern.intersect import (
    Geometry,
    intersection,
    intersects,
    segment_intersection,
    segment_intersects,
)

try:
    __version__ = version("geomkern")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "Geometry",
    "GeometryError",
    "Line",
    "Mbr",
    "Point",
    "Range",
    "Ray",
    "Segment",
    "UnsupportedGeometryError",
    "Vector",
    "intersection",
    "intersects",
    "order",
    "segment_intersection",
    "segment_intersects",
    "segment_order",
]
