import pytest

import geomkern
from geomkern.errors import GeometryError, UnsupportedGeometryError


def test_hierarchy():
    assert issubclass(UnsupportedGeometryError, GeometryError)
    assert issubclass(UnsupportedGeometryError, TypeError)


def test_message_names_operands():
    seg = geomkern.Segment(geomkern.Point(0, 0), geomkern.Point(1, 1))
    with pytest.raises(UnsupportedGeometryError) as info:
        geomkern.intersection(seg, 3)
    assert info.value.operation == "intersection"
    assert info.value.operands == (seg, 3)
    assert "Segment" in str(info.value) and "int" in str(info.value)


def test_package_exports():
    assert isinstance(geomkern.__version__, str)
    for name in geomkern.__all__:
        assert hasattr(geomkern, name)
