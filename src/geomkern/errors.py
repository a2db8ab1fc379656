## exceptions raised by the geomkern planar kernel
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
Kernel exceptions.

Numeric indeterminacy is never an exception here: distances come back
as ``NaN`` and a missing intersection is ``None``.  Exceptions are
reserved for calls that make no sense, such as asking for the
intersection of a segment and a string.
"""

from typing import Any, Tuple


class GeometryError(Exception):
    """Base class for all geomkern errors."""
    pass


class UnsupportedGeometryError(GeometryError, TypeError):
    """An operation was handed an operand kind it does not support."""

    def __init__(self, operation: str, *operands: Any):
        self.operation = operation
        self.operands: Tuple[Any, ...] = operands
        kinds = ", ".join(type(o).__name__ for o in operands)
        super().__init__(f"{operation}() not supported for ({kinds})")
