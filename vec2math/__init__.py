"""Two-dimensional vector arithmetic as a set of pure functions.

Vectors are ``(x, y)`` float tuples and every operation returns a new value.
Binary operations accept their operands together or one at a time::

    >>> from vec2math import add, sub
    >>> add((1, 2), (3, 4))
    (4.0, 6.0)
    >>> sub((1, 2))((3, 4))
    (-2.0, -2.0)
"""

from .currying import BinaryOperation, BoundOperation, binary_operation
from .errors import InvalidArgumentError
from .interop import as_array, from_array
from .vector import (
    Polar,
    Scalar,
    Vec2,
    add,
    angle,
    distance,
    dot,
    from_polar,
    heading,
    is_close,
    length,
    magnitude,
    negate,
    norm,
    normal,
    project,
    rotate,
    rounded,
    scale,
    sub,
    to_polar,
    unit,
    zero,
)

__version__ = "1.0.0"

__all__ = [
    "BinaryOperation",
    "BoundOperation",
    "InvalidArgumentError",
    "Polar",
    "Scalar",
    "Vec2",
    "add",
    "angle",
    "as_array",
    "binary_operation",
    "distance",
    "dot",
    "from_array",
    "from_polar",
    "heading",
    "is_close",
    "length",
    "magnitude",
    "negate",
    "norm",
    "normal",
    "project",
    "rotate",
    "rounded",
    "scale",
    "sub",
    "to_polar",
    "unit",
    "zero",
]
