"""Pure functions for two-dimensional vector arithmetic.

Vectors are plain ``(x, y)`` float tuples. No function mutates its inputs;
every call builds and returns a new value. Binary operations are wrapped by
:func:`vec2math.currying.binary_operation` so they can be partially applied
with their first operand. Angles are expressed in radians throughout.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, NamedTuple, Tuple

from .currying import binary_operation
from .errors import InvalidArgumentError

LOGGER = logging.getLogger(__name__)

Scalar = float
Vec2 = Tuple[float, float]


class Polar(NamedTuple):
    """Polar coordinates: angle from the positive x-axis and length."""

    angle: float
    length: float


# //1.- Convert iterables into two-component float tuples, rejecting anything else.
def _to_vector(components: Iterable[float], operation: str = "vector") -> Vec2:
    if isinstance(components, (str, bytes, bytearray)):
        raise InvalidArgumentError(operation, f"expected two numbers, got {components!r}")
    try:
        values = tuple(float(component) for component in components)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(operation, f"expected two numbers, got {components!r}") from exc
    if len(values) != 2:
        raise InvalidArgumentError(operation, f"Vec2 requires exactly two components, got {len(values)}")
    return values  # type: ignore[return-value]


# //2.- Coerce scalar operands, reporting failures under the calling operation.
def _to_scalar(value: float, operation: str) -> float:
    if isinstance(value, (str, bytes, bytearray)):
        raise InvalidArgumentError(operation, f"expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(operation, f"expected a number, got {value!r}") from exc


# //3.- Reject the zero vector wherever a direction is required.
def _require_non_zero(vector: Vec2, operation: str, role: str = "vector") -> None:
    if vector[0] == 0.0 and vector[1] == 0.0:
        LOGGER.debug("%s rejected zero-length %s", operation, role)
        raise InvalidArgumentError(operation, f"{role} must not be the zero vector")


# //4.- Build the origin vector.
def zero() -> Vec2:
    return (0.0, 0.0)


# //5.- Flip the sign of both components.
def negate(vector: Iterable[float]) -> Vec2:
    vx, vy = _to_vector(vector, "negate")
    return (-vx, -vy)


# //6.- Add vectors component-wise returning a new tuple.
@binary_operation
def add(a: Iterable[float], b: Iterable[float]) -> Vec2:
    """Return ``a + b``."""

    ax, ay = _to_vector(a, "add")
    bx, by = _to_vector(b, "add")
    return (ax + bx, ay + by)


# //7.- Subtract vectors component-wise; the first operand is the minuend.
@binary_operation
def sub(a: Iterable[float], b: Iterable[float]) -> Vec2:
    """Return ``a - b``."""

    ax, ay = _to_vector(a, "sub")
    bx, by = _to_vector(b, "sub")
    return (ax - bx, ay - by)


# //8.- Multiply a vector by a scalar value.
@binary_operation
def scale(vector: Iterable[float], scalar: float) -> Vec2:
    """Return ``vector * scalar``."""

    vx, vy = _to_vector(vector, "scale")
    factor = _to_scalar(scalar, "scale")
    return (vx * factor, vy * factor)


# //9.- Compute the dot product between two vectors.
@binary_operation
def dot(a: Iterable[float], b: Iterable[float]) -> float:
    """Return ``a.x * b.x + a.y * b.y``."""

    ax, ay = _to_vector(a, "dot")
    bx, by = _to_vector(b, "dot")
    return ax * bx + ay * by


# //10.- Calculate the Euclidean length; hypot avoids the underflow of squaring tiny components.
def length(vector: Iterable[float]) -> float:
    vx, vy = _to_vector(vector, "length")
    return math.hypot(vx, vy)


magnitude = length
norm = length


# //11.- Measure the distance between two points as the length of their difference.
@binary_operation
def distance(a: Iterable[float], b: Iterable[float]) -> float:
    """Return ``length(a - b)``."""

    return length(sub(a, b))


# //12.- Scale a vector to unit length; the zero vector has no direction.
def unit(vector: Iterable[float]) -> Vec2:
    values = _to_vector(vector, "unit")
    _require_non_zero(values, "unit")
    size = length(values)
    return (values[0] / size, values[1] / size)


# //13.- Compute the unsigned angle between two vectors in [0, pi].
@binary_operation
def angle(a: Iterable[float], b: Iterable[float]) -> float:
    """Return the angle between ``a`` and ``b`` in radians.

    The cosine ratio is clamped to ``[-1, 1]`` before ``acos`` so rounding
    on parallel or antiparallel inputs yields ``0`` or ``pi`` instead of NaN.
    Both operands must be non-zero.
    """

    first = _to_vector(a, "angle")
    second = _to_vector(b, "angle")
    _require_non_zero(first, "angle", "first operand")
    _require_non_zero(second, "angle", "second operand")
    ratio = dot(unit(first), unit(second))
    return math.acos(max(-1.0, min(1.0, ratio)))


# //14.- Signed angle of a vector measured from the positive x-axis.
def heading(vector: Iterable[float]) -> float:
    """Return ``atan2(y, x)``, the direction of ``vector`` in ``[-pi, pi]``."""

    vx, vy = _to_vector(vector, "heading")
    _require_non_zero((vx, vy), "heading")
    return math.atan2(vy, vx)


# //15.- Apply the standard counter-clockwise rotation matrix.
@binary_operation
def rotate(vector: Iterable[float], angle_rad: float) -> Vec2:
    """Rotate ``vector`` about the origin by ``angle_rad`` radians."""

    vx, vy = _to_vector(vector, "rotate")
    theta = _to_scalar(angle_rad, "rotate")
    cos_a = math.cos(theta)
    sin_a = math.sin(theta)
    return (vx * cos_a - vy * sin_a, vx * sin_a + vy * cos_a)


# //16.- Rotate clockwise by a quarter turn and normalise the result.
def normal(vector: Iterable[float]) -> Vec2:
    """Return the unit vector perpendicular to ``vector`` on its right-hand side.

    ``normal((3, 4))`` is ``(0.8, -0.6)``.
    """

    vx, vy = _to_vector(vector, "normal")
    _require_non_zero((vx, vy), "normal")
    return unit((vy, -vx))


# //17.- Project vector a onto vector b returning the projection component.
@binary_operation
def project(a: Iterable[float], b: Iterable[float]) -> Vec2:
    """Return the vector projection of ``a`` onto ``b``; ``b`` must be non-zero."""

    source = _to_vector(a, "project")
    axis = _to_vector(b, "project")
    _require_non_zero(axis, "project", "projection axis")
    # //1.- Rescale the axis by its largest component so dot(axis, axis) cannot underflow.
    largest = max(abs(axis[0]), abs(axis[1]))
    direction = (axis[0] / largest, axis[1] / largest)
    return scale(direction, dot(source, direction) / dot(direction, direction))


# //18.- Convert (angle, length) polar coordinates into a cartesian vector.
def from_polar(polar: Iterable[float]) -> Vec2:
    angle_rad, radius = _to_vector(polar, "from_polar")
    return rotate((radius, 0.0), angle_rad)


# //19.- Convert a cartesian vector into polar coordinates.
def to_polar(vector: Iterable[float]) -> Polar:
    values = _to_vector(vector, "to_polar")
    return Polar(heading(values), length(values))


# //20.- Compare two vectors component-wise within floating tolerance.
def is_close(
    a: Iterable[float],
    b: Iterable[float],
    *,
    rel_tol: float = 1e-9,
    abs_tol: float = 1e-9,
) -> bool:
    ax, ay = _to_vector(a, "is_close")
    bx, by = _to_vector(b, "is_close")
    return math.isclose(ax, bx, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
        ay, by, rel_tol=rel_tol, abs_tol=abs_tol
    )


# //21.- Round both components, folding negative zero into positive zero.
def rounded(vector: Iterable[float], ndigits: int = 7) -> Vec2:
    vx, vy = _to_vector(vector, "rounded")
    return (round(vx, ndigits) + 0.0, round(vy, ndigits) + 0.0)


__all__ = [
    "Polar",
    "Scalar",
    "Vec2",
    "add",
    "angle",
    "distance",
    "dot",
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
