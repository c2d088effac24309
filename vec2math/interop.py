"""Conversions between vector tuples and NumPy arrays."""
from __future__ import annotations

from typing import Iterable

import numpy as np

from .errors import InvalidArgumentError
from .vector import Vec2, _to_vector


def as_array(vector: Iterable[float]) -> np.ndarray:
    """Return the vector as a NumPy array of shape ``(2,)`` for quick math operations."""

    return np.array(_to_vector(vector, "as_array"), dtype=float)


def from_array(array: np.ndarray) -> Vec2:
    """Convert a shape ``(2,)`` array back into an immutable vector tuple."""

    values = np.asarray(array, dtype=float)
    # //1.- Reject matrices and batches; only a single 2D vector crosses this boundary.
    if values.shape != (2,):
        raise InvalidArgumentError("from_array", f"expected shape (2,), got {values.shape}")
    return (float(values[0]), float(values[1]))


__all__ = ["as_array", "from_array"]
