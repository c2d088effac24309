"""Partial application helpers for two-argument vector operations.

Every binary operation in :mod:`vec2math.vector` can be called with both
operands at once or with its first operand alone. In the second form a
continuation is returned that waits for the remaining operand and then
evaluates the operation in its original positional order, so ``sub(a)(b)``
is always ``a - b``. The trailing operand can be fixed first through
:meth:`BinaryOperation.bind_right`, which suits pipelines such as
``map(scale.bind_right(2.0), vectors)``. Keyword calls such as
``sub(a=p, b=q)`` evaluate the operation directly.
"""
from __future__ import annotations

import functools
from typing import Any, Callable, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


def _freeze(value: Any) -> Any:
    """Copy sequence operands into tuples; scalars pass through unchanged."""

    if isinstance(value, (str, bytes, tuple)):
        return value
    try:
        return tuple(value)
    except TypeError:
        return value


class BoundOperation(Generic[A, B, R]):
    """One-argument continuation produced by partially applying an operation."""

    def __init__(self, operation: "BinaryOperation[A, B, R]", value: Any, *, right: bool) -> None:
        # //1.- Snapshot the operand so later mutation of a caller-owned list cannot leak in.
        self._operation = operation
        self._value = _freeze(value)
        self._right = right

    def __call__(self, other: Any) -> R:
        # //2.- Restore the original argument order before delegating to the wrapped function.
        if self._right:
            return self._operation.function(other, self._value)
        return self._operation.function(self._value, other)

    def __repr__(self) -> str:
        side = "right" if self._right else "left"
        return f"<{self._operation.__name__} bound {side}={self._value!r}>"


class BinaryOperation(Generic[A, B, R]):
    """Callable wrapper exposing both the full and the curried call shapes."""

    def __init__(self, function: Callable[[A, B], R]) -> None:
        self.function = function
        functools.update_wrapper(self, function)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        # //1.- A lone positional operand curries; every other call shape goes straight through.
        if len(args) == 1 and not kwargs:
            return self.bind_left(args[0])
        return self.function(*args, **kwargs)

    def bind_left(self, first: A) -> BoundOperation[A, B, R]:
        """Fix the first operand, returning ``lambda b: op(first, b)``."""

        return BoundOperation(self, first, right=False)

    def bind_right(self, second: B) -> BoundOperation[A, B, R]:
        """Fix the second operand, returning ``lambda a: op(a, second)``."""

        return BoundOperation(self, second, right=True)

    def __repr__(self) -> str:
        return f"<binary operation {self.__name__}>"


def binary_operation(function: Callable[[A, B], R]) -> BinaryOperation[A, B, R]:
    """Decorate a two-argument function so it supports partial application."""

    return BinaryOperation(function)


__all__ = ["BinaryOperation", "BoundOperation", "binary_operation"]
