"""Tests for the partial application wrapper used by binary operations."""
from __future__ import annotations

from vec2math import BinaryOperation, BoundOperation, add, binary_operation, rotate, scale, sub


@binary_operation
def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent``."""

    return base ** exponent


def test_full_call_and_left_binding_agree() -> None:
    assert power(2, 3) == 8
    assert power(2)(3) == 8
    assert power.bind_left(2)(3) == 8


def test_right_binding_fixes_trailing_operand() -> None:
    assert power.bind_right(2)(3) == 9
    assert sub.bind_right((1, 2))((3, 4)) == (2.0, 2.0)


def test_wrapper_keeps_function_metadata() -> None:
    assert isinstance(add, BinaryOperation)
    assert add.__name__ == "add"
    assert power.__doc__ == "Raise ``base`` to ``exponent``."
    assert repr(power) == "<binary operation power>"


def test_bound_operation_repr_names_side() -> None:
    bound = scale.bind_right(2.0)
    assert isinstance(bound, BoundOperation)
    assert repr(bound) == "<scale bound right=2.0>"
    assert repr(add((1.0, 2.0))) == "<add bound left=(1.0, 2.0)>"


def test_bound_operand_is_snapshotted() -> None:
    operand = [1.0, 2.0]
    shifted = add(operand)
    # //1.- Mutating the caller's list after binding must not change the captured value.
    operand[0] = 100.0
    assert shifted((0.0, 0.0)) == (1.0, 2.0)


def test_bound_operations_compose_in_pipelines() -> None:
    vectors = [(1.0, 0.0), (0.0, 2.0)]
    doubled = list(map(scale.bind_right(2.0), vectors))
    assert doubled == [(2.0, 0.0), (0.0, 4.0)]
    turned = [rotate.bind_right(0.0)(vector) for vector in vectors]
    assert turned == [(1.0, 0.0), (0.0, 2.0)]
