"""Tests for rotation, normals, projection and polar conversion."""
from __future__ import annotations

import math

import pytest

from vec2math import (
    InvalidArgumentError,
    Polar,
    from_polar,
    is_close,
    normal,
    project,
    rotate,
    rounded,
    to_polar,
)


def test_rotate_zero_vector_stays_zero() -> None:
    assert rounded(rotate((0, 0), 0)) == (0.0, 0.0)
    assert rounded(rotate((0, 0), math.pi)) == (0.0, 0.0)


@pytest.mark.parametrize(
    ("turns", "expected"),
    [
        (0.0, (1.0, 0.0)),
        (0.5, (0.0, 1.0)),
        (1.0, (-1.0, 0.0)),
        (1.5, (0.0, -1.0)),
        (2.0, (1.0, 0.0)),
    ],
)
def test_rotate_unit_x_by_quarter_turns(turns, expected) -> None:
    assert rounded(rotate((1, 0), math.pi * turns)) == expected
    assert rounded(rotate((1, 0))(math.pi * turns)) == expected
    assert rounded(rotate.bind_right(math.pi * turns)((1, 0))) == expected


def test_normal_is_clockwise_perpendicular_unit() -> None:
    assert rounded(normal((3, 4))) == (0.8, -0.6)
    assert rounded(normal((1, 0))) == (0.0, -1.0)
    assert rounded(normal((0, -1))) == (-1.0, 0.0)
    assert rounded(normal((-1, 0))) == (0.0, 1.0)
    assert rounded(normal((0, 1))) == (1.0, 0.0)


def test_normal_rejects_zero_vector() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        normal((0, 0))
    assert excinfo.value.operation == "normal"


def test_project_onto_axes_and_diagonals() -> None:
    assert project((0, 0), (1, 0)) == (0.0, 0.0)
    assert project((1, 0), (1, 0)) == (1.0, 0.0)
    assert project((1, 0), (0, 1)) == (0.0, 0.0)
    assert project((1, 1), (1, 0)) == (1.0, 0.0)
    assert project((1, 1), (0, 1)) == (0.0, 1.0)
    assert project((1, 0), (1, 1)) == (0.5, 0.5)
    assert project((1, 0), (-1, -1)) == (0.5, 0.5)
    assert project((1, 0), (1, -1)) == (0.5, -0.5)
    assert project((1, 0), (-1, 1)) == (0.5, -0.5)
    assert project((1, 2), (0, 1)) == (0.0, 2.0)
    assert project((1, 2), (3, 4)) == pytest.approx((1.32, 1.76))


def test_project_curried_binds_the_projected_vector_first() -> None:
    assert project((1, 0))((1, 1)) == (0.5, 0.5)
    assert project((1, 1))((1, 0)) == (1.0, 0.0)
    # //1.- Fixing the axis first reads naturally in pipelines.
    onto_diagonal = project.bind_right((1, 1))
    assert onto_diagonal((1, 0)) == (0.5, 0.5)
    assert project.bind_right((-1, -1))((1, 0)) == (0.5, 0.5)
    assert project.bind_right((1, -1))((1, 0)) == (0.5, -0.5)
    assert project.bind_right((-1, 1))((1, 0)) == (0.5, -0.5)


def test_project_rejects_zero_axis() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        project((1, 0), (0, 0))
    assert excinfo.value.operation == "project"
    assert "projection axis" in excinfo.value.reason


def test_from_polar_rotates_length_along_x_axis() -> None:
    assert rounded(from_polar((0, 2))) == (2.0, 0.0)
    assert rounded(from_polar((math.pi / 2, 2))) == (0.0, 2.0)
    assert rounded(from_polar((math.pi, 1))) == (-1.0, 0.0)
    assert rounded(from_polar(Polar(angle=-math.pi / 4, length=math.sqrt(2)))) == (1.0, -1.0)


def test_to_polar_returns_named_pair() -> None:
    polar = to_polar((0, 1))
    assert isinstance(polar, tuple)
    assert len(polar) == 2
    assert polar.angle == pytest.approx(math.pi / 2)
    assert polar.length == pytest.approx(1.0)
    assert tuple(to_polar((1, -1))) == pytest.approx((-math.pi / 4, math.sqrt(2)))


def test_to_polar_rejects_zero_vector() -> None:
    with pytest.raises(InvalidArgumentError):
        to_polar((0, 0))


@pytest.mark.parametrize("vector", [(1, 0), (3, 4), (-2, 5), (-7, -0.5), (0.25, -9)])
def test_polar_round_trip(vector) -> None:
    assert is_close(from_polar(to_polar(vector)), vector)
