"""Runtime configuration for the ``vec2math`` command line surface."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PRECISION = 7
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Vec2Config:
    """Resolved configuration describing how results are reported."""

    # //1.- Number of decimal places used when printing results.
    precision: int = DEFAULT_PRECISION
    # //2.- Name of the logging level applied by the command line entry point.
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_precision(raw: str) -> int:
    try:
        precision = int(raw)
    except ValueError as exc:
        raise ValueError(f"VEC2MATH_PRECISION must be an integer, got {raw!r}") from exc
    if precision < 0:
        raise ValueError("VEC2MATH_PRECISION must be non-negative")
    return precision


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"VEC2MATH_LOG_LEVEL is not a known logging level: {raw!r}")
    return level


def load_config_from_env(env: Optional[Mapping[str, str]] = None) -> Vec2Config:
    """Construct a :class:`Vec2Config` instance from environment variables."""

    # //1.- Allow dependency injection during testing by accepting a custom mapping.
    source = env if env is not None else os.environ
    # //2.- Fall back to defaults so the tool works without extra configuration.
    precision = _parse_precision(source.get("VEC2MATH_PRECISION", str(DEFAULT_PRECISION)))
    log_level = _parse_log_level(source.get("VEC2MATH_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    return Vec2Config(precision=precision, log_level=log_level)


__all__ = ["DEFAULT_LOG_LEVEL", "DEFAULT_PRECISION", "Vec2Config", "load_config_from_env"]
