"""Command line interface evaluating a single vector operation."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from . import vector
from .config import load_config_from_env
from .errors import InvalidArgumentError

LOGGER = logging.getLogger(__name__)

VECTOR = "vector"
SCALAR = "scalar"

Operand = Union[float, Tuple[float, float]]

# //1.- Map every exposed operation to its callable and the kinds of operands it expects.
OPERATIONS: Dict[str, Tuple[Callable[..., object], Tuple[str, ...]]] = {
    "zero": (vector.zero, ()),
    "negate": (vector.negate, (VECTOR,)),
    "add": (vector.add, (VECTOR, VECTOR)),
    "sub": (vector.sub, (VECTOR, VECTOR)),
    "scale": (vector.scale, (VECTOR, SCALAR)),
    "dot": (vector.dot, (VECTOR, VECTOR)),
    "length": (vector.length, (VECTOR,)),
    "magnitude": (vector.magnitude, (VECTOR,)),
    "norm": (vector.norm, (VECTOR,)),
    "distance": (vector.distance, (VECTOR, VECTOR)),
    "unit": (vector.unit, (VECTOR,)),
    "angle": (vector.angle, (VECTOR, VECTOR)),
    "heading": (vector.heading, (VECTOR,)),
    "rotate": (vector.rotate, (VECTOR, SCALAR)),
    "normal": (vector.normal, (VECTOR,)),
    "project": (vector.project, (VECTOR, VECTOR)),
    "from_polar": (vector.from_polar, (VECTOR,)),
    "to_polar": (vector.to_polar, (VECTOR,)),
}


def _parse_vector(raw: str) -> Tuple[float, float]:
    # //2.- Accept "x,y" with optional surrounding whitespace or parentheses.
    parts = [item.strip() for item in raw.strip().strip("()").split(",")]
    if len(parts) != 2:
        raise ValueError(f"'{raw}' is not an x,y vector")
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError as exc:
        raise ValueError(f"'{raw}' is not an x,y vector") from exc


def _parse_scalar(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"'{raw}' is not a valid number") from exc


def parse_operands(kinds: Sequence[str], raw: Sequence[str]) -> List[Operand]:
    """Convert raw command line strings into vectors and scalars."""

    if len(kinds) != len(raw):
        raise ValueError(f"expected {len(kinds)} operand(s), got {len(raw)}")
    operands: List[Operand] = []
    for kind, item in zip(kinds, raw):
        operands.append(_parse_vector(item) if kind == VECTOR else _parse_scalar(item))
    return operands


def format_result(result: object, precision: int) -> str:
    """Render a scalar or vector result rounded to ``precision`` decimals."""

    if isinstance(result, tuple):
        x, y = vector.rounded(result, precision)
        return f"{x!r},{y!r}"
    return repr(round(float(result), precision) + 0.0)


def _json_result(result: object, precision: int) -> object:
    if isinstance(result, tuple):
        return list(vector.rounded(result, precision))
    return round(float(result), precision) + 0.0


def create_parser() -> argparse.ArgumentParser:
    # //3.- Construct the top-level parser shared across tests and runtime execution.
    parser = argparse.ArgumentParser(
        prog="vec2math",
        description=(
            "Evaluate a two-dimensional vector operation. Vectors are written "
            "as x,y and angles are in radians. Place '--' before operands that "
            "start with a minus sign."
        ),
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS), help="Operation to evaluate")
    parser.add_argument("operands", nargs="*", help="Vector (x,y) or scalar operands")
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places in the output (overrides VEC2MATH_PRECISION).",
    )
    parser.add_argument("--json", action="store_true", help="Emit the result as a JSON object")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point invoked via ``python -m vec2math``."""

    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config_from_env()
    except ValueError as exc:
        parser.error(str(exc))

    # //4.- Enable a default logging configuration suitable for terminal capture.
    logging.basicConfig(level=config.log_level, format="[%(asctime)s] %(levelname)s %(message)s")
    precision = args.precision if args.precision is not None else config.precision
    if precision < 0:
        parser.error("--precision must be non-negative")

    function, kinds = OPERATIONS[args.operation]
    try:
        operands = parse_operands(kinds, args.operands)
    except ValueError as exc:
        parser.error(f"{args.operation}: {exc}")

    LOGGER.debug("Evaluating %s with operands %s", args.operation, operands)
    try:
        result = function(*operands)
    except InvalidArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    # //5.- Print either the JSON document or the plain text rendering of the result.
    if args.json:
        print(json.dumps({"operation": args.operation, "result": _json_result(result, precision)}))
    else:
        print(format_result(result, precision))
    return 0


__all__ = ["OPERATIONS", "create_parser", "format_result", "main", "parse_operands"]
