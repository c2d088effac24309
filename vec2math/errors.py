"""Error types raised by the vector operations."""
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an input outside its domain.

    The library has a single failure mode: a precondition violation such as
    normalising the zero vector or projecting onto it. The error is raised
    synchronously by the offending call and leaves every other value intact.
    """

    def __init__(self, operation: str, reason: str) -> None:
        # //1.- Keep the structured fields so callers can branch without parsing text.
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")


__all__ = ["InvalidArgumentError"]
