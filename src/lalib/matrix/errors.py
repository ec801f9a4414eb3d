"""Error types raised by the matrix engine and the input parsers.

Every error derives from :class:`MatrixError`, itself a ``ValueError``, so
callers that only care about bad values can keep catching ``ValueError``.
All of them are recoverable: the interactive menu reports the message and
carries on.
"""

from __future__ import annotations

from typing import Optional, Tuple


class MatrixError(ValueError):
    """Base class for user-facing matrix errors."""


class InvalidDimensionError(MatrixError):
    """A height or width that is not a positive integer."""

    def __init__(self, name: str, value: object, maximum: Optional[int] = None):
        self.name = name
        self.value = value
        self.maximum = maximum
        if maximum is None:
            message = f"{name} must be a positive integer, got {value!r}"
        else:
            message = f"{name} must be at most {maximum}, got {value!r}"
        super().__init__(message)


class MalformedRowError(MatrixError):
    """A row rejected as a unit: wrong token count or a non-integer token."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        expected: Optional[int] = None,
        received: Optional[int] = None,
    ):
        self.index = index
        self.expected = expected
        self.received = received
        if index is not None:
            message = f"row {index + 1}: {message}"
        super().__init__(message)


class UnsetMatrixError(MatrixError):
    """An operation was attempted on a matrix that has not been input."""

    def __init__(self, slot: Optional[str] = None):
        self.slot = slot
        if slot:
            message = f"matrix {slot} has not been input"
        else:
            message = "matrix has not been input"
        super().__init__(message)


class DimensionMismatchError(MatrixError):
    """Multiplication where the first width differs from the second height."""

    def __init__(self, first_shape: Tuple[int, int], second_shape: Tuple[int, int]):
        self.first_shape = first_shape
        self.second_shape = second_shape
        super().__init__(
            "cannot multiply a {}x{} matrix by a {}x{} matrix".format(
                *first_shape, *second_shape
            )
        )


__all__ = [
    "MatrixError",
    "InvalidDimensionError",
    "MalformedRowError",
    "UnsetMatrixError",
    "DimensionMismatchError",
]
