"""Matrix engine: construction, transpose and multiplication.

The functions here are pure. They take :class:`~lalib.matrix.models.Matrix`
values and return new ones, using only Python built-ins.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    MalformedRowError,
    UnsetMatrixError,
)
from .models import Matrix, Row


def _check_dimension(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful dimension
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionError(name, value)
    return value


def fill_matrix(
    height: int,
    width: int,
    rows: Iterable[Optional[Sequence[int]]],
) -> Matrix:
    """Build a ``height`` x ``width`` matrix from ``rows``.

    Parameters
    ----------
    height, width:
        Positive integers.
    rows:
        Rows in order. Only the first ``height`` rows are consumed. A row of
        ``None`` stands for one the input layer never managed to fill.

    Raises
    ------
    InvalidDimensionError
        If ``height`` or ``width`` is not a positive integer.
    MalformedRowError
        If a row is missing, has the wrong length or holds a non-integer.
    """

    _check_dimension("height", height)
    _check_dimension("width", width)

    filled: list[Row] = []
    iterator = iter(rows)
    for index in range(height):
        try:
            row = next(iterator)
        except StopIteration:
            raise MalformedRowError(
                f"expected {height} rows, got {index}", index=index
            ) from None
        if row is None:
            raise MalformedRowError("row has not been filled", index=index)
        if len(row) != width:
            raise MalformedRowError(
                f"expected {width} values, got {len(row)}",
                index=index,
                expected=width,
                received=len(row),
            )
        if any(isinstance(value, bool) or not isinstance(value, int) for value in row):
            raise MalformedRowError("values must be integers", index=index)
        filled.append(tuple(row))

    return Matrix(tuple(filled))


def transpose(matrix: Matrix) -> Matrix:
    """Return the transpose of ``matrix``.

    Raises :class:`UnsetMatrixError` for the unset matrix.
    """

    if matrix.is_unset:
        raise UnsetMatrixError()
    return Matrix(tuple(tuple(column) for column in zip(*matrix.rows)))


def can_multiply(first: Matrix, second: Matrix) -> bool:
    """Return ``True`` when ``first`` x ``second`` is defined.

    Only the order given is checked; ``can_multiply(a, b)`` and
    ``can_multiply(b, a)`` can differ.
    """

    if first.is_unset or second.is_unset:
        return False
    return first.width == second.height


def dot_product(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of pairwise products of two equal-length rows."""

    if len(a) != len(b):
        raise ValueError(
            f"dot product needs equal lengths, got {len(a)} and {len(b)}"
        )
    return sum(x * y for x, y in zip(a, b))


def multiply(first: Matrix, second: Matrix) -> Matrix:
    """Multiply ``first`` by ``second``, in that order.

    ``second`` is transposed once so each output cell is the dot product of a
    row of ``first`` with a row of the transposed ``second``.

    Raises
    ------
    UnsetMatrixError
        If either operand is unset.
    DimensionMismatchError
        If ``first.width != second.height``.
    """

    if first.is_unset or second.is_unset:
        raise UnsetMatrixError()
    if not can_multiply(first, second):
        raise DimensionMismatchError(first.shape, second.shape)

    columns = transpose(second).rows
    product = tuple(
        tuple(dot_product(row, column) for column in columns)
        for row in first.rows
    )
    return Matrix(product)


__all__ = [
    "fill_matrix",
    "transpose",
    "can_multiply",
    "multiply",
    "dot_product",
]
