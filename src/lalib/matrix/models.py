"""The :class:`Matrix` value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

Row = Tuple[int, ...]


@dataclass(frozen=True)
class Matrix:
    """Rectangular grid of integers.

    A matrix with no rows is the *unset* placeholder used for a slot that has
    not been input yet. Use :meth:`empty` (or :data:`EMPTY`) to get it.
    """

    rows: Tuple[Row, ...] = ()

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.rows)
        if rows:
            width = len(rows[0])
            if width == 0:
                raise ValueError("Matrix rows must not be empty")
            if any(len(row) != width for row in rows):
                raise ValueError("All matrix rows must have the same length")
            if any(
                isinstance(value, bool) or not isinstance(value, int)
                for row in rows
                for value in row
            ):
                raise ValueError("Matrix elements must be integers")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(cls) -> "Matrix":
        return EMPTY

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Matrix":
        return cls(tuple(tuple(row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def is_unset(self) -> bool:
        return not self.rows

    def row(self, index: int) -> Row:
        return self.rows[index]

    def column(self, index: int) -> Row:
        return tuple(row[index] for row in self.rows)

    def to_lists(self) -> list[list[int]]:
        return [list(row) for row in self.rows]


EMPTY = Matrix()


__all__ = ["Matrix", "Row", "EMPTY"]
