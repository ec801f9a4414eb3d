"""State carried between turns of the interactive menu."""

from __future__ import annotations

from dataclasses import dataclass, field

from lalib.io.parsing import SLOTS
from lalib.matrix.errors import UnsetMatrixError
from lalib.matrix.models import EMPTY, Matrix


@dataclass
class Session:
    """The two matrix slots plus the most recent product.

    Slots are only ever replaced as a whole, after an engine call succeeds.
    """

    a: Matrix = field(default=EMPTY)
    b: Matrix = field(default=EMPTY)
    product: Matrix = field(default=EMPTY)

    @staticmethod
    def _attr(slot: str) -> str:
        name = slot.strip().upper()
        if name not in SLOTS:
            raise KeyError(f"Unknown matrix slot: {slot!r}")
        return name.lower()

    def get(self, slot: str) -> Matrix:
        return getattr(self, self._attr(slot))

    def require(self, slot: str) -> Matrix:
        """Return the matrix in ``slot``, raising if it was never input."""

        matrix = self.get(slot)
        if matrix.is_unset:
            raise UnsetMatrixError(slot.strip().upper())
        return matrix

    def store(self, slot: str, matrix: Matrix) -> None:
        setattr(self, self._attr(slot), matrix)

    def items(self) -> list[tuple[str, Matrix]]:
        return [(slot, self.get(slot)) for slot in SLOTS]


__all__ = ["Session"]
