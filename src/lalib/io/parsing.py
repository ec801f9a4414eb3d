# io/parsing.py
"""Parsers turning user text into validated values for the matrix engine."""

from __future__ import annotations

import enum
import re
from typing import Optional

from lalib.matrix.errors import InvalidDimensionError, MalformedRowError
from lalib.matrix.models import Row

_INT_RE = re.compile(r"-?[0-9]+")

SLOTS = ("A", "B")


class MenuChoice(enum.IntEnum):
    INPUT = 1
    TRANSPOSE = 2
    MULTIPLY = 3
    PRINT = 4
    QUIT = 5


def parse_int(token: str) -> Optional[int]:
    """Return ``token`` as an int, or ``None`` if it is not one.

    Accepts an optional leading ``-`` followed by ASCII digits only.
    """

    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def parse_row(line: str, width: int) -> Row:
    """Parse a whitespace-separated line of ``width`` integers.

    The row is rejected as a whole when any token is not an integer or the
    token count differs from ``width``.
    """

    tokens = line.split()
    if len(tokens) != width:
        raise MalformedRowError(
            f"expected {width} values, got {len(tokens)}",
            expected=width,
            received=len(tokens),
        )

    values = []
    for token in tokens:
        value = parse_int(token)
        if value is None:
            raise MalformedRowError(f"{token!r} is not an integer")
        values.append(value)
    return tuple(values)


def parse_dimension(text: str, name: str = "dimension", maximum: Optional[int] = None) -> int:
    """Parse a positive integer height or width."""

    value = parse_int(text.strip())
    if value is None or value <= 0:
        raise InvalidDimensionError(name, text.strip())
    if maximum is not None and value > maximum:
        raise InvalidDimensionError(name, value, maximum=maximum)
    return value


def parse_menu_choice(text: str) -> Optional[MenuChoice]:
    value = parse_int(text.strip())
    if value is None:
        return None
    try:
        return MenuChoice(value)
    except ValueError:
        return None


def parse_slot(text: str) -> Optional[str]:
    """Return ``"A"`` or ``"B"`` for a one-letter answer, else ``None``."""

    candidate = text.strip().upper()
    if candidate in SLOTS:
        return candidate
    return None


def parse_order(text: str) -> Optional[tuple[str, str]]:
    """Parse a multiplication order such as ``AB`` or ``b x a``."""

    letters = [ch for ch in text.upper() if not ch.isspace() and ch not in "X*"]
    if len(letters) != 2 or any(letter not in SLOTS for letter in letters):
        return None
    return letters[0], letters[1]


__all__ = [
    "MenuChoice",
    "SLOTS",
    "parse_int",
    "parse_row",
    "parse_dimension",
    "parse_menu_choice",
    "parse_slot",
    "parse_order",
]
