"""Parsing user text and matrix files."""

from .parsing import (
    SLOTS,
    MenuChoice,
    parse_dimension,
    parse_int,
    parse_menu_choice,
    parse_order,
    parse_row,
    parse_slot,
)

__all__ = [
    "SLOTS",
    "MenuChoice",
    "parse_int",
    "parse_row",
    "parse_dimension",
    "parse_menu_choice",
    "parse_slot",
    "parse_order",
]
