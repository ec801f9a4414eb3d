"""Core package for lalib, a console linear-algebra utility.

The matrix engine lives in :mod:`lalib.matrix`; the interactive menu and the
``lalib`` command in :mod:`lalib.cli`.
"""

from .matrix import (
    EMPTY,
    Matrix,
    can_multiply,
    dot_product,
    fill_matrix,
    multiply,
    render,
    transpose,
)

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "EMPTY",
    "fill_matrix",
    "transpose",
    "can_multiply",
    "multiply",
    "dot_product",
    "render",
]
