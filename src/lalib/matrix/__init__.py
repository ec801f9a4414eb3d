"""Integer matrices and the operations defined on them."""

from .engine import can_multiply, dot_product, fill_matrix, multiply, transpose
from .errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    MalformedRowError,
    MatrixError,
    UnsetMatrixError,
)
from .models import EMPTY, Matrix, Row
from .render import UNSET_MESSAGE, render, render_table

__all__ = [
    "Matrix",
    "Row",
    "EMPTY",
    "fill_matrix",
    "transpose",
    "can_multiply",
    "multiply",
    "dot_product",
    "render",
    "render_table",
    "UNSET_MESSAGE",
    "MatrixError",
    "InvalidDimensionError",
    "MalformedRowError",
    "UnsetMatrixError",
    "DimensionMismatchError",
]
