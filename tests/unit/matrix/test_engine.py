"""Tests for the matrix engine."""

import pytest

from lalib.matrix import (
    EMPTY,
    DimensionMismatchError,
    InvalidDimensionError,
    MalformedRowError,
    Matrix,
    UnsetMatrixError,
    can_multiply,
    dot_product,
    fill_matrix,
    multiply,
    transpose,
)


def m(*rows):
    return Matrix.from_rows(rows)


def test_fill_matrix_keeps_row_order():
    matrix = fill_matrix(2, 3, [[1, 2, 3], [4, 5, 6]])
    assert matrix.rows == ((1, 2, 3), (4, 5, 6))
    assert matrix.shape == (2, 3)


def test_fill_matrix_consumes_only_height_rows():
    rows = iter([[1], [2], [3]])
    matrix = fill_matrix(2, 1, rows)
    assert matrix == m([1], [2])
    assert next(rows) == [3]


@pytest.mark.parametrize("height, width", [(0, 2), (2, 0), (-1, 1), (1, True), ("2", 2)])
def test_fill_matrix_rejects_bad_dimensions(height, width):
    with pytest.raises(InvalidDimensionError):
        fill_matrix(height, width, [[1, 2], [3, 4]])


def test_fill_matrix_rejects_short_row():
    with pytest.raises(MalformedRowError) as excinfo:
        fill_matrix(2, 3, [[1, 2, 3], [1, 2]])
    assert excinfo.value.index == 1
    assert excinfo.value.expected == 3
    assert excinfo.value.received == 2


def test_fill_matrix_rejects_missing_rows():
    with pytest.raises(MalformedRowError):
        fill_matrix(3, 1, [[1], [2]])


def test_fill_matrix_rejects_unfilled_row():
    with pytest.raises(MalformedRowError):
        fill_matrix(2, 1, [[1], None])


def test_fill_matrix_rejects_non_integer_values():
    with pytest.raises(MalformedRowError):
        fill_matrix(1, 2, [[1, "2"]])


def test_transpose():
    assert transpose(m([1, 2, 3], [4, 5, 6])) == m([1, 4], [2, 5], [3, 6])


def test_transpose_single_row():
    assert transpose(m([1, 2, 3])) == m([1], [2], [3])


def test_transpose_single_element():
    assert transpose(m([42])) == m([42])


def test_transpose_twice_is_identity_and_swaps_shape():
    matrix = m([1, -2], [3, 4], [5, 6])
    once = transpose(matrix)
    assert once.shape == (2, 3)
    assert transpose(once) == matrix


def test_transpose_unset_raises():
    with pytest.raises(UnsetMatrixError):
        transpose(EMPTY)


def test_dot_product():
    assert dot_product([1, 2, 3], [4, 5, 6]) == 32


def test_dot_product_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        dot_product([1, 2], [1, 2, 3])


def test_can_multiply_is_not_symmetric():
    a = m([1, 2, 3])
    b = m([1, 2], [3, 4], [5, 6])
    assert can_multiply(a, b)
    assert not can_multiply(b, a)


def test_can_multiply_rejects_unset():
    assert not can_multiply(EMPTY, m([1]))
    assert not can_multiply(m([1]), EMPTY)


def test_multiply():
    a = m([1, 2], [3, 4])
    b = m([5, 6], [7, 8])
    assert multiply(a, b) == m([19, 22], [43, 50])


def test_multiply_result_shape():
    a = m([1, 2, 3], [4, 5, 6])
    b = transpose(a)
    assert multiply(a, b).shape == (2, 2)
    assert multiply(b, a).shape == (3, 3)


def test_multiply_does_not_change_operands():
    a = m([1, 2], [3, 4])
    b = m([5, 6], [7, 8])
    multiply(a, b)
    assert a == m([1, 2], [3, 4])
    assert b == m([5, 6], [7, 8])


def test_multiply_raises_on_shape_mismatch():
    a = m([1, 2], [3, 4])
    b = m([1], [2], [3])
    with pytest.raises(DimensionMismatchError) as excinfo:
        multiply(a, b)
    assert excinfo.value.first_shape == (2, 2)
    assert excinfo.value.second_shape == (3, 1)


def test_multiply_raises_on_unset_operand():
    with pytest.raises(UnsetMatrixError):
        multiply(EMPTY, m([1]))
