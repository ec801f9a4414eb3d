import pytest

from lalib.io.matrix_file import load_matrix, parse_matrix_text
from lalib.matrix import Matrix
from lalib.matrix.errors import InvalidDimensionError, MalformedRowError


def test_parse_matrix_text_skips_comments_and_blank_lines():
    text = "# two by three\n1 2 3\n\n4 5 6  # last row\n"
    assert parse_matrix_text(text) == Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


def test_parse_matrix_text_rejects_ragged_rows():
    with pytest.raises(MalformedRowError) as excinfo:
        parse_matrix_text("1 2\n3\n", source="m.txt")
    assert "m.txt, line 2" in str(excinfo.value)


def test_parse_matrix_text_rejects_empty_file():
    with pytest.raises(InvalidDimensionError):
        parse_matrix_text("# nothing here\n\n")


def test_load_matrix_reads_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("1 -2\n3 4\n", encoding="utf-8")
    assert load_matrix(path) == Matrix.from_rows([[1, -2], [3, 4]])


def test_load_matrix_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix(tmp_path / "missing.txt")


def test_parse_matrix_text_keeps_row_error_details():
    with pytest.raises(MalformedRowError) as excinfo:
        parse_matrix_text("1 2 3\n4 5 6\n7 8\n", source="m.txt")
    error = excinfo.value
    assert error.index == 2
    assert error.expected == 3
    assert error.received == 2
    assert "m.txt, line 3" in str(error)
