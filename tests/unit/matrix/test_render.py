import io

from rich.console import Console

from lalib.matrix import EMPTY, UNSET_MESSAGE, Matrix, render, render_table


def test_render_rows_with_tabs():
    matrix = Matrix.from_rows([[1, -2], [30, 4]])
    assert list(render(matrix)) == ["1\t-2", "30\t4"]


def test_render_custom_delimiter():
    matrix = Matrix.from_rows([[1, 2, 3]])
    assert list(render(matrix, " ")) == ["1 2 3"]


def test_render_unset_yields_one_diagnostic_line():
    assert list(render(EMPTY)) == [UNSET_MESSAGE]


def test_render_is_lazy():
    lines = render(Matrix.from_rows([[1], [2]]))
    assert next(lines) == "1"


def test_render_table_prints_values():
    buffer = io.StringIO()
    console = Console(file=buffer, width=80)
    render_table(Matrix.from_rows([[7, 8], [9, 10]]), title="Matrix A", console=console)
    output = buffer.getvalue()
    assert "Matrix A" in output
    assert "10" in output
    assert "2 x 2" in output


def test_render_table_unset():
    buffer = io.StringIO()
    render_table(EMPTY, title="Matrix B", console=Console(file=buffer, width=80))
    assert "Matrix B: matrix has not been input" in buffer.getvalue()


def test_render_table_keeps_long_title_on_one_line_for_narrow_matrix():
    buffer = io.StringIO()
    console = Console(file=buffer, width=80)
    render_table(Matrix.from_rows([[7]]), title="Matrix A (transposed)", console=console)
    lines = buffer.getvalue().splitlines()
    assert lines[0] == "Matrix A (transposed) (1 x 1)"
    assert lines[1].strip() == "7"
