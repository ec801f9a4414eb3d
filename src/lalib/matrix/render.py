"""Text output for matrices."""

from __future__ import annotations

from typing import Iterator

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import Matrix

UNSET_MESSAGE = "matrix has not been input"


def render(matrix: Matrix, delimiter: str = "\t") -> Iterator[str]:
    """Yield one line per row with values joined by ``delimiter``.

    The unset matrix yields a single diagnostic line instead of nothing.
    """

    if matrix.is_unset:
        yield UNSET_MESSAGE
        return
    for row in matrix.rows:
        yield delimiter.join(str(value) for value in row)


def render_table(
    matrix: Matrix,
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """Pretty-print ``matrix`` using ``rich``."""

    if console is None:
        console = Console()

    if matrix.is_unset:
        message = f"{title}: {UNSET_MESSAGE}" if title else UNSET_MESSAGE
        console.print(f"[dim]{message}[/dim]")
        return

    # outside the Table, which wraps its title to the column widths
    header = Text(title or "Matrix", style="bold")
    header.append(" ({} x {})".format(*matrix.shape), style="dim")
    console.print(header)

    table = Table(show_header=False, box=None)
    for _ in range(matrix.width):
        table.add_column(justify="right", style="cyan")
    for row in matrix.rows:
        table.add_row(*(str(value) for value in row))
    console.print(table)


__all__ = ["render", "render_table", "UNSET_MESSAGE"]
