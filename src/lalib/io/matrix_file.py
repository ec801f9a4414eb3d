# io/matrix_file.py
"""Load matrices from plain text files.

One row per line, values separated by whitespace. Blank lines and anything
after a ``#`` are ignored. The width is taken from the first row.
"""

from __future__ import annotations

import os
from pathlib import Path

from lalib.logging import get_logger
from lalib.matrix.engine import fill_matrix
from lalib.matrix.errors import InvalidDimensionError, MalformedRowError
from lalib.matrix.models import Matrix

from .parsing import parse_row


def _strip_comment(line: str) -> str:
    return line.split("#", 1)[0].strip()


def parse_matrix_text(text: str, source: str = "<text>") -> Matrix:
    """Build a matrix from the text of a matrix file."""

    lines = [
        (lineno, stripped)
        for lineno, raw in enumerate(text.splitlines(), start=1)
        if (stripped := _strip_comment(raw))
    ]
    if not lines:
        raise InvalidDimensionError("height", f"0 (no rows in {source})")

    width = len(lines[0][1].split())
    rows = []
    for lineno, line in lines:
        try:
            rows.append(parse_row(line, width))
        except MalformedRowError as exc:
            raise MalformedRowError(
                f"{source}, line {lineno}: {exc}",
                index=len(rows),
                expected=exc.expected,
                received=exc.received,
            ) from exc

    return fill_matrix(len(rows), width, rows)


def load_matrix(path: str | os.PathLike[str]) -> Matrix:
    """Read ``path`` and return the matrix it holds."""

    logger = get_logger(__file__)
    resolved = Path(path).expanduser()
    logger.debug("loading matrix from %s", resolved)
    matrix = parse_matrix_text(resolved.read_text(encoding="utf-8"), source=str(resolved))
    logger.info("loaded %dx%d matrix from %s", matrix.height, matrix.width, resolved)
    return matrix


__all__ = ["load_matrix", "parse_matrix_text"]
