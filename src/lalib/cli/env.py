"""Loading ``KEY=value`` env files given with ``--env-file``.

Settings such as ``LALIB_DELIMITER`` or ``LALIB_LOG_DIR`` are read from the
environment; this lets a file of them be passed on the command line instead
of exported by hand.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
import os


def extract_env_files(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split ``--env-file`` arguments out of ``argv``.

    Both ``--env-file path`` and ``--env-file=path`` are accepted anywhere on
    the command line. Returns ``(env_files, remaining_argv)``.
    """

    env_files: list[str] = []
    remaining: list[str] = []

    args = iter(argv)
    for token in args:
        if token == "--env-file":
            path = next(args, None)
            if path is None:
                raise SystemExit("--env-file requires a file path")
            env_files.append(path)
        elif token.startswith("--env-file="):
            env_files.append(token.partition("=")[2])
        else:
            remaining.append(token)

    return env_files, remaining


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    # unquoted values may carry a trailing " # comment"
    marker = value.find(" #")
    if marker != -1:
        value = value[:marker]
    return value.rstrip()


def parse_env_file_text(text: str) -> dict[str, str]:
    """Parse env-style lines into a dict.

    Blank lines, ``#`` comments and lines without ``=`` are skipped; a leading
    ``export`` is allowed.
    """

    parsed: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()

        key, sep, raw_value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        parsed[key] = _unquote(raw_value.strip())

    return parsed


def load_env_files(paths: Iterable[str | Path], *, override: bool = True) -> dict[str, str]:
    """Load env files into ``os.environ`` in order; later files win."""

    merged: dict[str, str] = {}
    for path in paths:
        resolved = Path(path).expanduser()
        if not resolved.exists():
            raise SystemExit(f"--env-file does not exist: {resolved}")
        merged.update(parse_env_file_text(resolved.read_text(encoding="utf-8")))

    for key, value in merged.items():
        if override or key not in os.environ:
            os.environ[key] = value
    return merged
