"""Runtime settings read from ``LALIB_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_ESCAPES = {"\\t": "\t", "\\s": " "}


@dataclass(frozen=True)
class Settings:
    delimiter: str = "\t"
    rich_output: bool = True
    max_dimension: int = 100


def _normalize_raw(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _parse_bool(key: str, raw: str) -> bool:
    lower = raw.lower()
    if lower in _TRUTHY:
        return True
    if lower in _FALSY:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")


def _parse_delimiter(raw: str) -> str:
    return _ESCAPES.get(raw, raw)


def _parse_positive_int(key: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ``).

    Unset or blank variables fall back to the defaults. A delimiter of
    ``\\t`` or ``\\s`` stands for a tab or a space.
    """

    env = os.environ if environ is None else environ
    defaults = Settings()

    delimiter = defaults.delimiter
    # delimiter is not stripped: a literal space is a valid value
    raw_delimiter = env.get("LALIB_DELIMITER")
    if raw_delimiter:
        delimiter = _parse_delimiter(raw_delimiter)

    rich_output = defaults.rich_output
    raw_rich = _normalize_raw(env.get("LALIB_RICH"))
    if raw_rich is not None:
        rich_output = _parse_bool("LALIB_RICH", raw_rich)

    max_dimension = defaults.max_dimension
    raw_max = _normalize_raw(env.get("LALIB_MAX_DIMENSION"))
    if raw_max is not None:
        max_dimension = _parse_positive_int("LALIB_MAX_DIMENSION", raw_max)

    return Settings(
        delimiter=delimiter,
        rich_output=rich_output,
        max_dimension=max_dimension,
    )


__all__ = ["Settings", "load_settings"]
