"""Persisted logging settings.

The only setting today is ``log_level``, written by ``lalib logging
set-level`` and read back by :func:`lalib.logging.get_logger`. The file is
JSON; its location is, in order of precedence, the ``config_file`` argument,
``$LALIB_LOG_CONFIG``, or ``logging.json`` inside ``$LALIB_CONFIG_DIR``
(default ``~/.lalib``).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

PathLike = Optional[os.PathLike[str] | str]


def _env_path(key: str) -> Optional[Path]:
    raw = (os.environ.get(key) or "").strip()
    return Path(raw).expanduser() if raw else None


def config_path(config_file: PathLike = None) -> Path:
    """Return the logging config file that would be read or written."""

    if config_file is not None:
        return Path(config_file)
    explicit = _env_path("LALIB_LOG_CONFIG")
    if explicit is not None:
        return explicit
    return (_env_path("LALIB_CONFIG_DIR") or Path.home() / ".lalib") / "logging.json"


def _level_number(level: str | int) -> Optional[int]:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).strip().upper())
    return number if isinstance(number, int) else None


def load_config(config_file: PathLike = None) -> Dict[str, Any]:
    """Return the stored settings; unreadable or non-object files count as empty."""

    try:
        data = json.loads(config_path(config_file).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: Dict[str, Any], config_file: PathLike = None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def load_log_level(config_file: PathLike = None) -> Optional[int]:
    """Return the stored level as a number, or ``None`` if unset or unknown."""

    value = load_config(config_file).get("log_level")
    if value is None:
        return None
    return _level_number(value)


def save_log_level(level: str | int, config_file: PathLike = None) -> Path:
    """Store ``level`` by name and return the config path.

    Raises ``ValueError`` for a level name ``logging`` does not know.
    """

    number = _level_number(level)
    if number is None:
        raise ValueError(f"Unknown logging level: {level!r}")
    name = logging.getLevelName(number)
    if not isinstance(name, str) or name.startswith("Level "):
        name = str(number)

    config = load_config(config_file)
    config["log_level"] = name
    return save_config(config, config_file)


__all__ = [
    "config_path",
    "load_config",
    "save_config",
    "load_log_level",
    "save_log_level",
]
