"""Loading and saving :class:`~hexlattice.config.GridConfig` on disk.

The configuration lives in a per-user directory resolved with
``platformdirs.user_config_dir``; when that directory cannot be created a
relative ``./config`` folder is used instead. Writes go through a temporary
file that replaces the target, so a crash never leaves a half-written file.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from .config import GridConfig

CONFIG_FILENAME = "grid.json"


def _compute_config_path() -> Path:
    try:
        base = Path(user_config_dir("hexlattice"))
        base.mkdir(parents=True, exist_ok=True)
    except OSError:
        base = Path("config")
    return base / CONFIG_FILENAME


# Resolved once at import. Tests and callers may patch this attribute.
CONFIG_PATH: Path = _compute_config_path()


def load_config(path: Path | None = None) -> GridConfig:
    """Read the stored configuration, or return defaults.

    A missing, unreadable or invalid file yields ``GridConfig()``; the file
    on disk is left untouched.
    """

    path = CONFIG_PATH if path is None else path
    try:
        return GridConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError):
        return GridConfig()


def save_config(config: GridConfig, path: Path | None = None) -> Path:
    """Write ``config`` atomically and return the path written.

    ``OSError`` propagates to the caller.
    """

    path = CONFIG_PATH if path is None else path
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    temp_path.replace(path)
    return path


__all__ = ["CONFIG_FILENAME", "CONFIG_PATH", "load_config", "save_config"]
