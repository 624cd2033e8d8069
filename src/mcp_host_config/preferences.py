"""Read/write of the package's own preferences.json."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ._files import atomic_write
from .errors import ConfigWriteError
from .models.preferences import Preferences


def read_preferences(path: Path) -> Preferences:
    """Load preferences, returning defaults if the file is missing or malformed."""
    path = Path(path)
    if not path.exists():
        return Preferences()
    try:
        return Preferences.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError, ValidationError):
        return Preferences()


def write_preferences(path: Path, prefs: Preferences) -> None:
    path = Path(path)
    data = prefs.model_dump(by_alias=True, exclude_none=True)
    try:
        atomic_write(path, json.dumps(data, indent=2))
    except OSError as e:
        raise ConfigWriteError(f"Failed to write {path}: {e}", path=path) from e
