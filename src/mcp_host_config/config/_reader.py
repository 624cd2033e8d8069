from __future__ import annotations

import json
import logging
from pathlib import Path

from ..errors import ConfigParseError
from ..models.config import HostConfig
from ._result import ReadResult

logger = logging.getLogger(__name__)


def parse_host_config(path: Path) -> ReadResult:
    """Parse a host config file without deciding what a failure means.

    A missing file yields an empty config. Unreadable content, invalid JSON, or a
    top-level value that is not an object yields a ConfigParseError in the result.
    """
    path = Path(path)
    if not path.exists():
        return ReadResult(path=path, config=HostConfig())
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        return ReadResult(path=path, error=ConfigParseError(str(e), path=path))
    if not isinstance(data, dict):
        return ReadResult(
            path=path,
            error=ConfigParseError(f"expected a JSON object, got {type(data).__name__}", path=path),
        )
    return ReadResult(path=path, config=HostConfig.from_raw(data))


def read_host_config(path: Path) -> HostConfig:
    """Load a host config, failing open.

    A corrupt file for one host must not block changes to the other, so parse
    failures are logged and an empty config is returned instead of raising.
    """
    result = parse_host_config(path)
    if not result.ok:
        logger.warning("Error reading %s: %s", result.path, result.error)
    return result.or_empty()
