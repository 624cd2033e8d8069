from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .._files import atomic_write
from ..errors import ConfigWriteError
from ..models.config import MCP_SERVERS_KEY
from ..paths import HOST_LABELS, HOSTS
from ._reader import parse_host_config

if TYPE_CHECKING:
    from ..models.config import HostConfig
    from ..models.server import ServerEntry
    from ..paths import HostPaths

logger = logging.getLogger(__name__)


def write_host_config(path: Path, servers: dict[str, ServerEntry]) -> None:
    """Replace mcpServers in one host file, keeping every other top-level key.

    An existing file that cannot be parsed is treated as empty and overwritten.

    Raises:
        ConfigWriteError: If the directory or file cannot be written.
    """
    path = Path(path)
    existing = parse_host_config(path)
    if not existing.ok:
        logger.debug("Overwriting unparseable %s: %s", path, existing.error)
    out = dict(existing.or_empty().extra)
    out[MCP_SERVERS_KEY] = {name: entry.to_raw() for name, entry in servers.items()}
    try:
        atomic_write(path, json.dumps(out, indent=2))
    except OSError as e:
        raise ConfigWriteError(f"Failed to write {path}: {e}", path=path) from e


def write_configs(config: HostConfig, paths: HostPaths) -> None:
    """Write the same mcpServers map to every host file, one after the other.

    Not atomic across hosts: if a later write fails, earlier hosts keep their update
    and the ConfigWriteError propagates.
    """
    for host in HOSTS:
        write_host_config(paths.for_host(host), config.mcp_servers)
        logger.info("Updated %s MCP configuration", HOST_LABELS[host])
