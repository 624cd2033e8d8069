"""Server management API over both hosts' config files."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from ..paths import HostPaths
from ._adapters import LocalFilesystemHostConfigStore
from ._in_memory import InMemoryHostConfigStore
from ._manager import ServerManager, server_name
from ._protocols import HostConfigStore, PackageRegistry


def make_server_manager(
    claude_config: Path | None = None,
    amazonq_config: Path | None = None,
    registry: PackageRegistry | None = None,
) -> ServerManager:
    """Build a ServerManager over the hosts' config files.

    claude_config: defaults to the platform's Claude desktop config path
    amazonq_config: defaults to ~/.aws/amazonq/mcp.json
    registry: where package runtimes are looked up; without one, installs default to node
    """
    paths = HostPaths.default()
    if claude_config is not None:
        paths = replace(paths, claude=Path(claude_config))
    if amazonq_config is not None:
        paths = replace(paths, amazonq=Path(amazonq_config))
    return ServerManager(store=LocalFilesystemHostConfigStore(paths), registry=registry)


__all__ = [
    "HostConfigStore",
    "InMemoryHostConfigStore",
    "LocalFilesystemHostConfigStore",
    "PackageRegistry",
    "ServerManager",
    "make_server_manager",
    "server_name",
]
