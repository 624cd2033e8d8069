"""ServerManager: install and uninstall MCP servers across both hosts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from ..models.server import RUNTIMES, Runtime, ServerEntry
from ..runtime import derive_launch_command, resolve_python_launcher
from ._protocols import HostConfigStore, PackageRegistry

if TYPE_CHECKING:
    from ..models.config import HostConfig, MergedConfig

logger = logging.getLogger(__name__)

DEFAULT_RUNTIME: Runtime = "node"


def server_name(package_name: str) -> str:
    """Config key for a package: every "/" becomes "-"."""
    return package_name.replace("/", "-")


class ServerManager:
    def __init__(
        self,
        store: HostConfigStore,
        registry: PackageRegistry | None = None,
        resolve_launcher: Callable[[], str] = resolve_python_launcher,
    ) -> None:
        self._store = store
        self._registry = registry
        self._resolve_launcher = resolve_launcher

    def read_merged(self) -> MergedConfig:
        return self._store.read_merged()

    def write_merged(self, config: HostConfig) -> None:
        self._store.write_merged(config)

    def list_servers(self) -> dict[str, ServerEntry]:
        return self._store.read_merged().mcp_servers

    def _runtime_for(self, package_name: str) -> Runtime:
        if self._registry is None:
            return DEFAULT_RUNTIME
        pkg = self._registry.get_package(package_name)
        if pkg is None:
            return DEFAULT_RUNTIME
        return pkg.runtime

    def install(
        self,
        package_name: str,
        env_vars: Mapping[str, str] | None = None,
        runtime: Runtime | None = None,
    ) -> ServerEntry:
        """Add or replace a server entry for package_name in both hosts.

        Runtime comes from the argument, then the registry, then defaults to node.

        Raises:
            ValueError: If runtime is not "node" or "python".
            ConfigWriteError: If a host file cannot be written. Hosts written
                before the failure keep the new entry.
        """
        if runtime is not None and runtime not in RUNTIMES:
            raise ValueError(f"Unsupported runtime {runtime!r}, expected one of {RUNTIMES}")

        config = self._store.read_merged()
        name = server_name(package_name)
        effective_runtime = runtime or self._runtime_for(package_name)
        launch = derive_launch_command(
            effective_runtime, package_name, resolve_launcher=self._resolve_launcher
        )

        raw: dict[str, object] = {
            "runtime": effective_runtime,
            "command": launch.command,
            "args": launch.args,
        }
        if env_vars is not None:
            raw["env"] = dict(env_vars)
        entry = ServerEntry.model_validate(raw)

        config.mcp_servers[name] = entry
        self._store.write_merged(config)
        return entry

    def uninstall(self, package_name: str) -> bool:
        """Remove a package's entry, stored under either its dashed or raw name.

        Returns False without writing anything if the package is not installed.
        """
        config = self._store.read_merged()
        name = server_name(package_name)

        if name in config.mcp_servers:
            del config.mcp_servers[name]
        elif package_name in config.mcp_servers:
            del config.mcp_servers[package_name]
        else:
            logger.info("Package %s is not installed.", package_name)
            return False

        self._store.write_merged(config)
        return True

    def is_installed(self, package_name: str) -> bool:
        servers = self._store.read_merged().mcp_servers
        return server_name(package_name) in servers or package_name in servers
