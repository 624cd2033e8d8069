"""Protocols (ports) for the server manager."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models.config import HostConfig, MergedConfig
    from ..models.server import Package


class HostConfigStore(Protocol):
    """Reads the merged view of both hosts and fans writes out to both."""

    def read_merged(self) -> MergedConfig: ...
    def write_merged(self, config: HostConfig) -> None: ...


class PackageRegistry(Protocol):
    """Looks up a package's declared runtime. None means unknown."""

    def get_package(self, name: str) -> Package | None: ...
