"""Concrete store backed by the hosts' config files on disk."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import read_merged_config, write_configs

if TYPE_CHECKING:
    from ..models.config import HostConfig, MergedConfig
    from ..paths import HostPaths


class LocalFilesystemHostConfigStore:
    """Reads and writes the Claude and Amazon Q config files named in a HostPaths table."""

    def __init__(self, paths: HostPaths) -> None:
        self._paths = paths

    @property
    def paths(self) -> HostPaths:
        return self._paths

    def read_merged(self) -> MergedConfig:
        return read_merged_config(self._paths)

    def write_merged(self, config: HostConfig) -> None:
        write_configs(config, self._paths)
