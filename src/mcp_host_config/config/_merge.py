from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.config import HostConfig, MergedConfig
from ._reader import read_host_config

if TYPE_CHECKING:
    from ..paths import HostPaths


def merge_configs(primary: HostConfig, secondary: HostConfig) -> MergedConfig:
    """Combine two hosts' configs into one logical view.

    Primary wins on collisions, both for extra top-level keys and for server
    names; secondary only fills in what primary lacks. Inputs are not mutated.
    """
    merged = MergedConfig()

    for key, value in primary.extra.items():
        merged.extra[key] = value
    for key, value in secondary.extra.items():
        if key not in merged.extra:
            merged.extra[key] = value

    for name, entry in primary.mcp_servers.items():
        merged.mcp_servers[name] = entry.model_copy(deep=True)
    for name, entry in secondary.mcp_servers.items():
        if name not in merged.mcp_servers:
            merged.mcp_servers[name] = entry.model_copy(deep=True)

    return merged


def read_merged_config(paths: HostPaths) -> MergedConfig:
    """Read both hosts' files and merge them, Claude first."""
    return merge_configs(read_host_config(paths.claude), read_host_config(paths.amazonq))
