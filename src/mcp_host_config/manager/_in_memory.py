"""In-memory store for testing (no disk I/O)."""

from __future__ import annotations

from ..config import merge_configs
from ..models.config import HostConfig, MergedConfig


class InMemoryHostConfigStore:
    """Holds one HostConfig per host and applies the same merge/write rules as the file store."""

    def __init__(
        self,
        claude: HostConfig | None = None,
        amazonq: HostConfig | None = None,
    ) -> None:
        self.claude = claude if claude is not None else HostConfig()
        self.amazonq = amazonq if amazonq is not None else HostConfig()
        self.write_count = 0

    def read_merged(self) -> MergedConfig:
        return merge_configs(self.claude, self.amazonq)

    def write_merged(self, config: HostConfig) -> None:
        self.write_count += 1
        for host in (self.claude, self.amazonq):
            host.mcp_servers = {
                name: entry.model_copy(deep=True) for name, entry in config.mcp_servers.items()
            }
