"""Host config file models: the mcpServers map plus a side-table of host-owned keys."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .server import OpaqueServerEntry, ServerEntry

logger = logging.getLogger(__name__)

MCP_SERVERS_KEY = "mcpServers"


class HostConfig(BaseModel):
    """One host's configuration file.

    Attributes:
        mcp_servers: Server name -> ServerEntry (the "mcpServers" key).
        extra: Every other top-level key, in file order. Opaque to this package
            and written back unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)
    mcp_servers: dict[str, ServerEntry] = Field(default_factory=dict, alias="mcpServers")
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_raw(cls, data: dict[str, Any]) -> HostConfig:
        """Build from a parsed JSON object, coercing mcpServers to a mapping of entries."""
        extra = {k: v for k, v in data.items() if k != MCP_SERVERS_KEY}
        return cls(mcpServers=_coerce_servers(data.get(MCP_SERVERS_KEY)), extra=extra)

    def to_raw(self) -> dict[str, Any]:
        out = dict(self.extra)
        out[MCP_SERVERS_KEY] = {name: entry.to_raw() for name, entry in self.mcp_servers.items()}
        return out


class MergedConfig(HostConfig):
    """Transient union of both hosts' configs. Never persisted as its own file."""


def _coerce_servers(raw: object) -> dict[str, ServerEntry]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring %s of type %s, expected an object", MCP_SERVERS_KEY, type(raw).__name__)
        return {}
    servers: dict[str, ServerEntry] = {}
    for name, value in raw.items():
        if not isinstance(value, dict):
            logger.warning("Skipping server %r: entry is not an object", name)
            continue
        try:
            servers[name] = ServerEntry.model_validate(value)
        except ValidationError as e:
            logger.debug("Keeping server %r verbatim: %s", name, e)
            servers[name] = OpaqueServerEntry.model_validate(value)
    return servers
