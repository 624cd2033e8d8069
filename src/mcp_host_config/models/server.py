from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

Runtime = Literal["node", "python"]

RUNTIMES: tuple[Runtime, ...] = ("node", "python")


class ServerEntry(BaseModel):
    """A single entry under mcpServers (runtime, command, args, env).

    Entries written by the host itself may lack runtime or command, or carry
    keys of their own (url, cwd, disabled); those are kept as extras. Values
    are not coerced, so a host's types survive a read/write cycle.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    runtime: str | None = None
    command: str | None = None
    args: list[Any] | None = None
    env: dict[str, Any] | None = None

    def to_raw(self) -> dict[str, Any]:
        """Dump with only the keys that were set, so host-written entries round-trip as-is."""
        keep = self.model_fields_set | set(self.model_extra or {})
        return {k: v for k, v in self.model_dump(by_alias=True).items() if k in keep}


class OpaqueServerEntry(ServerEntry):
    """Host-written entry whose known keys have shapes this package does not use.

    Held verbatim so it can be written back unchanged.
    """

    runtime: Any = None
    command: Any = None
    args: Any = None
    env: Any = None


class Package(BaseModel):
    """Registry record for an installable MCP server package."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    runtime: Runtime = "node"
