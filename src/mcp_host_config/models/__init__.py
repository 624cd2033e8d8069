from .config import MCP_SERVERS_KEY, HostConfig, MergedConfig
from .preferences import Preferences
from .server import RUNTIMES, OpaqueServerEntry, Package, Runtime, ServerEntry

__all__ = [
    "MCP_SERVERS_KEY",
    "RUNTIMES",
    "HostConfig",
    "MergedConfig",
    "OpaqueServerEntry",
    "Package",
    "Preferences",
    "Runtime",
    "ServerEntry",
]
