from .config import (
    ReadResult,
    merge_configs,
    parse_host_config,
    read_host_config,
    read_merged_config,
    write_configs,
    write_host_config,
)
from .errors import ConfigParseError, ConfigWriteError, FetchError
from .manager import (
    HostConfigStore,
    InMemoryHostConfigStore,
    LocalFilesystemHostConfigStore,
    PackageRegistry,
    ServerManager,
    make_server_manager,
    server_name,
)
from .models import (
    HostConfig,
    MergedConfig,
    OpaqueServerEntry,
    Package,
    Preferences,
    Runtime,
    ServerEntry,
)
from .paths import HOSTS, Host, HostPaths, host_config_path, preferences_path
from .preferences import read_preferences, write_preferences
from .registry import HttpPackageRegistry, LocalFilePackageRegistry, StaticPackageRegistry
from .runtime import (
    LaunchCommand,
    derive_launch_command,
    env_vars_to_args,
    resolve_python_launcher,
)

__all__ = [
    "HOSTS",
    "ConfigParseError",
    "ConfigWriteError",
    "FetchError",
    "Host",
    "HostConfig",
    "HostConfigStore",
    "HostPaths",
    "HttpPackageRegistry",
    "InMemoryHostConfigStore",
    "LaunchCommand",
    "LocalFilePackageRegistry",
    "LocalFilesystemHostConfigStore",
    "MergedConfig",
    "OpaqueServerEntry",
    "Package",
    "PackageRegistry",
    "Preferences",
    "ReadResult",
    "Runtime",
    "ServerEntry",
    "ServerManager",
    "StaticPackageRegistry",
    "derive_launch_command",
    "env_vars_to_args",
    "host_config_path",
    "make_server_manager",
    "merge_configs",
    "parse_host_config",
    "preferences_path",
    "read_host_config",
    "read_merged_config",
    "read_preferences",
    "resolve_python_launcher",
    "server_name",
    "write_configs",
    "write_host_config",
    "write_preferences",
]
