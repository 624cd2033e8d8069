"""Per-platform config file locations for each host."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

Host = Literal["claude", "amazonq"]

# Precedence order: the first host wins when both define the same key.
HOSTS: tuple[Host, ...] = ("claude", "amazonq")

HOST_LABELS: dict[Host, str] = {"claude": "Claude", "amazonq": "Amazon Q"}

CLAUDE_CONFIG_FILE = "claude_desktop_config.json"


def _resolve(
    platform: str | None, environ: Mapping[str, str] | None, home: Path | None
) -> tuple[str, Mapping[str, str], Path]:
    return (
        platform or sys.platform,
        os.environ if environ is None else environ,
        Path.home() if home is None else Path(home),
    )


def _appdata(environ: Mapping[str, str], home: Path) -> Path:
    appdata = environ.get("APPDATA")
    return Path(appdata) if appdata else home / "AppData" / "Roaming"


def host_config_path(
    host: Host,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    """Return the config file path for a host. The path is computed, not checked for existence.

    Args:
        host: "claude" (desktop client) or "amazonq" (CLI).
        platform: A sys.platform value. Defaults to the running platform.
        environ: Environment mapping. Defaults to os.environ.
        home: Home directory. Defaults to Path.home().
    """
    platform, environ, home = _resolve(platform, environ, home)
    if host == "amazonq":
        return home / ".aws" / "amazonq" / "mcp.json"
    if host != "claude":
        raise ValueError(f"Unknown host: {host!r}")

    if platform == "win32":
        base = _appdata(environ, home)
    elif platform == "darwin":
        base = home / "Library" / "Application Support"
    else:
        xdg = environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else home / ".config"
    return base / "Claude" / CLAUDE_CONFIG_FILE


def preferences_path(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    platform, environ, home = _resolve(platform, environ, home)
    if platform == "win32":
        return _appdata(environ, home) / "mcp-get" / "preferences.json"
    return home / ".mcp-get" / "preferences.json"


@dataclass(frozen=True)
class HostPaths:
    """Table of config file paths, one per host, plus the preferences file."""

    claude: Path
    amazonq: Path
    preferences: Path

    @classmethod
    def default(
        cls,
        platform: str | None = None,
        environ: Mapping[str, str] | None = None,
        home: Path | None = None,
    ) -> HostPaths:
        return cls(
            claude=host_config_path("claude", platform, environ, home),
            amazonq=host_config_path("amazonq", platform, environ, home),
            preferences=preferences_path(platform, environ, home),
        )

    def for_host(self, host: Host) -> Path:
        if host == "claude":
            return self.claude
        if host == "amazonq":
            return self.amazonq
        raise ValueError(f"Unknown host: {host!r}")
