"""Launcher command derivation for a server's runtime."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from .models.server import RUNTIMES

logger = logging.getLogger(__name__)

NODE_LAUNCHER = "npx"
PYTHON_LAUNCHER = "uvx"

LAUNCHER_LOOKUP_TIMEOUT = 5.0


@dataclass
class LaunchCommand:
    command: str
    args: list[str] = field(default_factory=list)


def resolve_python_launcher(timeout: float = LAUNCHER_LOOKUP_TIMEOUT) -> str:
    """Return the absolute path of uvx, or the bare name if it cannot be located.

    Falls back when `which` is missing, exits non-zero, prints nothing, or does
    not finish within timeout seconds.
    """
    try:
        result = subprocess.run(
            ["which", PYTHON_LAUNCHER], capture_output=True, text=True, timeout=timeout
        )
    except subprocess.TimeoutExpired:
        logger.debug("which %s timed out after %ss", PYTHON_LAUNCHER, timeout)
        return PYTHON_LAUNCHER
    except OSError as e:
        logger.debug("which %s failed: %s", PYTHON_LAUNCHER, e)
        return PYTHON_LAUNCHER
    path = result.stdout.strip()
    if result.returncode != 0 or not path:
        logger.debug("%s not found on PATH, using bare name", PYTHON_LAUNCHER)
        return PYTHON_LAUNCHER
    return path


def derive_launch_command(
    runtime: str,
    package_name: str,
    resolve_launcher: Callable[[], str] = resolve_python_launcher,
) -> LaunchCommand:
    """Pick the launcher and argument shape for a package.

    node -> npx -y <package>; python -> <uvx> <package>.
    """
    if runtime == "node":
        return LaunchCommand(NODE_LAUNCHER, ["-y", package_name])
    if runtime == "python":
        return LaunchCommand(resolve_launcher(), [package_name])
    raise ValueError(f"Unsupported runtime {runtime!r}, expected one of {RUNTIMES}")


def env_vars_to_args(env_vars: Mapping[str, str]) -> list[str]:
    """Turn {"API_KEY": "x"} into ["--api-key", "x"], keeping mapping order."""
    args: list[str] = []
    for key, value in env_vars.items():
        args += [f"--{key.lower().replace('_', '-')}", value]
    return args
