from pathlib import Path

import pytest

from mcp_host_config import HostPaths, host_config_path, preferences_path

HOME = Path("/home/user")


def test_claude_path_macos():
    path = host_config_path("claude", platform="darwin", environ={}, home=HOME)
    assert path == HOME / "Library" / "Application Support" / "Claude" / "claude_desktop_config.json"


def test_claude_path_windows_uses_appdata():
    path = host_config_path(
        "claude", platform="win32", environ={"APPDATA": "/appdata"}, home=HOME
    )
    assert path == Path("/appdata") / "Claude" / "claude_desktop_config.json"


def test_claude_path_windows_without_appdata_falls_back_to_roaming():
    path = host_config_path("claude", platform="win32", environ={}, home=HOME)
    assert path == HOME / "AppData" / "Roaming" / "Claude" / "claude_desktop_config.json"


def test_claude_path_linux_uses_xdg_config_home():
    path = host_config_path(
        "claude", platform="linux", environ={"XDG_CONFIG_HOME": "/xdg"}, home=HOME
    )
    assert path == Path("/xdg") / "Claude" / "claude_desktop_config.json"


def test_claude_path_linux_defaults_to_dot_config():
    path = host_config_path("claude", platform="linux", environ={}, home=HOME)
    assert path == HOME / ".config" / "Claude" / "claude_desktop_config.json"


@pytest.mark.parametrize("platform", ["win32", "darwin", "linux"])
def test_amazonq_path_same_on_all_platforms(platform):
    path = host_config_path("amazonq", platform=platform, environ={"APPDATA": "/x"}, home=HOME)
    assert path == HOME / ".aws" / "amazonq" / "mcp.json"


def test_unknown_host_raises():
    with pytest.raises(ValueError):
        host_config_path("cursor", platform="linux", environ={}, home=HOME)  # type: ignore[arg-type]


def test_path_is_not_checked_for_existence(tmp_path):
    path = host_config_path("amazonq", home=tmp_path / "nowhere")
    assert not path.exists()


def test_preferences_path():
    assert preferences_path(platform="darwin", environ={}, home=HOME) == (
        HOME / ".mcp-get" / "preferences.json"
    )
    assert preferences_path(platform="win32", environ={"APPDATA": "/ad"}, home=HOME) == (
        Path("/ad") / "mcp-get" / "preferences.json"
    )


def test_host_paths_default_and_lookup():
    paths = HostPaths.default(platform="linux", environ={}, home=HOME)
    assert paths.for_host("claude") == paths.claude
    assert paths.for_host("amazonq") == HOME / ".aws" / "amazonq" / "mcp.json"
    assert paths.preferences == HOME / ".mcp-get" / "preferences.json"


def test_host_paths_reads_process_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    paths = HostPaths.default(platform="linux", home=HOME)
    assert paths.claude == tmp_path / "xdg" / "Claude" / "claude_desktop_config.json"
