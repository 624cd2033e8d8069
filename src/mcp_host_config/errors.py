from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigParseError(Exception):
    """Raised when a host config file exists but cannot be parsed.

    Attributes:
        path: The config file that could not be parsed.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigWriteError(Exception):
    """Raised when writing a host config or preferences file fails.

    Attributes:
        path: The file that could not be written, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class FetchError(Exception):
    """Raised when a remote package registry fetch fails (network, HTTP error, timeout).

    Attributes:
        url: The URL that failed, if applicable.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)
