from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..models.config import HostConfig

if TYPE_CHECKING:
    from pathlib import Path

    from ..errors import ConfigParseError


@dataclass
class ReadResult:
    """Outcome of parsing one host config file, before deciding how to fail.

    Attributes:
        path: The file that was read.
        config: The parsed config, or None if parsing failed.
        error: The parse failure, or None on success. A missing file is a success.
    """

    path: Path
    config: HostConfig | None = None
    error: ConfigParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_empty(self) -> HostConfig:
        """The parsed config, or an empty one if parsing failed."""
        if self.config is None:
            return HostConfig()
        return self.config
