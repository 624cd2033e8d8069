from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..models.server import Package

logger = logging.getLogger(__name__)


def _packages_from_list(raw: Any) -> dict[str, Package]:
    if not isinstance(raw, list):
        return {}
    packages: dict[str, Package] = {}
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            pkg = Package.model_validate(item)
        except ValidationError as e:
            logger.warning("Skipping invalid package entry %r: %s", item.get("name"), e)
            continue
        packages[pkg.name] = pkg
    return packages


class StaticPackageRegistry:
    """Looks packages up in a fixed, in-memory collection."""

    def __init__(self, packages: Iterable[Package] = ()) -> None:
        self._packages = {p.name: p for p in packages}

    def get_package(self, name: str) -> Package | None:
        return self._packages.get(name)


class LocalFilePackageRegistry:
    """Reads a package-list.json (a JSON array of {name, runtime, ...}) on first lookup."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._packages: dict[str, Package] | None = None

    def _load(self) -> dict[str, Package]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning("Error reading package list %s: %s", self._path, e)
            return {}
        return _packages_from_list(raw)

    def get_package(self, name: str) -> Package | None:
        if self._packages is None:
            self._packages = self._load()
        return self._packages.get(name)
