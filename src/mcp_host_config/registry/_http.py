from __future__ import annotations

import httpx

from ..errors import FetchError
from ..models.server import Package
from ._local import _packages_from_list


def fetch_package_list(url: str, timeout: float = 30) -> dict[str, Package]:
    """Fetch and parse a package list (JSON array of packages) from a URL."""
    try:
        response = httpx.get(url, follow_redirects=True, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"HTTP {e.response.status_code} fetching {url}", url=url) from e
    except httpx.HTTPError as e:
        raise FetchError(f"Network error fetching {url}: {e}", url=url) from e

    try:
        data = response.json()
    except Exception as e:
        raise FetchError(f"Invalid JSON at {url}: {e}", url=url) from e

    if not isinstance(data, list):
        raise FetchError(f"Expected a JSON array at {url}", url=url)
    return _packages_from_list(data)


class HttpPackageRegistry:
    """Fetches the package list over HTTP once and answers lookups from it."""

    def __init__(self, url: str, timeout: float = 30) -> None:
        self._url = url
        self._timeout = timeout
        self._packages: dict[str, Package] | None = None

    def get_package(self, name: str) -> Package | None:
        if self._packages is None:
            self._packages = fetch_package_list(self._url, timeout=self._timeout)
        return self._packages.get(name)
