"""Package registry adapters: where a package's declared runtime comes from."""

from ._http import HttpPackageRegistry, fetch_package_list
from ._local import LocalFilePackageRegistry, StaticPackageRegistry

__all__ = [
    "HttpPackageRegistry",
    "LocalFilePackageRegistry",
    "StaticPackageRegistry",
    "fetch_package_list",
]
