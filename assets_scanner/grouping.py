"""Grouping of vendored (`packages/<name>/...`) assets by owning package."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from .logging import get_logger
from .models import PackageGroup

PACKAGES_SEGMENT = "packages"


class PackageAssetGrouper:
    """Partitions `packages/...` entries by their declared dependency."""

    def __init__(self) -> None:
        self.logger = get_logger("grouping")

    def group(self, asset_paths: Iterable[str], dependencies: AbstractSet[str]) -> PackageGroup:
        """Map each declared package to `{property name: path inside the package}`.

        Entries for packages that are not declared dependencies are dropped.
        A repeated property name within one package overwrites the earlier
        path.
        """
        groups: PackageGroup = {}
        for asset_path in asset_paths:
            segments = asset_path.split("/")
            if len(segments) < 2 or segments[0] != PACKAGES_SEGMENT:
                continue

            package_name = segments[1]
            if package_name not in dependencies:
                self.logger.debug("Skipping %s: %s is not a dependency", asset_path, package_name)
                continue

            relative_path = "/".join(segments[2:])
            extension_index = relative_path.rfind(".")
            if extension_index <= 0:
                self.logger.debug("Skipping %s: no file name inside the package", asset_path)
                continue

            property_name = relative_path[:extension_index].replace("/", "_")
            groups.setdefault(package_name, {})[property_name] = relative_path
        return groups


__all__ = ["PACKAGES_SEGMENT", "PackageAssetGrouper"]
