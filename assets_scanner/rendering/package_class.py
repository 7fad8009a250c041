"""Rendering of one class per vendored package."""

from __future__ import annotations

from ..models import PackageGroup
from ..naming import package_class_name
from .builder import DartWriter
from .constants import IGNORE_FOR_FILE


class PackageClassRenderer:
    """Emits a namespacing class for each package's assets."""

    def render(self, groups: PackageGroup) -> str:
        writer = DartWriter()
        for package_name, assets in groups.items():
            writer.open_class(package_class_name(package_name), package_name)
            for property_name, asset_path in assets.items():
                writer.constant(property_name, asset_path)
            writer.close_class(IGNORE_FOR_FILE)
        return writer.render()


__all__ = ["PackageClassRenderer"]
