"""Turn asset paths into Dart identifiers and lookup names."""

from __future__ import annotations

import re
from typing import Optional

from .models import AssetIdentifier

PROPERTY_NAME_PREFIX = "r_"

_IDENTIFIER = re.compile(r"^[_$a-zA-Z]+[_a-zA-Z0-9]*$")
_IDENTIFIER_START = re.compile(r"^[_$a-zA-Z]")
_INVALID_IDENTIFIER_CHARACTERS = re.compile(r"[^_a-zA-Z0-9]+")


def asset_name(asset_path: str) -> str:
    """Return the path after its first segment, without the extension.

    `assets/sub/icon.png` gives `sub/icon`. An empty string means the asset
    has no usable name (for example `assets/.DS_Store`).
    """
    start = asset_path.find("/") + 1
    end = asset_path.rfind(".")
    if end < start:
        return ""
    return asset_path[start:end]


def is_identifier(candidate: str) -> bool:
    return bool(_IDENTIFIER.match(candidate))


def has_identifier_start(candidate: str) -> bool:
    return bool(_IDENTIFIER_START.match(candidate))


def create_property_name(asset_path: str) -> str:
    """Return the constant name for `asset_path`, or "" when it must be skipped."""
    name = asset_name(asset_path)
    if not name:
        return name

    if is_identifier(name):
        return name.replace("/", "_")

    property_name = _INVALID_IDENTIFIER_CHARACTERS.sub("_", name)
    if not has_identifier_start(name):
        property_name = PROPERTY_NAME_PREFIX + property_name
    return property_name


def identifier_for(asset_path: str) -> Optional[AssetIdentifier]:
    property_name = create_property_name(asset_path)
    if not property_name:
        return None
    return AssetIdentifier(property_name=property_name, asset_path=asset_path)


def matches_name_pattern(name: str, name_pattern: Optional[str]) -> bool:
    """True when no pattern is configured or the pattern occurs in `name`."""
    return name_pattern is None or re.search(name_pattern, name) is not None


def package_class_name(package_name: str) -> str:
    """Upper-camel-case a package name: `my_icons` -> `MyIcons`."""
    return "".join(segment[:1].upper() + segment[1:] for segment in package_name.split("_"))


__all__ = [
    "PROPERTY_NAME_PREFIX",
    "asset_name",
    "create_property_name",
    "has_identifier_start",
    "identifier_for",
    "is_identifier",
    "matches_name_pattern",
    "package_class_name",
]
