"""Configuration loading for assets_scanner (options file and pubspec)."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Set

import yaml

from .models import ProjectManifest

OPTIONS_FILENAME = "assets_scanner_options.yaml"
PUBSPEC_FILENAME = "pubspec.yaml"
SOURCE_ROOT = "lib"


class ConfigError(RuntimeError):
    """Raised when the options are invalid or cannot be parsed."""


class MalformedManifestError(ConfigError):
    """Raised when `pubspec.yaml` is not a structured document."""


@dataclass(frozen=True)
class ScannerOptions:
    """Settings read from `assets_scanner_options.yaml`."""

    path: str = SOURCE_ROOT
    class_name: str = "R"
    ignore_comment: bool = False
    name_pattern: Optional[str] = None

    def output_dir(self) -> str:
        """Return the normalised output directory, validated against `lib/`."""
        normalized = posixpath.normpath(self.path.replace("\\", "/")) if self.path else ""
        inside = normalized == SOURCE_ROOT or normalized.startswith(f"{SOURCE_ROOT}/")
        if not inside or ".." in normalized.split("/"):
            raise ConfigError(
                f"The custom path in {OPTIONS_FILENAME} should be sub-path of {SOURCE_ROOT}/, got {self.path!r}"
            )
        return normalized


def parse_options(text: str) -> ScannerOptions:
    """Build options from the raw options file contents."""
    if not text.strip():
        return ScannerOptions()

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {OPTIONS_FILENAME}: {exc}") from exc
    if data is None:
        return ScannerOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"{OPTIONS_FILENAME} must contain a mapping at the root")

    defaults = ScannerOptions()
    path = _as_str(data.get("path"))
    name_pattern = _as_str(data.get("namePattern"))
    if name_pattern is not None:
        try:
            re.compile(name_pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid namePattern {name_pattern!r}: {exc}") from exc

    return ScannerOptions(
        path=defaults.path if path is None else path,
        class_name=_as_str(data.get("className")) or defaults.class_name,
        ignore_comment=_as_bool(data.get("ignoreComment")) or defaults.ignore_comment,
        name_pattern=name_pattern,
    )


def parse_pubspec(text: str, *, fallback_package: str) -> Optional[ProjectManifest]:
    """Extract package name, dependencies and asset entries from `pubspec.yaml`.

    Returns None for an empty document, which means there is nothing to
    generate for the project.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedManifestError(f"Failed to parse {PUBSPEC_FILENAME}: {exc}") from exc
    if data is None or data == {}:
        return None
    if not isinstance(data, dict):
        raise MalformedManifestError(f"{PUBSPEC_FILENAME} must contain a mapping at the root")

    package = _as_str(data.get("name")) or fallback_package
    return ProjectManifest(
        package=package,
        dependencies=_dependency_names(data.get("dependencies")),
        assets=_asset_entries(_as_dict(data.get("flutter")).get("assets")),
    )


def _dependency_names(value: Any) -> Set[str]:
    if not isinstance(value, dict):
        return set()
    return {str(key) for key in value}


def _asset_entries(value: Any) -> List[str]:
    # The same entry may be declared more than once; keep the first occurrence.
    entries = [item for item in _as_sequence(value) if isinstance(item, str)]
    return list(dict.fromkeys(entries))


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_sequence(value: Any) -> Sequence[Any]:
    if isinstance(value, list):
        return value
    return []


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
