"""Core data models shared across assets_scanner components."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass(frozen=True)
class AssetIdentifier:
    """A generated constant name paired with the asset path it points at."""

    property_name: str
    asset_path: str


@dataclass
class ProjectManifest:
    """The parts of `pubspec.yaml` the generator cares about."""

    package: str
    dependencies: Set[str] = field(default_factory=set)
    assets: List[str] = field(default_factory=list)


# package name -> (property name -> path relative to the package)
PackageGroup = Dict[str, Dict[str, str]]


@dataclass(frozen=True)
class GeneratedDocument:
    """Final text of the generated file and where it belongs."""

    path: str
    content: str


@dataclass
class GenerationOutcome:
    """Result of a generation run against a project directory."""

    path: Optional[str]
    diff: str
    dry_run: bool
    written: bool
