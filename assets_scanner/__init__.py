"""Generate Dart constants for the assets declared in a Flutter pubspec."""

from .config import ConfigError, MalformedManifestError, ScannerOptions
from .models import AssetIdentifier, GeneratedDocument, GenerationOutcome, ProjectManifest
from .orchestrator import Orchestrator

__all__ = [
    "AssetIdentifier",
    "ConfigError",
    "GeneratedDocument",
    "GenerationOutcome",
    "MalformedManifestError",
    "Orchestrator",
    "ProjectManifest",
    "ScannerOptions",
]
