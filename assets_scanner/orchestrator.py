"""Generation pipeline: options + pubspec -> `r.dart` text -> file."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Optional

from .config import (
    OPTIONS_FILENAME,
    PUBSPEC_FILENAME,
    ConfigError,
    ScannerOptions,
    parse_options,
    parse_pubspec,
)
from .fs import FileSystem, LocalFileSystem
from .grouping import PackageAssetGrouper
from .logging import get_logger
from .matcher import AssetMatcher
from .models import GeneratedDocument, GenerationOutcome, ProjectManifest
from .rendering import FILE_HEADER, GENERATED_FILENAME, PackageClassRenderer, RClassRenderer


class Orchestrator:
    """Coordinates asset matching, grouping and rendering for one project."""

    def __init__(
        self,
        file_system: FileSystem,
        *,
        project_root: Path | None = None,
        matcher: AssetMatcher | None = None,
        grouper: PackageAssetGrouper | None = None,
        r_class_renderer: RClassRenderer | None = None,
        package_class_renderer: PackageClassRenderer | None = None,
    ) -> None:
        self.file_system = file_system
        self.project_root = project_root
        self.matcher = matcher or AssetMatcher(file_system)
        self.grouper = grouper or PackageAssetGrouper()
        self.r_class_renderer = r_class_renderer or RClassRenderer()
        self.package_class_renderer = package_class_renderer or PackageClassRenderer()
        self.logger = get_logger("orchestrator")

    @classmethod
    def for_project(cls, path: str) -> "Orchestrator":
        """Build an orchestrator working on the project directory at `path`."""
        file_system = LocalFileSystem(Path(path))
        return cls(file_system, project_root=file_system.root)

    def run(self, *, dry_run: bool = False) -> GenerationOutcome:
        """Regenerate `r.dart`, writing it only when its content changes."""
        manifest = self.load_manifest()
        if manifest is None:
            self.logger.info("%s is empty; nothing to generate", PUBSPEC_FILENAME)
            return GenerationOutcome(path=None, diff="", dry_run=dry_run, written=False)

        options = self.load_options()
        self.logger.debug("Loaded options %s", options)
        document = self.generate(options, manifest)
        if document is None:
            self.logger.info("No assets declared; nothing to generate")
            return GenerationOutcome(path=None, diff="", dry_run=dry_run, written=False)

        previous = self._read_existing(document.path)
        if previous == document.content:
            self.logger.info("%s is already up to date", document.path)
            return GenerationOutcome(path=document.path, diff="", dry_run=dry_run, written=False)

        diff = _unified_diff(previous, document.content, document.path)
        if dry_run:
            return GenerationOutcome(path=document.path, diff=diff, dry_run=True, written=False)

        self.file_system.write_text(document.path, document.content)
        self.logger.info("Wrote %s", document.path)
        return GenerationOutcome(path=document.path, diff=diff, dry_run=False, written=True)

    def generate(self, options: ScannerOptions, manifest: ProjectManifest) -> Optional[GeneratedDocument]:
        """Return the generated document, or None when there is nothing to write."""
        try:
            output_dir = options.output_dir()
        except ConfigError as exc:
            self.logger.error("%s", exc)
            raise

        asset_paths = self.matcher.resolve(manifest.assets)
        self.logger.debug("Resolved %d asset files", len(asset_paths))
        r_class = self.r_class_renderer.render(
            options.class_name,
            manifest.package,
            asset_paths,
            ignore_comment=options.ignore_comment,
            name_pattern=options.name_pattern,
            project_root=self.project_root,
        )

        groups = self.grouper.group(manifest.assets, manifest.dependencies)
        package_classes = self.package_class_renderer.render(groups)

        if not r_class and not package_classes:
            return None

        parts = ["\n".join(FILE_HEADER) + "\n", r_class]
        if r_class and package_classes:
            parts.append("\n")
        parts.append(package_classes)
        return GeneratedDocument(path=f"{output_dir}/{GENERATED_FILENAME}", content="".join(parts))

    def load_options(self) -> ScannerOptions:
        try:
            text = self.file_system.read_text(OPTIONS_FILENAME)
        except FileNotFoundError:
            return ScannerOptions()
        return parse_options(text)

    def load_manifest(self) -> Optional[ProjectManifest]:
        text = self.file_system.read_text(PUBSPEC_FILENAME)
        fallback = self.project_root.name if self.project_root is not None else "app"
        return parse_pubspec(text, fallback_package=fallback)

    def _read_existing(self, path: str) -> str:
        try:
            return self.file_system.read_text(path)
        except FileNotFoundError:
            return ""


def _unified_diff(old: str, new: str, path: str) -> str:
    diff = difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    return "".join(diff)


__all__ = ["Orchestrator"]
