"""Rendering of the project's own asset class (`R` by default)."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from ..logging import get_logger
from ..naming import asset_name, identifier_for, matches_name_pattern
from .builder import DartWriter, quote
from .constants import IGNORE_FOR_FILE

_LOOKUP_DOC = (
    "/// Get the name with the path of a asset in assets folder by its file name(no suffix).",
    "/// Null will be returned if no assets found.",
)


class RClassRenderer:
    """Renders asset constants plus a `get(fileName)` lookup for one project."""

    def __init__(self) -> None:
        self.logger = get_logger("render.r_class")

    def render(
        self,
        class_name: str,
        package: str,
        asset_paths: Sequence[str],
        *,
        ignore_comment: bool = False,
        name_pattern: Optional[str] = None,
        project_root: Optional[Path] = None,
    ) -> str:
        """Return the class source, or "" when there are no asset paths.

        `asset_paths` is rendered in the order given; callers sort it when
        they need reproducible output. `project_root` anchors the absolute
        path embedded in each preview comment (defaults to the working
        directory).
        """
        if not asset_paths:
            return ""

        root = project_root or Path.cwd()
        writer = DartWriter().open_class(class_name, package)

        for asset_path in asset_paths:
            identifier = identifier_for(asset_path)
            if identifier is None:
                self.logger.debug("Skipping %s: no usable property name", asset_path)
                continue
            if not matches_name_pattern(asset_name(asset_path), name_pattern):
                continue
            if not ignore_comment:
                writer.line(f"/// ![]({(root / asset_path).as_posix()})", depth=1)
            writer.constant(identifier.property_name, identifier.asset_path)

        self._write_lookup(writer, asset_paths, name_pattern)
        writer.close_class(IGNORE_FOR_FILE)
        return writer.render()

    def _write_lookup(
        self, writer: DartWriter, asset_paths: Sequence[str], name_pattern: Optional[str]
    ) -> None:
        writer.lines(_LOOKUP_DOC, depth=1)
        writer.line("static String? get(String fileName) {", depth=1)
        writer.line("switch (fileName) {", depth=2)

        unfitted: List[str] = []
        for asset_path in asset_paths:
            name = asset_name(asset_path)
            if not name:
                continue
            if not matches_name_pattern(name, name_pattern):
                unfitted.append(name)
                continue
            writer.line(f"case {quote(name)}:", depth=3)
            writer.line(f"return {quote(asset_path)};", depth=4)

        if unfitted:
            writer.line("// unfitted names:", depth=3)
            writer.lines((f"// {name}" for name in unfitted), depth=3)

        writer.line("default:", depth=3)
        writer.line("return null;", depth=4)
        writer.line("}", depth=2)
        writer.line("}", depth=1)
        writer.blank()


__all__ = ["RClassRenderer"]
