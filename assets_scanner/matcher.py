"""Expansion of `flutter.assets` entries into concrete asset files."""

from __future__ import annotations

from typing import Iterable, List, Set

from .fs import FileSystem
from .logging import get_logger


def entry_to_glob(entry: str) -> str:
    """Directory entries (trailing `/`) cover their direct children only."""
    if entry.endswith("/"):
        return f"{entry}*"
    return entry


class AssetMatcher:
    """Resolves manifest entries against the project's file tree."""

    def __init__(self, file_system: FileSystem) -> None:
        self.file_system = file_system
        self.logger = get_logger("matcher")

    def resolve(self, entries: Iterable[str]) -> List[str]:
        """Return the sorted, de-duplicated paths matched by `entries`."""
        globs = list(dict.fromkeys(entry_to_glob(entry) for entry in entries))
        matched: Set[str] = set()
        for pattern in globs:
            found = set(self.file_system.find_matches(pattern))
            self.logger.debug("Glob %s matched %d files", pattern, len(found))
            matched.update(found)
        return sorted(matched)


__all__ = ["AssetMatcher", "entry_to_glob"]
