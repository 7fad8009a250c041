"""File-system access for generation runs: glob listing, reads and writes."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Protocol

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".dart_tool",
    ".idea",
}

_MAGIC_CHARACTERS = set("*?[{\\")


class FileSystem(Protocol):
    """Capabilities the orchestrator needs from its host."""

    def find_matches(self, pattern: str) -> Iterable[str]:
        """Yield project-relative POSIX paths of files matching `pattern`."""

    def read_text(self, path: str) -> str:
        """Return the UTF-8 contents of a project-relative file."""

    def write_text(self, path: str, content: str) -> None:
        """Replace a project-relative file with `content`."""


class LocalFileSystem:
    """FileSystem rooted at a project directory on disk."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def find_matches(self, pattern: str) -> Iterator[str]:
        normalized = pattern.replace("\\", "/").lstrip("/")
        prefix = _static_prefix(normalized)
        if prefix == normalized:
            if (self.root / normalized).is_file():
                yield normalized
            return

        matcher = compile_glob(normalized)
        start = self.root / prefix if prefix else self.root
        if not start.is_dir():
            return
        for rel_path in self._iter_files(start):
            if matcher.match(rel_path):
                yield rel_path

    def read_text(self, path: str) -> str:
        return (self.root / path).read_text(encoding="utf-8")

    def write_text(self, path: str, content: str) -> None:
        target = self.root / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    def _iter_files(self, start: Path) -> Iterator[str]:
        for dirpath, dirnames, filenames in os.walk(start):
            dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
            current_dir = Path(dirpath)
            for filename in sorted(filenames):
                yield (current_dir / filename).relative_to(self.root).as_posix()


def compile_glob(pattern: str) -> "re.Pattern[str]":
    """Compile a glob where `*`/`?` stay within a segment and `**` spans them."""
    return re.compile(f"^{_translate(pattern)}$")


def _translate(pattern: str) -> str:
    parts: List[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "*":
            if pattern.startswith("**", index):
                index += 2
                if index < length and pattern[index] == "/":
                    parts.append("(?:.*/)?")
                    index += 1
                else:
                    parts.append(".*")
                continue
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "[":
            end = pattern.find("]", index + 2)
            if end == -1:
                parts.append(re.escape(char))
            else:
                body = pattern[index + 1 : end]
                negate = body[:1] in {"!", "^"}
                if negate:
                    body = body[1:]
                body = body.replace("\\", "\\\\")
                parts.append(f"[^/{body}]" if negate else f"[{body}]")
                index = end
        elif char == "{":
            end = _closing_brace(pattern, index)
            if end == -1:
                parts.append(re.escape(char))
            else:
                options = _split_alternatives(pattern[index + 1 : end])
                parts.append("(?:" + "|".join(_translate(option) for option in options) + ")")
                index = end
        elif char == "\\" and index + 1 < length:
            index += 1
            parts.append(re.escape(pattern[index]))
        else:
            parts.append(re.escape(char))
        index += 1
    return "".join(parts)


def _closing_brace(pattern: str, start: int) -> int:
    depth = 0
    index = start
    while index < len(pattern):
        char = pattern[index]
        if char == "\\":
            index += 1
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return -1


def _split_alternatives(body: str) -> List[str]:
    """Split a brace body on the commas that are not inside nested braces."""
    options: List[str] = []
    depth = 0
    current = 0
    index = 0
    while index < len(body):
        char = body[index]
        if char == "\\":
            index += 1
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            options.append(body[current:index])
            current = index + 1
        index += 1
    options.append(body[current:])
    return options


def _static_prefix(pattern: str) -> str:
    """Return the leading directory segments of `pattern` that contain no glob syntax."""
    segments = pattern.split("/")
    static: List[str] = []
    for segment in segments:
        if any(char in _MAGIC_CHARACTERS for char in segment):
            return "/".join(static)
        static.append(segment)
    return pattern


__all__ = ["FileSystem", "LocalFileSystem", "compile_glob"]
