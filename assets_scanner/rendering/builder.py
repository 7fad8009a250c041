"""Line-oriented document builder used by the class renderers."""

from __future__ import annotations

from typing import Iterable, List


class DartWriter:
    """Collects output lines with two-space indentation and renders them last."""

    INDENT = "  "

    def __init__(self) -> None:
        self._lines: List[str] = []

    def line(self, text: str = "", *, depth: int = 0) -> "DartWriter":
        self._lines.append(f"{self.INDENT * depth}{text}" if text else "")
        return self

    def lines(self, texts: Iterable[str], *, depth: int = 0) -> "DartWriter":
        for text in texts:
            self.line(text, depth=depth)
        return self

    def blank(self) -> "DartWriter":
        return self.line()

    def open_class(self, class_name: str, package: str) -> "DartWriter":
        self.line(f"class {class_name} {{")
        self.line(f"static const package = {quote(package)};", depth=1)
        return self.blank()

    def constant(self, name: str, value: str) -> "DartWriter":
        self.line(f"static const {name} = {quote(value)};", depth=1)
        return self.blank()

    def close_class(self, trailer: str) -> "DartWriter":
        self.line(trailer)
        return self.line("}")

    def is_empty(self) -> bool:
        return not self._lines

    def render(self) -> str:
        """Return the collected lines, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self._lines)


def quote(value: str) -> str:
    """Render a single-quoted Dart string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
    return f"'{escaped}'"


__all__ = ["DartWriter", "quote"]
