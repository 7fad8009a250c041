"""Fixed text fragments of the generated `r.dart` file."""

from __future__ import annotations

GENERATED_FILENAME = "r.dart"

FILE_HEADER: tuple[str, ...] = (
    "/// GENERATED BY assets_scanner. DO NOT MODIFY BY HAND.",
    "/// See more detail on https://github.com/nobler/assets-scanner.",
)

IGNORED_LINTS: tuple[str, ...] = (
    "always_put_control_body_on_new_line",
    "always_specify_types",
    "annotate_overrides",
    "avoid_annotating_with_dynamic",
    "avoid_as",
    "avoid_catches_without_on_clauses",
    "avoid_returning_this",
    "lines_longer_than_80_chars",
    "omit_local_variable_types",
    "prefer_expression_function_bodies",
    "sort_constructors_first",
    "test_types_in_equals",
    "unnecessary_const",
    "unnecessary_new",
    "public_member_api_docs",
    "constant_identifier_names",
    "prefer_double_quotes",
)

IGNORE_FOR_FILE = "// ignore_for_file: " + ",".join(IGNORED_LINTS)


__all__ = [
    "FILE_HEADER",
    "GENERATED_FILENAME",
    "IGNORED_LINTS",
    "IGNORE_FOR_FILE",
]
