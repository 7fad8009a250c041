"""Tests for assets_scanner.fs."""

from __future__ import annotations

from assets_scanner.fs import LocalFileSystem, compile_glob
from tests._fixtures.project_builder import ProjectBuilder


def test_compile_glob_single_star_stays_within_segment() -> None:
    matcher = compile_glob("assets/*")
    assert matcher.match("assets/icon.png")
    assert not matcher.match("assets/sub/icon.png")


def test_compile_glob_double_star_spans_directories() -> None:
    matcher = compile_glob("assets/**/*.png")
    assert matcher.match("assets/icon.png")
    assert matcher.match("assets/a/b/icon.png")
    assert not matcher.match("assets/a/icon.jpg")


def test_compile_glob_supports_classes_and_alternation() -> None:
    matcher = compile_glob("assets/icon[0-9].{png,jpg}")
    assert matcher.match("assets/icon1.png")
    assert matcher.match("assets/icon2.jpg")
    assert not matcher.match("assets/iconA.png")
    assert not matcher.match("assets/icon1.gif")


def test_compile_glob_supports_nested_alternation() -> None:
    matcher = compile_glob("assets/{icons,{fonts,images}/hd}/*.png")
    assert matcher.match("assets/icons/a.png")
    assert matcher.match("assets/fonts/hd/a.png")
    assert matcher.match("assets/images/hd/a.png")
    assert not matcher.match("assets/images/a.png")
    assert not matcher.match("assets/{fonts/a.png")


def test_compile_glob_escapes_regex_metacharacters() -> None:
    matcher = compile_glob("assets/a+b (1).png")
    assert matcher.match("assets/a+b (1).png")
    assert not matcher.match("assets/aab (1).png")


def test_find_matches_lists_direct_children(project_builder: ProjectBuilder) -> None:
    project_builder.touch(["assets/a.png", "assets/b.png", "assets/sub/c.png", "other/d.png"])
    file_system = LocalFileSystem(project_builder.path())

    assert sorted(file_system.find_matches("assets/*")) == ["assets/a.png", "assets/b.png"]


def test_find_matches_handles_literal_paths(project_builder: ProjectBuilder) -> None:
    project_builder.touch(["assets/a.png"])
    file_system = LocalFileSystem(project_builder.path())

    assert list(file_system.find_matches("assets/a.png")) == ["assets/a.png"]
    assert list(file_system.find_matches("assets/missing.png")) == []
    assert list(file_system.find_matches("assets")) == []


def test_find_matches_skips_tool_directories(project_builder: ProjectBuilder) -> None:
    project_builder.touch(["assets/a.png", ".dart_tool/cache.png", ".git/objects/x.png"])
    file_system = LocalFileSystem(project_builder.path())

    assert list(file_system.find_matches("**/*.png")) == ["assets/a.png"]


def test_find_matches_missing_directory_yields_nothing(project_builder: ProjectBuilder) -> None:
    file_system = LocalFileSystem(project_builder.path())

    assert list(file_system.find_matches("nowhere/*")) == []


def test_write_text_creates_parent_directories(project_builder: ProjectBuilder) -> None:
    file_system = LocalFileSystem(project_builder.path())

    file_system.write_text("lib/generated/r.dart", "content\n")

    assert file_system.read_text("lib/generated/r.dart") == "content\n"
