"""Tests for assets_scanner.config."""

from __future__ import annotations

import pytest

from assets_scanner.config import (
    ConfigError,
    MalformedManifestError,
    ScannerOptions,
    parse_options,
    parse_pubspec,
)


def test_parse_options_returns_defaults_for_blank_file() -> None:
    options = parse_options("\n   \n")

    assert options == ScannerOptions()
    assert options.path == "lib"
    assert options.class_name == "R"
    assert options.ignore_comment is False
    assert options.name_pattern is None


def test_parse_options_reads_every_key() -> None:
    options = parse_options(
        """
path: "lib/generated"
className: "Assets"
ignoreComment: true
namePattern: "^ic_"
"""
    )

    assert options.path == "lib/generated"
    assert options.class_name == "Assets"
    assert options.ignore_comment is True
    assert options.name_pattern == "^ic_"


def test_parse_options_ignores_values_of_wrong_type() -> None:
    options = parse_options("path: 3\nclassName: [a]\nignoreComment: maybe\n")

    assert options == ScannerOptions()


def test_parse_options_keeps_empty_path_for_validation() -> None:
    options = parse_options("path: \"\"\n")

    assert options.path == ""
    with pytest.raises(ConfigError, match="sub-path of lib/"):
        options.output_dir()


def test_parse_options_rejects_non_mapping_root() -> None:
    with pytest.raises(ConfigError):
        parse_options("- lib\n- R\n")


def test_parse_options_rejects_invalid_yaml() -> None:
    with pytest.raises(ConfigError):
        parse_options("path: [lib\n")


def test_parse_options_rejects_invalid_name_pattern() -> None:
    with pytest.raises(ConfigError, match="namePattern"):
        parse_options("namePattern: '(unclosed'\n")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("lib", "lib"),
        ("lib/", "lib"),
        ("lib/generated", "lib/generated"),
        ("lib\\generated\\", "lib/generated"),
    ],
)
def test_output_dir_accepts_paths_under_lib(path: str, expected: str) -> None:
    assert ScannerOptions(path=path).output_dir() == expected


@pytest.mark.parametrize(
    "path", ["build", "library", "src/lib", "", "lib/../build", "lib/..", "lib/a/../../build", "/lib"]
)
def test_output_dir_rejects_paths_outside_lib(path: str) -> None:
    with pytest.raises(ConfigError, match="sub-path of lib/"):
        ScannerOptions(path=path).output_dir()


def test_parse_pubspec_extracts_assets_and_dependencies() -> None:
    manifest = parse_pubspec(
        """
name: my_app
dependencies:
  flutter:
    sdk: flutter
  my_icons: ^1.0.0
flutter:
  assets:
    - assets/
    - assets/icon.png
    - assets/
    - packages/my_icons/images/a.png
""",
        fallback_package="fallback",
    )

    assert manifest is not None
    assert manifest.package == "my_app"
    assert manifest.dependencies == {"flutter", "my_icons"}
    assert manifest.assets == ["assets/", "assets/icon.png", "packages/my_icons/images/a.png"]


def test_parse_pubspec_defaults_missing_sections() -> None:
    manifest = parse_pubspec("description: no assets here\n", fallback_package="my_app")

    assert manifest is not None
    assert manifest.package == "my_app"
    assert manifest.dependencies == set()
    assert manifest.assets == []


def test_parse_pubspec_returns_none_for_empty_document() -> None:
    assert parse_pubspec("", fallback_package="my_app") is None
    assert parse_pubspec("# only a comment\n", fallback_package="my_app") is None


def test_parse_pubspec_raises_for_malformed_document() -> None:
    with pytest.raises(MalformedManifestError):
        parse_pubspec("flutter: [assets\n", fallback_package="my_app")

    with pytest.raises(MalformedManifestError):
        parse_pubspec("just a string\n", fallback_package="my_app")
