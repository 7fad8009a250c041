"""CLI entrypoint for running the generator against a project directory."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assets-scanner",
        description="Generate an r.dart file exposing a Flutter project's asset paths.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Generate r.dart from pubspec.yaml and assets_scanner_options.yaml.",
    )
    build_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Increase log verbosity for troubleshooting.",
    )
    build_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the Flutter project root (defaults to current directory).",
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the changes to r.dart without writing it.",
    )
    build_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write detailed logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for assets-scanner commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=getattr(args, "log_file", None))

    if args.command == "build":
        dry_run = bool(args.dry_run)
        try:
            outcome = Orchestrator.for_project(args.path).run(dry_run=dry_run)
        except ConfigError as exc:
            parser.exit(1, f"assets-scanner build failed: {exc}\n")
        except OSError as exc:
            parser.exit(1, f"assets-scanner build failed: {exc}\nRun with --verbose for more details.\n")

        if outcome.path is None:
            print("Nothing to generate")
        elif not outcome.diff:
            print(f"{outcome.path} already up to date")
        elif dry_run:
            print(f"{outcome.path} changes (dry-run):")
            print(outcome.diff, end="")
        else:
            print(f"{outcome.path} generated")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
