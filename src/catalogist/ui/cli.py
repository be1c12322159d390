# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from catalogist.app import parse_catalog_file, summarize_catalog
from catalogist.config import (
    ConfigurationError,
    LoaderConfig,
    PipelineSettings,
    configure_logging,
    get_loader_config,
    get_pipeline_settings,
)
from catalogist.domain.errors import CatalogError
from catalogist.domain.model import DuplicatePolicy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from catalogist.domain.model import Catalog

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Normalize and check wire-format catalogs")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("check", "Parse a catalog file and print a one-line summary"),
        ("show", "Parse a catalog file and list its resources and edges"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("path", type=str, help="Path to a JSON wire-format catalog")
        command.add_argument(
            "--strict",
            action="store_true",
            help="Reject duplicate resources and aliases instead of keeping the last",
        )
        command.add_argument(
            "--max-bytes",
            type=int,
            help="Refuse catalog files larger than this many bytes (defaults to config)",
        )

    return parser.parse_args(list(argv))


def _settings_for(args: argparse.Namespace) -> PipelineSettings:
    if args.strict:
        return PipelineSettings(duplicate_policy=DuplicatePolicy.REJECT)
    return get_pipeline_settings()


def _loader_for(args: argparse.Namespace) -> LoaderConfig:
    if args.max_bytes is None:
        return get_loader_config()
    if args.max_bytes <= 0:
        raise ValueError("--max-bytes must be positive")
    return LoaderConfig(max_payload_bytes=args.max_bytes)


def _print_catalog(catalog: Catalog) -> None:
    print("Resources:")
    for identifier in sorted(catalog.resources):
        resource = catalog.resources[identifier]
        tags = ", ".join(sorted(resource.tags))
        print(f"  {identifier}" + (f" tags=[{tags}]" if tags else ""))
    print("Edges:")
    for edge in sorted(catalog.edges):
        print(f"  {edge}")
    if catalog.aliases:
        print("Aliases:")
        for alias in sorted(catalog.aliases):
            print(f"  {alias} -> {catalog.aliases[alias]}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(verbose=parsed_args.verbose)
        settings = _settings_for(parsed_args)
        loader = _loader_for(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        catalog = parse_catalog_file(parsed_args.path, settings=settings, loader=loader)
    except (CatalogError, OSError) as exc:
        log.error("Could not parse catalog %s: %s", parsed_args.path, exc)  # noqa: TRY400
        sys.exit(1)

    print(summarize_catalog(catalog))
    if parsed_args.command == "show":
        _print_catalog(catalog)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
