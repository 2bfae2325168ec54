#!/usr/bin/env python3
"""
ProfileSync CLI

Command-line interface for copying developer tool configuration between
platform home directories.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from common.exceptions import CatalogError, ConfigError, PlanError
from common.logging_config import setup_logging

from .catalog import MappingCatalog, default_catalog, load_catalog
from .executor import MigrationExecutor, RunOptions
from .platforms import SUPPORTED_PLATFORMS, detect_platform, parse_platform
from .plan import build_plan
from .report import build_report, render_report

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}


def str_to_bool(value: str) -> bool:
    """Parse a boolean flag value such as --dry-run=false."""
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got '{value}'")


def progress_callback(done: int, total: int):
    """Keep a progress line at the bottom of an interactive terminal."""
    if not sys.stderr.isatty():
        return
    end = "\n" if done >= total else ""
    print(f"\r\033[KProgress: {done}/{total}", end=end, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    current = detect_platform().value
    choices = ", ".join(p.value for p in SUPPORTED_PLATFORMS)

    parser = argparse.ArgumentParser(
        prog="profilesync",
        description="Migrate developer tool configuration between platforms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  profilesync                                  # Preview migration on this OS
  profilesync --source linux --dest macos      # Preview linux -> macos
  profilesync --dry-run=false                  # Copy files for real
  profilesync --dry-run=false --force          # Overwrite existing files
        """,
    )
    parser.add_argument("--source", default=current, help=f"Source platform ({choices})")
    parser.add_argument("--dest", default=current, help=f"Destination platform ({choices})")
    parser.add_argument(
        "--dry-run", type=str_to_bool, nargs="?", const=True, default=True,
        metavar="BOOL", help="Preview migration without making changes (default: true)",
    )
    parser.add_argument("--force", action="store_true", help="Overwrite existing files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--catalog", type=Path, help="JSON mapping catalog (default: built-in)")
    parser.add_argument(
        "--copy-directories", action="store_true",
        help="Copy directory entries recursively",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-file", type=Path, help="Also write a JSON log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(level=level, log_file=args.log_file, json_logs=True)

    try:
        source = parse_platform(args.source)
        destination = parse_platform(args.dest)
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    catalog: MappingCatalog
    try:
        catalog = load_catalog(args.catalog) if args.catalog else default_catalog()
    except CatalogError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    try:
        plan = build_plan(source, destination, catalog)
    except PlanError as e:
        print(f"Error creating migration plan: {e.message}", file=sys.stderr)
        return 1

    options = RunOptions(
        dry_run=args.dry_run,
        force=args.force,
        verbose=args.verbose,
        copy_directories=args.copy_directories,
    )

    executor = MigrationExecutor(options)
    executor.set_progress_callback(progress_callback)
    summary = executor.execute(plan)

    report = build_report(plan, options.dry_run, summary)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(render_report(report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
