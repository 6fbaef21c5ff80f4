#!/usr/bin/env python3
"""
ADRScope command line.

Commands:
1. generate - write a self-contained HTML viewer
2. wiki     - write GitHub Wiki pages and copy the source ADRs next to them
3. validate - check ADRs against the validation rules
4. stats    - print statistics as text, JSON or markdown

Usage:
    adrscope generate --input docs/decisions --output adrs.html
    adrscope validate --strict
    adrscope stats --format json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from . import __version__
from .catalog import BuildResult, CatalogBuilder
from .config import Settings, load_environment
from .errors import AdrScopeError
from .fs import FileSystem
from .output import HtmlRenderer, RenderConfig, StatsFormat, Theme, WikiRenderer, format_statistics
from .validation import Validator, default_rules
from .views import compute_statistics

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adrscope",
        description="Decode, validate and present Architecture Decision Records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Generate the HTML viewer
    adrscope generate -i docs/decisions -o adrs.html

    # Generate wiki pages linking back to a published viewer
    adrscope wiki -o wiki --pages-url https://example.org/adrs.html

    # Fail on warnings too
    adrscope validate --strict

    # Statistics as JSON
    adrscope stats --format json

Environment variables (ADRSCOPE_INPUT_DIR, ADRSCOPE_PATTERN, ...) and a
.env file in the working directory set the defaults.
        """
    )
    parser.add_argument("--version", action="version", version=f"adrscope {__version__}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed output"
    )

    # Input options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--input",
        "-i",
        type=Path,
        default=Path(settings.input_dir),
        help=f"Directory containing ADR files (default: {settings.input_dir})"
    )
    common.add_argument(
        "--pattern",
        "-p",
        default=settings.pattern,
        help=f"Glob pattern for ADR files (default: {settings.pattern})"
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    generate = commands.add_parser("generate", parents=[common], help="Generate the HTML viewer")
    generate.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path(settings.output),
        help=f"Output HTML file (default: {settings.output})"
    )
    generate.add_argument("--title", default=settings.title, help="Page title")
    generate.add_argument(
        "--theme",
        type=Theme.parse,
        default=Theme.AUTO,
        help="Color theme: light, dark or auto (default: auto)"
    )

    wiki = commands.add_parser("wiki", parents=[common], help="Generate GitHub Wiki pages")
    wiki.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path(settings.wiki_dir),
        help=f"Output directory (default: {settings.wiki_dir})"
    )
    wiki.add_argument("--pages-url", help="URL of the published HTML viewer")

    validate = commands.add_parser("validate", parents=[common], help="Validate ADR files")
    validate.add_argument(
        "--strict",
        action="store_true",
        help="Fail on warnings as well as errors"
    )

    stats = commands.add_parser("stats", parents=[common], help="Show ADR statistics")
    stats.add_argument(
        "--format",
        "-f",
        type=StatsFormat.parse,
        default=StatsFormat.TEXT,
        help="Output format: text, json or markdown (default: text)"
    )

    return parser


def load_records(args: argparse.Namespace, settings: Settings, fs: FileSystem) -> BuildResult:
    builder = CatalogBuilder(workers=settings.workers)
    result = builder.build_from_directory(args.input, args.pattern, fs)

    for locator, error in result.errors:
        print(f"  ⚠ Skipping {locator}: {error}", file=sys.stderr)

    logger.info(f"Decoded {len(result.records)} ADRs from {args.input}")
    return result


def run_generate(args: argparse.Namespace, settings: Settings, fs: FileSystem) -> int:
    result = load_records(args, settings, fs)
    records = result.sorted_records()

    config = RenderConfig(title=args.title, theme=args.theme)
    html = HtmlRenderer().render(records, str(args.input), config)
    fs.write_text(args.output, html)

    print(f"✓ Generated {args.output} with {len(records)} ADRs")
    return 0


def run_wiki(args: argparse.Namespace, settings: Settings, fs: FileSystem) -> int:
    result = load_records(args, settings, fs)
    records = result.sorted_records()

    fs.create_dir(args.output)
    pages = WikiRenderer().render_all(records, args.pages_url)
    written: Dict[str, str] = {}
    for filename, content in pages:
        fs.write_text(args.output / filename, content)
        written[filename] = "generated page"

    # Pages link to the ADRs by filename, so the wiki is flat
    copied = 0
    for record in records:
        if record.filename in written:
            logger.warning(
                f"Not copying {record.source}: {record.filename} already written from {written[record.filename]}"
            )
            print(f"  ⚠ Skipping {record.source}: {record.filename} already exists in the wiki", file=sys.stderr)
            continue
        fs.write_text(args.output / record.filename, fs.read_text(record.source))
        written[record.filename] = record.source
        copied += 1

    print(f"✓ Generated {len(pages)} wiki pages and copied {copied} ADRs to {args.output}")
    if args.verbose:
        for filename, _ in pages:
            print(f"    • {filename}")
    return 0


def run_validate(args: argparse.Namespace, settings: Settings, fs: FileSystem) -> int:
    result = load_records(args, settings, fs)

    report = Validator(default_rules()).validate_all(result.records)
    for issue in report:
        print(f"  {issue}")

    decode_failures = len(result.errors)
    passed = (
        decode_failures == 0
        and report.is_valid()
        and not (args.strict and report.warning_count > 0)
    )

    print(
        f"\n{len(result.records)} ADRs checked: {report.error_count} error(s), "
        f"{report.warning_count} warning(s), {decode_failures} file(s) failed to parse"
    )
    if passed:
        print("✓ Validation passed")
        return 0
    print("✗ Validation failed" + (" (strict mode)" if args.strict else ""))
    return 1


def run_stats(args: argparse.Namespace, settings: Settings, fs: FileSystem) -> int:
    result = load_records(args, settings, fs)
    stats = compute_statistics(result.records)
    print(format_statistics(stats, args.format).rstrip("\n"))
    return 0


COMMANDS = {
    "generate": run_generate,
    "wiki": run_wiki,
    "validate": run_validate,
    "stats": run_stats,
}


def main(argv: Optional[List[str]] = None) -> int:
    load_environment()
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        return 1

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(settings.log_level, args.verbose)

    try:
        return COMMANDS[args.command](args, settings, FileSystem())
    except AdrScopeError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        if args.verbose:
            logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
