"""Command-line interface for the range remapper.

WHY: Users need a simple way to run an almanac file through the engine
and get "the smallest resulting value" from the terminal. The CLI wires
together file reading, almanac parsing, pipeline construction, the
mapping run and report formatting behind a single command.

HOW: Uses argparse to accept an input file (or "-" for stdin), the seed
mode (--ranges), optional source/target categories, the output format
and an optional output file. Logging is configured once from --verbose
or RANGE_REMAPPER_LOG_LEVEL. Status messages go to stderr; the report
goes to stdout unless --output is given.

RULES:
- Positional argument: input almanac path, "-" reads stdin
- --ranges reads seeds as (start, length) pairs; default from config
- --source defaults to the almanac's seed category
- --target defaults to RANGE_REMAPPER_TARGET, else the chain's last category
- Unknown categories or formats are errors, reported before any mapping
- Exit code 1 on any error, including "no seed reached the target"
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from range_remapper.config import (
    DEFAULT_FORMAT,
    DEFAULT_TARGET_CATEGORY,
    LOG_FORMAT,
    load_log_level,
    load_seed_mode,
)
from range_remapper.core.report import build_report
from range_remapper.formatters import FORMATTERS
from range_remapper.parsing.almanac import (
    Almanac,
    build_pipeline,
    load_almanac,
    parse_almanac,
)

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _load_input(input_file: str) -> Almanac:
    """Parse the almanac from a path, or from stdin for "-"."""
    if input_file == "-":
        return parse_almanac(sys.stdin.read())
    return load_almanac(input_file)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else load_log_level()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _run(args: argparse.Namespace) -> None:
    """Execute parse → build → map → format → write.

    RULES:
    - Validate format and categories before mapping anything
    - Errors raised as ValueError/OSError become "Error: ..." and exit 1
    """
    format_key = args.format or DEFAULT_FORMAT
    if format_key not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS.keys()))
        _fail("Unknown format '{}'. Available formats: {}".format(format_key, available))

    try:
        seed_mode = load_seed_mode("ranges" if args.ranges else None)
        almanac = _load_input(args.input_file)
        pipeline = build_pipeline(almanac)
        seeds = almanac.seeds(seed_mode)
    except (ValueError, OSError) as e:
        _fail(str(e))

    source = args.source or almanac.seed_category
    if source not in pipeline:
        _fail("No map starts at category '{}'. Known categories: {}".format(
            source, ", ".join(pipeline.categories) or "none"
        ))

    target = args.target or DEFAULT_TARGET_CATEGORY or pipeline.terminal_category(source)
    chain = pipeline.chain(source)
    if target not in chain:
        _fail("Category '{}' is not reachable from '{}' (chain: {})".format(
            target, source, " -> ".join(chain)
        ))

    _status("Mapping {} {} seed(s) from {} to {}...".format(
        len(seeds), seed_mode, source, target
    ))
    try:
        report = build_report(pipeline, seeds, source, target, seed_mode)
    except ValueError as e:
        _fail(str(e))
    logger.info("Chain walked: %s", " -> ".join(report.chain))

    if report.lowest is None:
        _fail("Could not map any {} to {}".format(source, target))
    if report.unmapped_count:
        _status("  {} seed(s) did not reach {}".format(report.unmapped_count, target))

    formatter = FORMATTERS[format_key]()
    output = formatter.format(report)

    if args.output:
        try:
            Path(args.output).write_text(output.content, encoding="utf-8")
        except OSError as e:
            _fail(str(e))
        _status("Saved {} to {}".format(formatter.name, args.output))
    else:
        sys.stdout.write(output.content)
        sys.stdout.flush()

    _status("Done! lowest {}: {}".format(target, report.lowest))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="range-remapper",
        description="Map seeds through the chain of category maps in an almanac "
                    "and report the smallest resulting value.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the almanac text file, or '-' to read stdin.",
    )

    parser.add_argument(
        "--ranges",
        action="store_true",
        default=False,
        help="Read seeds as (start, length) pairs instead of single numbers.",
    )

    parser.add_argument(
        "--source",
        default=None,
        help="Category the seeds belong to (default: from the seeds line).",
    )

    parser.add_argument(
        "--target",
        default=None,
        help="Category to map to (default: RANGE_REMAPPER_TARGET or the last "
             "category of the chain).",
    )

    parser.add_argument(
        "--format",
        default=None,
        help="Output format. Available: {}. Default: {}.".format(
            ", ".join(sorted(FORMATTERS.keys())), DEFAULT_FORMAT
        ),
    )

    parser.add_argument(
        "--output",
        default=None,
        help="Write the report to this file instead of stdout.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Log every mapping hop (DEBUG level).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        _configure_logging(args.verbose)
    except ValueError as e:
        _fail(str(e))
    _run(args)


if __name__ == "__main__":
    main()
