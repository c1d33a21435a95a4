"""Command-line entry point.

    release-filter check --name "Artist - Title [2012] [Album]" --year 2012 \
        --tag glitch --tag rock

Exit codes: 0 admitted, 1 rejected, 2 malformed record or bad config.
"""

import argparse
import sys
from typing import Optional, Sequence

from release_filter.config import LOG_LEVEL
from release_filter.core import (
    FilterConfigError,
    MalformedRecordError,
    ReleaseCriteria,
    configure_logging,
    log_error,
    log_info,
    log_section,
)
from release_filter.data import load_filter_config
from release_filter.pipeline import AdmissionFilter, ReleaseFilterChain

EXIT_ADMITTED = 0
EXIT_REJECTED = 1
EXIT_INVALID = 2


def _common_options() -> argparse.ArgumentParser:
    # Accepted before or after the subcommand; SUPPRESS keeps an absent
    # subcommand option from overwriting a top-level one.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="Filter config JSON file")
    common.add_argument("--log-level", default=argparse.SUPPRESS)
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    parser = argparse.ArgumentParser(
        prog="release-filter",
        description="Keep or drop music releases by year and genre tags",
        parents=[common],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Evaluate one release", parents=[common])
    check.add_argument("--name", required=True)
    check.add_argument("--year", required=True)
    check.add_argument("--tag", action="append", default=[], dest="tags")
    check.add_argument("--format", dest="release_format")
    check.add_argument(
        "--verbose-rejections",
        action="store_true",
        help="Include year and tags in rejection lines",
    )
    check.add_argument("--filter-year", action="append", type=int, default=[])
    check.add_argument("--filter-tag", action="append", default=[])
    check.add_argument("--filter-format", action="append", default=[])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # stdout only carries trace lines
    configure_logging(getattr(args, "log_level", LOG_LEVEL), stream=sys.stderr)

    try:
        filter_config = load_filter_config(getattr(args, "config", None))
    except FilterConfigError as e:
        log_error(str(e))
        return EXIT_INVALID

    if args.verbose_rejections:
        filter_config = filter_config.model_copy(update={"verbose_rejections": True})

    chain = ReleaseFilterChain(
        criteria=ReleaseCriteria(
            years=args.filter_year,
            tags=args.filter_tag,
            formats=args.filter_format,
        ),
        admission_filter=AdmissionFilter(filter_config),
    )

    log_section("Release filter")
    log_info(
        f"Allowed tags: {', '.join(filter_config.allowed_tags)}; "
        f"year threshold: {filter_config.year_threshold}"
    )
    record = {
        "year": args.year,
        "name": args.name,
        "tags": args.tags,
        "format": args.release_format,
    }
    try:
        admitted = chain.accepts(record)
    except MalformedRecordError as e:
        log_error(f"Malformed record: {e}")
        return EXIT_INVALID

    return EXIT_ADMITTED if admitted else EXIT_REJECTED
