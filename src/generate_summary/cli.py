"""Command-line entry point for generate-summary."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from generate_summary.builder import build_chapters
from generate_summary.config import GENERATE_SUMMARY_LOG_LEVEL, LOG_LEVELS, PREPROCESSOR_NAME, SummaryConfig
from generate_summary.exceptions import GenerateSummaryError
from generate_summary.preprocessor import load_preprocessor_input, run_preprocessor, supports_renderer
from generate_summary.summary import render_summary, write_summary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PREPROCESSOR_NAME,
        description="Generate an mdBook table of contents from the book's source directory.",
    )
    parser.add_argument(
        "--log-level",
        default=GENERATE_SUMMARY_LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (logs go to stderr)",
    )
    subparsers = parser.add_subparsers(dest="command")

    supports = subparsers.add_parser("supports", help="Tell mdBook whether a renderer is supported")
    supports.add_argument("renderer")

    summary = subparsers.add_parser("summary", help="Write SUMMARY.md for a book source directory")
    summary.add_argument("book_src", type=Path, help="Book source directory (e.g. book/src)")
    summary.add_argument("--output", type=Path, help="Where to write SUMMARY.md (default: <book_src>/SUMMARY.md)")
    summary.add_argument("--stdout", action="store_true", help="Print the summary instead of writing it")
    summary.add_argument("--derive-title", action="store_true", help="Use each document's '# ' heading as its title")
    summary.add_argument("--index-base-name", default=None, help="Stem of a directory's index document")
    summary.add_argument("--create-missing-index", action="store_true", help="Create stub index documents")
    summary.add_argument("--ignore-missing-index", action="store_true", help="Allow directories without index documents")
    summary.add_argument("--extension", default=None, help="Document extension (default: md)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices; the default comes from the environment.
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid log level {args.log_level!r} (from GENERATE_SUMMARY_LOG_LEVEL); "
            f"choose from {', '.join(LOG_LEVELS)}"
        )
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "supports":
        return 0 if supports_renderer(args.renderer) else 1

    try:
        if args.command == "summary":
            _write_summary(args)
        else:
            context, book = load_preprocessor_input(sys.stdin)
            json.dump(run_preprocessor(context, book), sys.stdout)
    except GenerateSummaryError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def _write_summary(args: argparse.Namespace) -> None:
    table: dict[str, object] = {
        "derive_title_from_heading": args.derive_title,
        "create_missing_index": args.create_missing_index,
        "ignore_missing_index": args.ignore_missing_index,
    }
    if args.index_base_name is not None:
        table["index_base_name"] = args.index_base_name
    if args.extension is not None:
        table["document_extension"] = args.extension
    config = SummaryConfig.from_table(table)

    chapters = build_chapters(args.book_src, config)
    if args.stdout:
        sys.stdout.write(render_summary(chapters, args.book_src))
    else:
        write_summary(chapters, args.book_src, args.output)
