"""Command line interface for checking citation coverage."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .app import CoverageCheckerApp
from .bibliography import DEFAULT_KEY_FIELD
from .errors import CitationCoverageError
from .report import build_result, render_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNCITED = 1
EXIT_ERROR = 2


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citation-coverage",
        description="Report bibliography entries that are never cited in a document",
    )
    parser.add_argument(
        "document",
        help="Path to the document (Markdown, text, DOCX, or PDF); '-' reads stdin",
    )
    parser.add_argument(
        "-b",
        "--bibliography",
        action="append",
        type=Path,
        help=(
            "Path to a CSL-JSON bibliography export (can be repeated). "
            "Defaults to the 'bibliography' entry of the document's YAML front matter"
        ),
    )
    parser.add_argument(
        "--key-field",
        default=DEFAULT_KEY_FIELD,
        help="Entry field holding the citation key (default: %(default)s)",
    )
    parser.add_argument(
        "--marker",
        default=None,
        help="Only count keys preceded by this marker, e.g. '@' for Pandoc citations",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on bibliography entries without a valid citation key instead of skipping them",
    )
    parser.add_argument(
        "--hide-unknown",
        action="store_true",
        help="Do not list cited keys that are missing from the bibliography",
    )
    parser.add_argument(
        "--fail-on-unknown",
        action="store_true",
        help="Also exit with status 1 when the document cites unknown keys",
    )
    parser.add_argument(
        "--exit-zero",
        action="store_true",
        help="Exit with status 0 even when uncited entries are found",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write structured coverage results to a JSON file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    checker = CoverageCheckerApp(
        key_field=args.key_field,
        strict=args.strict,
        marker=args.marker,
    )
    try:
        report = checker.check_files(args.document, args.bibliography)
    except CitationCoverageError as exc:
        logger.debug("Coverage check failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    print(render_report(report, show_unknown=not args.hide_unknown))

    if args.json_output:
        try:
            args.json_output.write_text(json.dumps(build_result(report), indent=2))
        except OSError as exc:
            print(
                f"error: could not write {args.json_output}: {exc.strerror or exc}",
                file=sys.stderr,
            )
            return EXIT_ERROR

    result = report.result
    failed = not result.is_complete or (args.fail_on_unknown and bool(result.unknown))
    if failed and not args.exit_zero:
        return EXIT_UNCITED
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
