"""treediff CLI.

Entry point for the ``treediff`` command-line tool.

Usage:
    treediff diff <expected> <actual> [--format text|json]
                  [--input-format auto|json|yaml] [--limit N]
                  [--ignore-field NAME ...] [--strict-numbers]
                  [--fail-on any|error|never] [--no-markers] [-v]

Exit status: 0 if the documents match (per --fail-on), 1 if they differ,
2 if a document cannot be read or parsed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .core.differ import DiffPolicy
from .core.errors import ParseError
from .core.report import FailOn, build_report
from .documents import FORMATS, load_document
from .version import TREEDIFF_VERSION

logger = logging.getLogger(__name__)

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2

# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def _policy_from_args(args: argparse.Namespace) -> DiffPolicy:
    policy = DiffPolicy.strict() if args.strict_numbers else DiffPolicy.default()
    if args.ignore_field:
        policy = policy.with_ignored(args.ignore_field)
    return policy


def _cmd_diff(args: argparse.Namespace) -> int:
    fmt = None if args.input_format == "auto" else args.input_format
    try:
        expected = load_document(args.expected, fmt)
        actual = load_document(args.actual, fmt)
    except (ParseError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    policy = _policy_from_args(args)
    logger.debug("Comparing %s against %s with %s", args.expected, args.actual, policy)
    report = build_report(expected, actual, policy)
    logger.debug("Found %d discrepancies", len(report.discrepancies))

    if args.format == "json":
        print(json.dumps(report.to_dict(), indent=2, default=str, ensure_ascii=False))
    else:
        print(report.to_text(limit=args.limit, markers=not args.no_markers))

    return EXIT_DIFFERENT if report.fails(args.fail_on) else EXIT_SAME


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treediff",
        description="treediff: structural comparison of JSON and YAML documents",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {TREEDIFF_VERSION}"
    )
    subparsers = parser.add_subparsers(dest="command")

    diff_parser = subparsers.add_parser("diff", help="Compare two documents")
    diff_parser.add_argument("expected", help="Path to the expected document")
    diff_parser.add_argument("actual", help="Path to the actual document")
    diff_parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )
    diff_parser.add_argument(
        "--input-format",
        choices=["auto", *FORMATS],
        default="auto",
        help="Document format; auto uses the file extension (default: auto)",
    )
    diff_parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Show at most N discrepancies in text output",
    )
    diff_parser.add_argument(
        "--ignore-field",
        action="append",
        default=[],
        metavar="NAME",
        help="Skip object fields with this name at any depth (repeatable)",
    )
    diff_parser.add_argument(
        "--strict-numbers",
        action="store_true",
        help="Treat integers and floats as different types (1 != 1.0)",
    )
    diff_parser.add_argument(
        "--fail-on",
        choices=list(FailOn.CHOICES),
        default=FailOn.ANY,
        help="Which discrepancies cause exit status 1 (default: any)",
    )
    diff_parser.add_argument(
        "--no-markers",
        action="store_true",
        help="Omit severity markers in text output",
    )
    diff_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    diff_parser.set_defaults(func=_cmd_diff)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
