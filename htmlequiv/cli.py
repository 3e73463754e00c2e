"""
Command line interface for comparing HTML files.

Usage:
    htmlequiv compare expected.html page.html
    htmlequiv compare expected.html page.html --selector "main > h1" --comparison-mode outer
    htmlequiv contains page.html "nav a.active" --single

Exit status is 0 on a match, 1 on a mismatch and 2 on invalid arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .comparer import HtmlComparer
from .errors import ConfigurationError
from .options import DEFAULT_PARSER, PARSERS, CompareOptions, ElementComparisonMode, ElementSelectionMode

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_USAGE = 2

# ANSI color codes for TTY output
IS_TTY = sys.stdout.isatty()
RED = "\033[91m" if IS_TTY else ""
GREEN = "\033[92m" if IS_TTY else ""
RESET = "\033[0m" if IS_TTY else ""


def log(msg: str = "") -> None:
    """Print a message and flush stdout immediately."""
    print(msg, flush=True)


def error(msg: str) -> None:
    print(f"Error: {msg}", file=sys.stderr)


def read_html(path: Path) -> str | None:
    """Read an HTML file, reporting a missing file on stderr."""
    if not path.is_file():
        error(f"{path} is not a file")
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def build_options(args: argparse.Namespace) -> CompareOptions:
    """Map parsed command line flags onto comparison options."""
    selection_mode = ElementSelectionMode(getattr(args, "selection_mode", ElementSelectionMode.FIRST.value))
    if getattr(args, "single", False):
        selection_mode = ElementSelectionMode.SINGLE

    return CompareOptions(
        element_selection_mode=selection_mode,
        element_comparison_mode=ElementComparisonMode(
            getattr(args, "comparison_mode", ElementComparisonMode.INNER_CONTENT.value)
        ),
        ignore_additional_attributes=getattr(args, "ignore_additional_attributes", False),
        ignore_additional_class_names=getattr(args, "ignore_additional_class_names", False),
        ignore_class_name_order=not getattr(args, "strict_class_order", False),
        ignore_empty_text_nodes=not getattr(args, "keep_empty_text", False),
        treat_as_fragment=args.fragment,
        parser=args.parser,
    )


def run_compare(args: argparse.Namespace) -> int:
    """Compare two HTML files, optionally narrowing the candidate with a selector."""
    expected = read_html(args.expected)
    candidate = read_html(args.candidate)
    if expected is None or candidate is None:
        return EXIT_USAGE

    comparer = HtmlComparer(build_options(args))
    if args.selector is not None:
        result = comparer.equal_selected(expected, candidate, args.selector)
    else:
        result = comparer.equal(expected, candidate)

    if result.matches:
        log(f"{GREEN}MATCH{RESET}: {args.candidate} matches {args.expected}")
        return EXIT_MATCH

    log(f"{RED}MISMATCH{RESET}: {args.candidate} does not match {args.expected}")
    for line in result.describe(args.selector).splitlines():
        log(f"  {line}")
    return EXIT_MISMATCH


def run_contains(args: argparse.Namespace) -> int:
    """Check that an HTML file has an element matching a selector."""
    html = read_html(args.file)
    if html is None:
        return EXIT_USAGE

    comparer = HtmlComparer(build_options(args))
    if comparer.contains(html, args.selector):
        log(f"{GREEN}FOUND{RESET}: {args.selector}")
        return EXIT_MATCH

    log(f"{RED}NOT FOUND{RESET}: {args.selector}")
    return EXIT_MISMATCH


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Parse input as a body fragment instead of a full document",
    )
    parser.add_argument(
        "--parser",
        choices=PARSERS,
        default=DEFAULT_PARSER,
        help=f"BeautifulSoup tree builder (default: {DEFAULT_PARSER})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log why elements were considered different"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlequiv",
        description="Structural HTML comparison tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compare_parser = subparsers.add_parser("compare", help="Compare two HTML files")
    compare_parser.add_argument("expected", type=Path, help="File with the expected HTML")
    compare_parser.add_argument("candidate", type=Path, help="File with the HTML to check")
    compare_parser.add_argument(
        "-s",
        "--selector",
        type=str,
        default=None,
        help="Only compare the element(s) matching this CSS selector in the candidate",
    )
    compare_parser.add_argument(
        "--selection-mode",
        choices=[mode.value for mode in ElementSelectionMode],
        default=ElementSelectionMode.FIRST.value,
        help="How multiple selector matches are compared (default: first)",
    )
    compare_parser.add_argument(
        "--comparison-mode",
        choices=[mode.value for mode in ElementComparisonMode],
        default=ElementComparisonMode.INNER_CONTENT.value,
        help="What part of a selected element is compared (default: inner)",
    )
    compare_parser.add_argument(
        "--ignore-additional-attributes",
        action="store_true",
        help="Allow extra attributes on candidate elements",
    )
    compare_parser.add_argument(
        "--ignore-additional-class-names",
        action="store_true",
        help="Allow extra class names on candidate elements",
    )
    compare_parser.add_argument(
        "--strict-class-order",
        action="store_true",
        help="Require class names in the same order",
    )
    compare_parser.add_argument(
        "--keep-empty-text",
        action="store_true",
        help="Compare whitespace-only text nodes too",
    )
    _add_common_arguments(compare_parser)

    contains_parser = subparsers.add_parser("contains", help="Check that an element exists")
    contains_parser.add_argument("file", type=Path, help="File with the HTML to search")
    contains_parser.add_argument("selector", type=str, help="CSS selector of the element")
    contains_parser.add_argument(
        "--single", action="store_true", help="Require exactly one matching element"
    )
    _add_common_arguments(contains_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "compare":
            return run_compare(args)
        return run_contains(args)
    except ConfigurationError as e:
        error(str(e))
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
