# jsonrift/cli.py
# Command-line entry point.
#
# Standard invocation:
#   python -m jsonrift.cli expected.json actual.json
#   python -m jsonrift.cli --no-color expected.json actual.json
#
# EXIT CODES:
#   0  -- documents are equal.
#   1  -- documents differ. The annotated report is printed to stdout.
#   2  -- comparison aborted (unreadable file, invalid JSON, scalar top level).
#         The error is printed to stderr.

import argparse
import logging
import sys
from typing import List, Optional

from jsonrift.diff.models import ComparisonStatus
from jsonrift.loader import compare_files
from jsonrift.logger import get_logger
from jsonrift.render.presenter import make_console, print_diff
from jsonrift.render.renderer import format_error
from jsonrift.version import __version__

EXIT_CODES = {
    ComparisonStatus.EQUAL:     0,
    ComparisonStatus.DIFFERENT: 1,
    ComparisonStatus.ERROR:     2,
}


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Structural diff of two JSON documents.",
        prog="python -m jsonrift.cli",
    )
    parser.add_argument("path_a", help="Left-hand (expected) JSON file.")
    parser.add_argument("path_b", help="Right-hand (actual) JSON file.")
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=False,
        help="Print the report without colour bands.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        default=False,
        help="Print nothing; report the result through the exit code only.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Compare two files and return the process exit code."""
    args = _parse_args(argv)
    logger = get_logger("jsonrift", debug=args.debug)
    if not args.debug:
        # Aborts are printed below.
        logger.setLevel(logging.ERROR)

    result = compare_files(args.path_a, args.path_b)
    status = result.status
    logger.debug("compared %s with %s: %s", args.path_a, args.path_b, status.value)

    if args.quiet:
        return EXIT_CODES[status]

    if status is ComparisonStatus.ERROR:
        print(format_error(result), file=sys.stderr)
    elif status is ComparisonStatus.DIFFERENT:
        print_diff(result, console=make_console(color=not args.no_color))

    return EXIT_CODES[status]


if __name__ == "__main__":
    sys.exit(main())
