"""Command-line validator: exit 0 for valid JSON, 1 for invalid, 2 for I/O."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import MAX_DEPTH
from . import JSONDecodeError
from . import __version__
from . import depth_limit
from . import loads
from . import tokenize

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def _depth(value: str) -> int:
    depth = int(value)
    if depth < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    if depth > depth_limit():
        raise argparse.ArgumentTypeError(f"must not exceed {depth_limit()}")
    return depth


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsoncheck",
        description="Check that a file contains valid JSON.",
    )
    parser.add_argument("file", help="JSON file to check")
    parser.add_argument(
        "--max-depth",
        type=_depth,
        default=MAX_DEPTH,
        help=f"maximum nesting depth below the root (default {MAX_DEPTH})",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="print the token stream instead of parsing",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="verbose logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logging.getLogger("jsoncheck").setLevel(
        logging.DEBUG if args.verbose else logging.WARNING
    )

    try:
        with open(args.file, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s", args.file, exc_info=True)
        print(f"Error: cannot read {args.file}: {e}")
        return EXIT_UNREADABLE
    logger.debug("Read %d characters from %s", len(text), args.file)

    try:
        if args.tokens:
            for token in tokenize(text):
                pos = token.position
                print(f"{pos.line}:{pos.column}\t{token.token}")
        else:
            loads(text, max_depth=args.max_depth)
    except JSONDecodeError as e:
        print(f"Error: {e}")
        return EXIT_INVALID

    logger.debug("%s is valid JSON", args.file)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
