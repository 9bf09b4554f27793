"""Command-line entry point: `frontline <state-file>`."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from frontline.core.errors import FrontlineError
from frontline.core.scraping.fetcher import Fetcher
from frontline.flows.sweep import sync
from frontline.services.opener import open_items

logger = logging.getLogger("frontline.cli")

# sentinel for `--open` given without a program
OS_DEFAULT = ""


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="frontline",
        description=(
            "Download the newest pages of every source listed in a subscription "
            "file and remember where each one stopped."
        ),
    )
    parser.add_argument("state_file", type=Path, help="Path to the subscriptions JSON file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--open",
        nargs="?",
        const=OS_DEFAULT,
        default=None,
        metavar="PROGRAM",
        dest="open_with",
        help=(
            "Open the first new file of every updated source with PROGRAM, "
            "or with the system default viewer when PROGRAM is omitted"
        ),
    )
    parser.add_argument(
        "--covers",
        action="store_true",
        help="Also download each source's cover image if it is missing",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=15.0,
        help="HTTP timeout in seconds for each request",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = sync(args.state_file, fetcher=Fetcher(timeout=args.timeout), covers=args.covers)
    except FrontlineError as exc:
        logger.error("%s", exc)
        return 1

    open_failures = 0
    if args.open_with is not None and summary.first_new_items:
        open_failures = open_items(
            summary.save_root, summary.first_new_items, program=args.open_with or None
        )

    return 0 if summary.ok and not open_failures else 1


if __name__ == "__main__":
    sys.exit(main())
