"""
Command-line launcher - Resolve a query against a plan file.

Usage:
  launchplan "img:cats"                      # first destination, sample plan
  launchplan "img:cats" --plan my.toml --all # every destination
  launchplan "img:cats" --shared <token>     # plan from a share link
  launchplan "img:cats" --open               # open in the browser
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .errors import PlanParseError
from .search.resolver import resolve
from .services.plan_parser import parse_plan
from .services.plan_store import load_plan_text
from .utils.helpers import configure_logging, load_settings, open_url

EXIT_INVALID_PLAN = 1
EXIT_NO_DESTINATION = 2


def _read_plan_text(args: argparse.Namespace) -> str:
    if args.plan:
        return Path(args.plan).expanduser().read_text(encoding="utf-8")
    return load_plan_text(share_token=args.shared)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve a query against a launch plan")
    parser.add_argument("query")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--plan", help="TOML plan file (default: bundled sample)")
    source.add_argument("--shared", help="compressed plan token from a share link")
    parser.add_argument("--all", action="store_true", help="print every destination")
    parser.add_argument("--open", action="store_true", help="open destinations with xdg-open")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(args.log_level or settings["logging"]["level"])

    try:
        plan = parse_plan(_read_plan_text(args))
    except OSError as e:
        print(f"Could not read plan: {e}", file=sys.stderr)
        return EXIT_INVALID_PLAN
    except PlanParseError as e:
        print(f"Invalid plan: {e}", file=sys.stderr)
        return EXIT_INVALID_PLAN

    destinations = resolve(plan, args.query)
    if not destinations:
        print("No destination for this query", file=sys.stderr)
        return EXIT_NO_DESTINATION

    selected = destinations if args.all else destinations[:1]
    for destination in selected:
        print(f"{destination.name}\t{destination.url}")
        if args.open:
            open_url(destination.url)

    logger.debug(f"Printed {len(selected)} of {len(destinations)} destination(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
