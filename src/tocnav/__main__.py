"""Command-line entry point: print a TOC tree, optionally filtered."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from tocnav.config import TOCNAV_LOG_LEVEL
from tocnav.exceptions import TocNavError
from tocnav.fetch import fetch_toc_data
from tocnav.filtering import filter_tree
from tocnav.loader import load_toc_file
from tocnav.navigation import NavigationState
from tocnav.output_formatter import format_search_summary, render_tree
from tocnav.schemas import TOCData
from tocnav.tree import build_tree, find_path

logger = logging.getLogger("tocnav")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tocnav", description="Show and search a help table of contents.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Local TOC JSON file")
    source.add_argument("--url", help="Endpoint serving the TOC JSON")
    parser.add_argument("--query", default="", help="Search text; only matching branches are shown")
    parser.add_argument("--active", help="Id of the node to mark active; its ancestors are expanded")
    parser.add_argument("--guard-cycles", action="store_true", help="Fail cleanly on cyclic page graphs")
    parser.add_argument("--no-cache", action="store_true", help="Ignore the local cache when fetching")
    args = parser.parse_args(argv)

    logging.basicConfig(level=TOCNAV_LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        data = load_data(file_path=args.file, url=args.url, use_cache=not args.no_cache)
        tree = build_tree(data, guard_cycles=args.guard_cycles)
    except (TocNavError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        print(f"Failed to load the table of contents: {exc}", file=sys.stderr)
        return 1

    if args.active and not find_path(tree, args.active):
        print(f"Unknown page id: {args.active}", file=sys.stderr)
        return 1

    query = args.query.strip()
    result = filter_tree(tree, query)
    state = NavigationState(active_id=args.active) if args.active else None
    rendered = render_tree(result.tree, state=state)
    if rendered:
        print(rendered)
    if query:
        print(format_search_summary(query, result))
    return 0


def load_data(*, file_path: str | None, url: str | None, use_cache: bool = True) -> TOCData:
    if file_path:
        return load_toc_file(file_path)
    return asyncio.run(fetch_toc_data(url or "", use_cache=use_cache))


if __name__ == "__main__":
    sys.exit(main())
