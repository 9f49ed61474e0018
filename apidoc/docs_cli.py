"""Look up API documentation from the command line.

Fetches a documentation source, resolves the query exactly or by fuzzy
search, and prints the result as Markdown.
"""

import argparse
import json
import logging
import sys

from apidoc.errors import MalformedSourceError
from apidoc.fetch_doc import DEFAULT_SOURCE, fetch_doc
from apidoc.load_config import load_config
from apidoc.source_cache import SourceCache

EXIT_NOT_FOUND = 1
EXIT_BAD_SOURCE = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the lookup tool."""
    ap = argparse.ArgumentParser(
        description="Search API documentation and print the matching entry.",
    )
    ap.add_argument(
        "query",
        nargs="+",
        help="Element to look up, e.g. Guild#owner or Guild.owner.username",
    )
    ap.add_argument(
        "--src",
        default=DEFAULT_SOURCE,
        help=f"Registered source name or payload URL (default: {DEFAULT_SOURCE})",
    )
    ap.add_argument(
        "--force",
        action="store_true",
        help="Re-fetch the source even if it is cached",
    )
    ap.add_argument(
        "--include-private",
        action="store_true",
        help="Include private properties and methods in results",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--dump",
        action="store_true",
        help="Print the structural JSON dump of the match instead of a card",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: list[str] | None = None, cache: SourceCache | None = None) -> int:
    """Run a single lookup and print the result."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = load_config(args.config)
    query = " ".join(args.query)
    try:
        doc = fetch_doc(
            args.src,
            cache=cache if cache is not None else SourceCache(),
            config=config,
            force=args.force,
        )
    except MalformedSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_BAD_SOURCE

    if args.dump:
        element = doc.get(query)
        if element is None:
            print(f"Couldn't find an exact match for '{query}'.", file=sys.stderr)
            return EXIT_NOT_FOUND
        print(json.dumps(element.to_json(), indent=2))
        return 0

    card = doc.resolve_card(query, exclude_private=not args.include_private)
    if card is None:
        print(f"Couldn't find any documentation for '{query}'.", file=sys.stderr)
        return EXIT_NOT_FOUND
    print(card.to_markdown(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
