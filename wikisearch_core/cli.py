"""WikiSearch Command Line - Run boolean queries for two terms.

Usage:
    wikisearch java programming
    wikisearch java programming --url redis://localhost:6379 --descending

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from wikisearch_core.config import make_index
from wikisearch_core.errors import ConfigurationMissing, IndexUnavailable
from wikisearch_core.index.client import IndexClient
from wikisearch_core.ranking.policy import PolicyLike
from wikisearch_core.results import ResultSet, format_entries

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INDEX_UNAVAILABLE = 1
EXIT_CONFIGURATION_MISSING = 2


def build_queries(
    index: IndexClient,
    term1: str,
    term2: str,
    policy: PolicyLike = None,
) -> List[Tuple[str, ResultSet]]:
    """Resolve both terms and build the five reference queries.

    Args:
        index: Index client
        term1: First term
        term2: Second term
        policy: Relevance combination policy

    Returns:
        List of (query label, result set)
    """
    counts = index.lookup_many([term1, term2])
    first = ResultSet(counts[term1], policy)
    second = ResultSet(counts[term2], policy)

    return [
        (term1, first),
        (term2, second),
        (f"{term1} AND {term2}", first.intersect(second)),
        (f"{term1} OR {term2}", first.union(second)),
        (f"{term1} MINUS {term2}", first.difference(second)),
    ]


def render(
    queries: List[Tuple[str, ResultSet]],
    descending: bool = False,
    top: Optional[int] = None,
) -> Iterator[str]:
    """Render query results as text lines."""
    for label, result in queries:
        yield ""
        yield f"=== Query: {label} ==="
        entries = result.sorted_entries(descending=descending)
        if top is not None:
            # ascending lists keep the most relevant at the end
            keep = max(top, 0)
            entries = entries[:keep] if descending else entries[max(len(entries) - keep, 0):]
        yield from format_entries(entries)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wikisearch",
        description="Run AND / OR / MINUS queries over a Redis term-frequency index",
    )
    parser.add_argument("term1", help="First search term")
    parser.add_argument("term2", help="Second search term")
    parser.add_argument("--config", help="Path to a file holding the Redis URL")
    parser.add_argument("--url", help="Redis URL (overrides --config)")
    parser.add_argument("--policy", choices=["sum", "max"], default="sum",
                        help="How scores of a document found by both terms combine")
    parser.add_argument("--descending", action="store_true",
                        help="List the most relevant documents first")
    parser.add_argument("--top", type=int, default=None,
                        help="Only show the N most relevant documents per query")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, out: TextIO = None) -> int:
    """Command line entry point."""
    args = _parse_args(argv)
    out = out or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        index = make_index(path=args.config, url=args.url)
    except ConfigurationMissing as e:
        logger.error(str(e))
        return EXIT_CONFIGURATION_MISSING
    except IndexUnavailable as e:
        logger.error(str(e))
        return EXIT_INDEX_UNAVAILABLE

    if index is None:
        return EXIT_CONFIGURATION_MISSING

    with index:
        try:
            queries = build_queries(index, args.term1, args.term2, args.policy)
        except IndexUnavailable as e:
            logger.error(f"Search failed: {e}")
            return EXIT_INDEX_UNAVAILABLE

    for line in render(queries, descending=args.descending, top=args.top):
        print(line, file=out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
