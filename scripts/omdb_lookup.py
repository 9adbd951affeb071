#!/usr/bin/env python3
"""
Query OMDb by title or by IMDb id.

Usage:
    # Search by title
    PYTHONPATH=. python scripts/omdb_lookup.py search "star wars"

    # Look up one or more titles by IMDb id (issued concurrently)
    PYTHONPATH=. python scripts/omdb_lookup.py find tt0076759 tt0080684

    # Raw JSON output
    PYTHONPATH=. python scripts/omdb_lookup.py find tt0076759 --json

Requires OMDB_API_KEY (env or .env).
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from flix_backend.integrations.omdb.client import AsyncOmdbClient, HttpOmdbClient, OmdbClientError, resolve_api_key
from flix_backend.models.movies import MovieRecord, SearchResultSet
from flix_backend.utils.env import load_env
from flix_backend.utils.exception_reporter import ExceptionReporter

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="omdb_lookup",
        description="Search OMDb by title or fetch full records by IMDb id.",
    )
    parser.add_argument("--json", action="store_true", help="Print raw JSON payloads.")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    parser.add_argument("--timeout", type=float, default=20.0, help="Transport timeout in seconds (default: 20).")

    sub = parser.add_subparsers(dest="command", required=True)
    search = sub.add_parser("search", help="Search titles by free text.")
    search.add_argument("title", help="Title text to search for.")
    find = sub.add_parser("find", help="Fetch full records by IMDb id.")
    find.add_argument("imdb_id", nargs="+", help="IMDb title id (tt...). Repeatable.")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def format_search_results(results: SearchResultSet) -> list[str]:
    lines = [f"{item.imdb_id}  {item.title} ({item.year}) [{item.type}]" for item in results]
    total = results.total_results if results.total_results is not None else len(results)
    lines.append(f"{len(results)} shown, {total} total")
    return lines


def format_movie_record(record: MovieRecord) -> list[str]:
    lines = [f"{record.title} ({record.year}) {record.imdb_id}"]
    for label, value in (
        ("Rated", record.rated),
        ("Runtime", record.runtime),
        ("Genre", record.genre),
        ("Director", record.director),
        ("Actors", record.actors),
        ("IMDb rating", record.imdb_rating),
        ("Metascore", record.metascore),
        ("Plot", record.plot),
    ):
        if value is not None:
            lines.append(f"  {label}: {value}")
    return lines


async def _find_all(client: AsyncOmdbClient, imdb_ids: list[str]) -> list[Any]:
    return await asyncio.gather(*(client.find(imdb_id) for imdb_id in imdb_ids), return_exceptions=True)


def run_search(client: HttpOmdbClient, title: str, *, reporter: ExceptionReporter, as_json: bool) -> int:
    try:
        results = client.search(title)
    except OmdbClientError as exc:
        reporter(exc, context=f"search {title!r}")
        return 1

    logger.debug("search %r returned %d items", title, len(results))
    if as_json:
        print(json.dumps(dict(results.raw), indent=2, ensure_ascii=False))
    else:
        for line in format_search_results(results):
            print(line)
    return 0


def run_find(client: HttpOmdbClient, imdb_ids: list[str], *, reporter: ExceptionReporter, as_json: bool) -> int:
    outcomes = asyncio.run(_find_all(AsyncOmdbClient(client), imdb_ids))

    failed = 0
    for imdb_id, outcome in zip(imdb_ids, outcomes):
        if isinstance(outcome, OmdbClientError):
            failed += 1
            reporter(outcome, context=f"find {imdb_id}")
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        if as_json:
            print(json.dumps(outcome, indent=2, ensure_ascii=False))
        else:
            for line in format_movie_record(MovieRecord.from_payload(outcome)):
                print(line)
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    _configure_logging(args.verbose)

    if args.command == "search":
        queries = [args.title]
    else:
        queries = list(args.imdb_id)
    if any(not str(q).strip() for q in queries):
        label = "Search title" if args.command == "search" else "IMDb id"
        print(f"ERROR: {label} is empty.", file=sys.stderr)
        return 2

    env_path = load_env()
    if env_path:
        logger.debug("Loaded environment from %s", env_path)

    if not resolve_api_key():
        print("OMDB_API_KEY is not set.", file=sys.stderr)
        return 2

    reporter = ExceptionReporter("log")
    with HttpOmdbClient(timeout_seconds=args.timeout) as client:
        if args.command == "search":
            code = run_search(client, args.title, reporter=reporter, as_json=args.json)
        else:
            code = run_find(client, queries, reporter=reporter, as_json=args.json)

    for message in reporter.errors:
        print(f"ERROR: {message}", file=sys.stderr)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
