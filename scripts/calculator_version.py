#!/usr/bin/env python3
"""
Print the published calculator version from the release manifest.

Usage:
    PYTHONPATH=. python scripts/calculator_version.py

Set RELEASE_MANIFEST_URL to point at a different manifest.
"""
from __future__ import annotations

import argparse
import logging
import sys

from flix_backend.integrations.release_manifest import ReleaseManifestError, fetch_release_version
from flix_backend.utils.env import load_env

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="calculator_version", description="Fetch the calculator release version.")
    parser.add_argument("--url", default=None, help="Manifest URL override.")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    load_env()

    try:
        version = fetch_release_version(url=args.url)
    except ReleaseManifestError as exc:
        logger.error("Release manifest lookup failed: %s", exc)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(version)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
