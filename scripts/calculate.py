#!/usr/bin/env python3
"""
Run a sequence of running-total operations.

Usage:
    PYTHONPATH=. python scripts/calculate.py add 5 multiply 3 subtract 2

    # Start from a non-zero total
    PYTHONPATH=. python scripts/calculate.py --start 10 divide 4
"""
from __future__ import annotations

import argparse
import logging
import sys

from flix_backend.calculator import Calculator, DivisionByZeroError, OPERATIONS, iter_operations, pair_operations, parse_number
from flix_backend.utils.exception_reporter import ExceptionReporter

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="calculate",
        description=f"Apply <op> <number> pairs to a running total. Ops: {', '.join(OPERATIONS)}.",
    )
    parser.add_argument("tokens", nargs="+", metavar="OP NUMBER", help="Operation/operand pairs, in order.")
    parser.add_argument("--start", default="0", help="Starting total (default: 0).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        start = parse_number(args.start)
        operations = pair_operations(args.tokens)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    calculator = Calculator(start)
    reporter = ExceptionReporter("log")
    print(calculator.total)
    try:
        for total in iter_operations(calculator, operations):
            logger.debug("total -> %s", total)
            print(total)
    except DivisionByZeroError as exc:
        reporter(exc, context="divide")
        print(f"ERROR: {exc} (total={calculator.total})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
