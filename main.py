#!/usr/bin/env python3
from __future__ import annotations
from typing import List, Optional
import argparse
import sys
from loguru import logger
from fraction import Fraction


def sum_reciprocals(start: int, stop: int) -> Fraction:
    """Exact sum of 1/i for start <= i < stop."""
    total = Fraction.from_int(0)
    for i in range(start, stop):
        total += Fraction(1, i)
        logger.debug("after 1/{}: {}", i, total)
    return total


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exact fraction arithmetic over signed 128-bit integers."
    )
    parser.add_argument("--start", type=int, default=2, help="first reciprocal (default: 2)")
    parser.add_argument("--stop", type=int, default=20, help="stop before this reciprocal (default: 20)")
    parser.add_argument(
        "--base",
        type=int,
        nargs=2,
        metavar=("NUM", "DEN"),
        help="fraction to raise to --exp",
    )
    parser.add_argument("--exp", type=int, default=1, help="power for --base (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every step")
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        total = sum_reciprocals(args.start, args.stop)
        print(f"sum = {total} ({float(total)})")
        if args.base is not None:
            base = Fraction(*args.base)
            power = base.pow(args.exp)
            logger.debug("{} ** {} computed unreduced", base, args.exp)
            print(f"{base} ** {args.exp} = {power} ({float(power)})")
    except (ZeroDivisionError, OverflowError, ValueError) as e:
        logger.error("{}: {}", type(e).__name__, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
