#!/usr/bin/env python3
"""Print the first rationals of the enumeration, one per line."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import DemoConfig, load_config
from .enumerator import Rationals

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iter-rationals",
        description="Print positive rationals in Calkin-Wilf order.",
    )
    parser.add_argument("--parfile", help="TOML file with count, integer_type and skip")
    parser.add_argument("-n", "--count", type=int, help="Number of values to print")
    parser.add_argument("-t", "--type", dest="integer_type", help="Integer type, e.g. u32 or i64")
    parser.add_argument("--skip", type=int, help="Number of leading values to drop")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(config: DemoConfig, out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    logger.info(
        "printing %d rationals over %s starting at index %d",
        config.count,
        config.integer_type,
        config.skip,
    )
    rationals = Rationals(config.integer_type).skip(config.skip)
    for r in rationals.take(config.count):
        print(r, file=out)


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = load_config(args.parfile).override(
        count=args.count,
        integer_type=args.integer_type,
        skip=args.skip,
    )
    run(config)


def cli() -> None:
    try:
        main()
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli()
