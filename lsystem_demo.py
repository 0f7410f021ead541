#!/usr/bin/env python3
"""lsystem_demo.py

Command line front end for the bundled example L-systems.

Run:
  python lsystem_demo.py list
  python lsystem_demo.py generations algae --count 8
  python lsystem_demo.py nth anabaena 4
  python lsystem_demo.py commands koch 2
  python lsystem_demo.py --help
"""

from __future__ import annotations

import argparse
import itertools
import logging
import os
import sys
from typing import Any, TextIO

from grammars import GRAMMARS, Example
from lsystem import LSystemError
from turtle_commands import to_commands

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"

DEFAULT_LIMIT = 10_000

logger = logging.getLogger("lsystem_demo")


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once; ``level`` defaults to $LOG_LEVEL."""

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING")
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _lookup(name: str) -> Example:
    try:
        return GRAMMARS[name]
    except KeyError:
        known = ", ".join(sorted(GRAMMARS))
        raise ValueError(f"unknown grammar {name!r} (known: {known})") from None


def _clip(sequence: list[Any], limit: int) -> list[Any]:
    if len(sequence) > limit:
        logger.warning(
            "generation has %d symbols; showing the first %d", len(sequence), limit
        )
        return sequence[:limit]
    return sequence


# -------------------------
# CLI / Help
# -------------------------

HELP_EPILOG = r"""
GRAMMARS

  algae       A -> AB, B -> A, axiom B
  anabaena    Anabaena catenula cell division with polarity
  koch        F -> F+F-F-F+F
  sierpinski  A -> B-A-B, B -> A+B+A
  seaweed     F -> FF-[-F+F+F]+[+F-F-F]
  penrose     Penrose P3 rhombus tiling
  parametric  A(x,y), B(x), C rules from ABOP example 1.7

Generation 0 is always the axiom.

LOGGING

  Set LOG_LEVEL=DEBUG (or pass --log-level DEBUG) to see one record per
  rewrite pass with the generation size.

Examples

  python lsystem_demo.py generations algae --count 5
    0: B
    1: A
    2: AB
    3: ABA
    4: ABAAB
"""


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lsystem-demo",
        description="Print generations of the bundled example L-systems.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )
    p.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV_VAR} or WARNING).",
    )
    p.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Print at most this many symbols per generation (default {DEFAULT_LIMIT}).",
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List the example grammars.")

    pg = sub.add_parser("generations", help="Print the first generations.")
    pg.add_argument("grammar", help="Example grammar name.")
    pg.add_argument(
        "--count", type=int, default=5, help="Number of generations (default 5)."
    )

    pn = sub.add_parser("nth", help="Print a single generation.")
    pn.add_argument("grammar", help="Example grammar name.")
    pn.add_argument("n", type=int, help="Generation index (0 is the axiom).")

    pc = sub.add_parser(
        "commands", help="Print the turtle commands for a single generation."
    )
    pc.add_argument("grammar", help="Example grammar name.")
    pc.add_argument("n", type=int, help="Generation index (0 is the axiom).")

    return p


# -------------------------
# Commands
# -------------------------


def cmd_list(out: TextIO) -> None:
    for name, ex in GRAMMARS.items():
        drawable = " (drawable)" if ex.commands is not None else ""
        print(f"{name}: {ex.summary}{drawable}", file=out)


def cmd_generations(name: str, count: int, limit: int, out: TextIO) -> None:
    if count < 0:
        raise ValueError("--count must be >= 0")
    ex = _lookup(name)
    producer = ex.grammar.start_producing()
    for index, gen in enumerate(itertools.islice(producer, count)):
        print(f"{index}: {ex.render(_clip(gen, limit))}", file=out)


def cmd_nth(name: str, n: int, limit: int, out: TextIO) -> None:
    ex = _lookup(name)
    gen = ex.grammar.generation(n)
    print(ex.render(_clip(gen, limit)), file=out)


def cmd_commands(name: str, n: int, limit: int, out: TextIO) -> None:
    ex = _lookup(name)
    if ex.commands is None:
        raise ValueError(f"grammar {name!r} has no turtle interpretation")
    gen = ex.grammar.generation(n)
    for cmd in to_commands(_clip(gen, limit), ex.commands):
        print(cmd, file=out)


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    configure_logging(args.log_level)
    if out is None:
        out = sys.stdout

    try:
        if args.limit <= 0:
            raise ValueError("--limit must be > 0")
        if args.cmd == "list":
            cmd_list(out)
        elif args.cmd == "generations":
            cmd_generations(args.grammar, args.count, args.limit, out)
        elif args.cmd == "nth":
            cmd_nth(args.grammar, args.n, args.limit, out)
        elif args.cmd == "commands":
            cmd_commands(args.grammar, args.n, args.limit, out)
        else:
            raise AssertionError("unreachable")
    except (LSystemError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
