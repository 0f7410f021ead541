"""turtle_commands.py

Turtle interpretation of generated sequences.

This module is a consumer of lsystem generations and is independent of the
engine: it maps each symbol to a turtle command, in order, and can trace the
resulting commands into polylines. It produces coordinates only.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from lsystem import LSystemError, UnhandledSymbol

Point = tuple[float, float]

logger = logging.getLogger(__name__)


class TurtleError(LSystemError):
    pass


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise TurtleError(msg)


# -------------------------
# Command model
# -------------------------


@dataclass(frozen=True)
class Forward:
    distance: float


@dataclass(frozen=True)
class Move:
    """Pen-up forward step."""

    distance: float


@dataclass(frozen=True)
class Left:
    angle: float


@dataclass(frozen=True)
class Right:
    angle: float


@dataclass(frozen=True)
class Push:
    pass


@dataclass(frozen=True)
class Pop:
    pass


@dataclass(frozen=True)
class Dummy:
    pass


Command = Union[Forward, Move, Left, Right, Push, Pop, Dummy]

CommandMapping = Union[Mapping[Any, Command], Callable[[Any], Command]]


@dataclass(frozen=True)
class TurtleState:
    x: float = 0.0
    y: float = 0.0
    heading_deg: float = 90.0


def to_commands(sequence: Iterable[Any], mapping: CommandMapping) -> list[Command]:
    """Translate symbols to turtle commands, preserving order.

    ``mapping`` is either a dict keyed by symbol or a callable. A symbol the
    dict does not know raises UnhandledSymbol.
    """
    lookup: Callable[[Any], Command]
    if isinstance(mapping, Mapping):
        table = mapping

        def lookup(sym: Any) -> Command:
            try:
                return table[sym]
            except KeyError:
                raise UnhandledSymbol(sym) from None

    else:
        lookup = mapping

    out: list[Command] = []
    for i, sym in enumerate(sequence):
        try:
            out.append(lookup(sym))
        except UnhandledSymbol as e:
            raise UnhandledSymbol(e.symbol, i) from e
    return out


# -------------------------
# Tracing
# -------------------------


@dataclass
class PolylineBuffer:
    polylines: list[list[Point]]

    def start_new(self, p: Point) -> None:
        self.polylines.append([p])

    def add_point(self, p: Point) -> None:
        cur = self.polylines[-1]
        if cur[-1] != p:
            cur.append(p)


def trace(
    commands: Iterable[Command], start: TurtleState = TurtleState()
) -> list[list[Point]]:
    """Walk ``commands`` with a turtle and return the drawn polylines.

    Headings are in degrees, counter-clockwise, with 0 along +X. Left turns
    increase the heading. A Pop starts a new polyline at the restored
    position so no stroke joins the branch tip to the trunk.
    """
    x, y, h = start.x, start.y, start.heading_deg

    buf = PolylineBuffer(polylines=[])
    buf.start_new((x, y))
    stack: list[TurtleState] = []

    for cmd in commands:
        if isinstance(cmd, Forward) or isinstance(cmd, Move):
            rad = math.radians(h)
            x += cmd.distance * math.cos(rad)
            y += cmd.distance * math.sin(rad)
            if isinstance(cmd, Forward):
                buf.add_point((x, y))
            else:
                buf.start_new((x, y))
        elif isinstance(cmd, Left):
            h += cmd.angle
        elif isinstance(cmd, Right):
            h -= cmd.angle
        elif isinstance(cmd, Push):
            stack.append(TurtleState(x, y, h))
        elif isinstance(cmd, Pop):
            _require(bool(stack), "pop encountered with empty stack")
            st = stack.pop()
            x, y, h = st.x, st.y, st.heading_deg
            buf.start_new((x, y))
        elif isinstance(cmd, Dummy):
            continue
        else:
            raise TurtleError(f"unknown turtle command {cmd!r}")

    # Drop single-point polylines left by moves and pops.
    out = [pl for pl in buf.polylines if len(pl) >= 2]
    logger.debug("traced %d polylines", len(out))
    return out
