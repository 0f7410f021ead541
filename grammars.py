"""grammars.py

Example L-systems: algae, Anabaena filament polarity, Koch curve,
Sierpinski arrowhead, seaweed, Penrose P3 tiling and a parametric system
from The Algorithmic Beauty of Plants (example 1.7).

Alphabets are enums (or frozen dataclasses for the parametric system) and
rules are dispatch tables or plain functions, so nothing here is parsed from
text.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union

from lsystem import Grammar, identity, rule_from_table
from turtle_commands import Command, Dummy, Forward, Left, Pop, Push, Right


@dataclass(frozen=True)
class Example:
    name: str
    summary: str
    grammar: Grammar[Any]
    describe: Callable[[Any], str]
    commands: dict[Any, Command] | None = None
    separator: str = ""

    def render(self, sequence: list[Any]) -> str:
        return self.separator.join(self.describe(sym) for sym in sequence)


def _value(sym: enum.Enum) -> str:
    return str(sym.value)


# -------------------------
# Algae
# -------------------------


class Algae(enum.Enum):
    A = "A"  # reproduction
    B = "B"  # growth


ALGAE = Grammar(
    [Algae.B],
    rule_from_table(
        {
            Algae.A: [Algae.A, Algae.B],
            Algae.B: [Algae.A],
        }
    ),
)


# -------------------------
# Anabaena catenula
# -------------------------


class Anabaena(enum.Enum):
    AR = "-->"
    AL = "<--"
    BR = "->"
    BL = "<-"


ANABAENA = Grammar(
    [Anabaena.AR],
    rule_from_table(
        {
            Anabaena.AR: [Anabaena.AL, Anabaena.BR],
            Anabaena.AL: [Anabaena.BL, Anabaena.AR],
            Anabaena.BR: [Anabaena.AR],
            Anabaena.BL: [Anabaena.AL],
        }
    ),
)


# -------------------------
# Koch curve (quadratic)
# -------------------------


class Koch(enum.Enum):
    F = "F"
    PLUS = "+"
    MINUS = "-"


_K = Koch

# F -> F+F-F-F+F; + and - are constants.
KOCH = Grammar(
    [_K.F],
    rule_from_table(
        {_K.F: [_K.F, _K.PLUS, _K.F, _K.MINUS, _K.F, _K.MINUS, _K.F, _K.PLUS, _K.F]},
        default=identity,
    ),
)

KOCH_COMMANDS: dict[Any, Command] = {
    _K.F: Forward(10),
    _K.PLUS: Left(90),
    _K.MINUS: Right(90),
}


# -------------------------
# Sierpinski arrowhead
# -------------------------


class Sierpinski(enum.Enum):
    A = "A"
    B = "B"
    PLUS = "+"
    MINUS = "-"


_S = Sierpinski

# A -> B-A-B, B -> A+B+A
SIERPINSKI = Grammar(
    [_S.A],
    rule_from_table(
        {
            _S.A: [_S.B, _S.MINUS, _S.A, _S.MINUS, _S.B],
            _S.B: [_S.A, _S.PLUS, _S.B, _S.PLUS, _S.A],
        },
        default=identity,
    ),
)

SIERPINSKI_COMMANDS: dict[Any, Command] = {
    _S.A: Forward(10),
    _S.B: Forward(10),
    _S.PLUS: Left(60),
    _S.MINUS: Right(60),
}


# -------------------------
# Seaweed
# -------------------------


class Seaweed(enum.Enum):
    F = "F"
    PLUS = "+"
    MINUS = "-"
    PUSH = "["
    POP = "]"


_W = Seaweed

# F -> FF-[-F+F+F]+[+F-F-F]
SEAWEED = Grammar(
    [_W.F],
    rule_from_table(
        {
            _W.F: [
                _W.F, _W.F, _W.MINUS,
                _W.PUSH, _W.MINUS, _W.F, _W.PLUS, _W.F, _W.PLUS, _W.F, _W.POP,
                _W.PLUS,
                _W.PUSH, _W.PLUS, _W.F, _W.MINUS, _W.F, _W.MINUS, _W.F, _W.POP,
            ]
        },
        default=identity,
    ),
)  # fmt: skip

SEAWEED_COMMANDS: dict[Any, Command] = {
    _W.F: Forward(10),
    _W.PUSH: Push(),
    _W.POP: Pop(),
    _W.PLUS: Right(22.5),
    _W.MINUS: Left(22.5),
}


# -------------------------
# Penrose P3
# -------------------------


class Penrose(enum.Enum):
    F = "F"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    PUSH = "["
    POP = "]"
    PLUS = "+"
    MINUS = "-"


def _word(text: str) -> list[Penrose]:
    return [Penrose(ch) for ch in text]


# Rule bodies use the same one-character values as the enum, so the tables
# below read like the usual notation.
PENROSE = Grammar(
    _word("[N]++[N]++[N]++[N]++[N]"),
    rule_from_table(
        {
            Penrose.M: _word("OF++PF----NF[-OF----MF]++"),
            Penrose.N: _word("+OF--PF[---MF--NF]+"),
            Penrose.O: _word("-MF++NF[+++OF++PF]-"),
            Penrose.P: _word("--OF++++MF[+PF++++NF]--NF"),
            Penrose.F: [Penrose.Q],
        },
        default=identity,
    ),
)


def _penrose_command(sym: Penrose) -> Command:
    return {
        Penrose.F: Forward(25),
        Penrose.PUSH: Push(),
        Penrose.POP: Pop(),
        Penrose.PLUS: Right(36),
        Penrose.MINUS: Left(36),
    }.get(sym, Dummy())


PENROSE_COMMANDS: dict[Any, Command] = {sym: _penrose_command(sym) for sym in Penrose}


# -------------------------
# Parametric (ABOP example 1.7)
# -------------------------


@dataclass(frozen=True)
class A:
    x: float
    y: float

    def __str__(self) -> str:
        return f"A({self.x:g}, {self.y:g})"


@dataclass(frozen=True)
class B:
    x: float

    def __str__(self) -> str:
        return f"B({self.x:g})"


@dataclass(frozen=True)
class C:
    def __str__(self) -> str:
        return "C"


Parametric = Union[A, B, C]


def parametric_rule(sym: Parametric) -> list[Parametric]:
    if isinstance(sym, A):
        if sym.y <= 3.0:
            return [A(sym.x * 2.0, sym.x + sym.y)]
        return [B(sym.x), A(sym.x / sym.y, 0.0)]
    if isinstance(sym, B):
        if sym.x < 1.0:
            return [C()]
        return [B(sym.x - 1.0)]
    if isinstance(sym, C):
        return [C()]
    raise NotImplementedError(sym)


PARAMETRIC = Grammar([B(2.0), A(4.0, 4.0)], parametric_rule)


# -------------------------
# Registry
# -------------------------


GRAMMARS: dict[str, Example] = {
    ex.name: ex
    for ex in (
        Example("algae", "Lindenmayer's original algae model", ALGAE, _value),
        Example(
            "anabaena",
            "Anabaena catenula filament with cell polarity",
            ANABAENA,
            _value,
            separator=" ",
        ),
        Example("koch", "quadratic Koch curve", KOCH, _value, KOCH_COMMANDS),
        Example(
            "sierpinski",
            "Sierpinski arrowhead curve",
            SIERPINSKI,
            _value,
            SIERPINSKI_COMMANDS,
        ),
        Example("seaweed", "bracketed seaweed plant", SEAWEED, _value, SEAWEED_COMMANDS),
        Example("penrose", "Penrose P3 rhombus tiling", PENROSE, _value, PENROSE_COMMANDS),
        Example(
            "parametric",
            "parametric OL-system (ABOP example 1.7)",
            PARAMETRIC,
            str,
            separator=" ",
        ),
    )
}
