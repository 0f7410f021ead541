"""lsystem.py

A small, generic engine for context-free Lindenmayer systems.

A grammar pairs an axiom (the generation-0 sequence) with a production rule
(symbol -> zero or more symbols). Producers derived from a grammar yield
generations lazily and forever: the first pull returns the axiom verbatim,
every later pull rewrites each symbol of the previous generation in parallel
and concatenates the images in order.

Symbols are opaque caller-defined values; enum members and frozen dataclasses
work well.

    >>> g = Grammar(["B"], rule_from_table({"A": ["A", "B"], "B": ["A"]}))
    >>> g.generation(4)
    ['A', 'B', 'A', 'A', 'B']
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

ProductionRule = Callable[[T], Iterable[T]]

logger = logging.getLogger(__name__)


# -------------------------
# Errors
# -------------------------


class LSystemError(Exception):
    pass


class UnhandledSymbol(LSystemError, LookupError):
    """The production rule has no image for a symbol."""

    def __init__(self, symbol: Any, position: int | None = None) -> None:
        self.symbol = symbol
        self.position = position
        where = "" if position is None else f" at position {position}"
        super().__init__(f"no production for symbol {symbol!r}{where}")


class GrammarError(LSystemError, ValueError):
    pass


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise GrammarError(msg)


def _as_count(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool) and x >= 0


# -------------------------
# Rules
# -------------------------


def identity(symbol: T) -> list[T]:
    """Constant production: the symbol rewrites to itself."""
    return [symbol]


def rule_from_table(
    table: Mapping[T, Iterable[T]],
    default: ProductionRule[T] | None = None,
) -> ProductionRule[T]:
    """Build a rule from a dispatch table keyed by symbol.

    Symbols missing from the table go to ``default``; without one they raise
    UnhandledSymbol. Pass ``default=identity`` to treat them as constants.

    The table is a dict, so only hashable symbols can match it; unhashable
    ones are treated as missing.
    """
    images = {sym: tuple(succ) for sym, succ in table.items()}

    def rule(symbol: T) -> Iterable[T]:
        try:
            return images[symbol]
        except (KeyError, TypeError):
            if default is None:
                raise UnhandledSymbol(symbol) from None
            return default(symbol)

    return rule


def rewrite(sequence: Iterable[T], rule: ProductionRule[T]) -> list[T]:
    """Apply ``rule`` to every symbol of ``sequence`` and concatenate the images.

    Every symbol is looked up against the input sequence only, so earlier
    replacements in the same pass never feed later lookups.
    """
    out: list[T] = []
    for i, sym in enumerate(sequence):
        try:
            # Images may be lazy, so consume them inside the guard.
            image = rule(sym)
            if image is None:
                raise UnhandledSymbol(sym, i)
            out.extend(image)
        except UnhandledSymbol as e:
            if e.position is None:
                raise UnhandledSymbol(sym, i) from e
            raise
        except (LookupError, NotImplementedError) as e:
            raise UnhandledSymbol(sym, i) from e
    return out


# -------------------------
# Grammar / producer
# -------------------------


class Phase(enum.Enum):
    AT_ZEROTH = "at_zeroth"
    ADVANCING = "advancing"
    BROKEN = "broken"


@dataclass(frozen=True)
class Grammar(Generic[T]):
    axiom: tuple[T, ...]
    rule: ProductionRule[T]

    def __post_init__(self) -> None:
        # Own a private copy so later changes to the caller's list are not seen.
        object.__setattr__(self, "axiom", tuple(self.axiom))

    def start_producing(self) -> GenerationProducer[T]:
        return GenerationProducer(self)

    def __iter__(self) -> Iterator[list[T]]:
        return self.start_producing()

    def generation(self, n: int) -> list[T]:
        """Return generation ``n`` (generation 0 is the axiom)."""
        _require(_as_count(n), "generation index must be an integer >= 0")
        producer = self.start_producing()
        current = producer.advance()
        for _ in range(n):
            current = producer.advance()
        return current

    def generations(self, count: int) -> list[list[T]]:
        """Return generations ``0..count-1``."""
        _require(_as_count(count), "count must be an integer >= 0")
        producer = self.start_producing()
        return [producer.advance() for _ in range(count)]


class GenerationProducer(Generic[T]):
    """Forward-only cursor over the generations of a grammar.

    Two states: AT_ZEROTH until the first advance(), which emits the axiom,
    then ADVANCING, where each call performs one rewrite pass. A failed
    rewrite moves the producer to BROKEN and it refuses further calls.

    Not thread-safe; callers sharing a producer must serialize access.
    """

    def __init__(self, grammar: Grammar[T]) -> None:
        self._rule = grammar.rule
        self._current: list[T] = list(grammar.axiom)
        self._phase = Phase.AT_ZEROTH
        self._index: int | None = None

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def generation_index(self) -> int | None:
        """Index of the last generation returned, or None before the first."""
        return self._index

    def advance(self) -> list[T]:
        if self._phase is Phase.AT_ZEROTH:
            self._phase = Phase.ADVANCING
            self._index = 0
        elif self._phase is Phase.ADVANCING:
            try:
                self._current = rewrite(self._current, self._rule)
            except Exception:
                self._phase = Phase.BROKEN
                raise
            assert self._index is not None
            self._index += 1
        else:
            raise LSystemError("producer failed on an earlier advance()")

        logger.debug("generation %d: %d symbols", self._index, len(self._current))
        return list(self._current)

    def __iter__(self) -> GenerationProducer[T]:
        return self

    def __next__(self) -> list[T]:
        return self.advance()
