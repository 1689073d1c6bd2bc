from collections.abc import Iterable
from dataclasses import dataclass

from .util import TERMINATOR, Symbol, ordered


@dataclass(frozen=True)
class Alternative:
    rhs: tuple[Symbol, ...]
    first: frozenset[Symbol]

    def __str__(self) -> str:
        return " ".join(self.rhs) if self.rhs else "ε"


@dataclass(frozen=True)
class Production:
    lhs: str
    alternatives: tuple[Alternative, ...]

    @property
    def first(self) -> frozenset[Symbol]:
        out: frozenset[Symbol] = frozenset()
        for alt in self.alternatives:
            out |= alt.first
        return out

    @property
    def expected(self) -> tuple[Symbol, ...]:
        return ordered(self.first)

    def predict(self, symbol: Symbol) -> Alternative | None:
        for alt in self.alternatives:
            if symbol in alt.first:
                return alt
        return None

    def __str__(self) -> str:
        return f"{self.lhs} -> " + " | ".join(str(a) for a in self.alternatives)


class Grammar:
    """A fixed LL(1) grammar described by its productions and first sets.

    The constructor checks the LL(1) condition: within one production the
    first sets of distinct alternatives must be disjoint, so a single
    lookahead symbol always selects at most one alternative.
    """

    def __init__(self, productions: Iterable[Production], start: str):
        self._productions: dict[str, Production] = {}
        for prod in productions:
            if prod.lhs in self._productions:
                raise ValueError(f"Duplicate production for {prod.lhs}")
            seen: set[Symbol] = set()
            for alt in prod.alternatives:
                overlap = seen & alt.first
                if overlap:
                    raise ValueError(
                        f"{prod.lhs} is not LL(1): lookahead {ordered(overlap)} "
                        f"selects more than one alternative"
                    )
                seen |= alt.first
            self._productions[prod.lhs] = prod
        if start not in self._productions:
            raise ValueError(f"Start symbol {start!r} has no production")
        self.start = start

    def production(self, lhs: str) -> Production:
        return self._productions[lhs]

    def first(self, lhs: str) -> frozenset[Symbol]:
        return self._productions[lhs].first

    def expected(self, lhs: str) -> tuple[Symbol, ...]:
        return self._productions[lhs].expected


def describe_expected(symbols: Iterable[Symbol]) -> str:
    """Render an expected set the way diagnostics print it.

    >>> describe_expected(["a", "b", "."])
    "'a', 'b' or '.' expected."
    """
    quoted = [f"'{s}'" for s in ordered(frozenset(symbols))]
    if not quoted:
        return "end of input expected."
    if len(quoted) == 1:
        return f"{quoted[0]} expected."
    return f"{', '.join(quoted[:-1])} or {quoted[-1]} expected."


AB = frozenset({"a", "b"})

GRAMMAR = Grammar(
    [
        Production("P", (Alternative(("S", TERMINATOR), AB | {TERMINATOR}),)),
        Production(
            "S",
            (
                Alternative(("T", "S"), AB),
                # empty alternative, licensed by the terminator
                Alternative((), frozenset({TERMINATOR})),
            ),
        ),
        Production(
            "T",
            (
                Alternative(("a",), frozenset({"a"})),
                Alternative(("b",), frozenset({"b"})),
            ),
        ),
    ],
    start="P",
)
