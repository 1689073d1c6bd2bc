from __future__ import annotations

from dataclasses import dataclass

from .grammar import describe_expected
from .util import END, Symbol


@dataclass(frozen=True)
class Accepted:
    accepted = True

    @property
    def message(self) -> str:
        return "Correct sentence."


@dataclass(frozen=True)
class Rejected:
    """First deviation from the grammar.

    `expected` lists the symbols the active production would have taken,
    `found` is the offending lookahead (empty at end of input), `offset` its
    raw character offset and `index` the number of symbols before it.
    """
    expected: tuple[Symbol, ...]
    found: Symbol
    offset: int
    index: int

    accepted = False

    @property
    def message(self) -> str:
        return describe_expected(self.expected)

    @property
    def at_end(self) -> bool:
        return self.found == END

    def __str__(self) -> str:
        return f"Syntax error: {self.message}"


Outcome = Accepted | Rejected


class RecognitionError(ValueError):
    def __init__(self, outcome: Rejected) -> None:
        super().__init__(str(outcome))
        self.outcome = outcome
