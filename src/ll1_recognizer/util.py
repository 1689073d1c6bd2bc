from __future__ import annotations

from typing import Final

Symbol = str
END: Final[Symbol] = ""  # end-of-input sentinel, matches no alternative
TERMINATOR: Final[Symbol] = "."
SPACE: Final[Symbol] = " "

# canonical order used when listing expected symbols
SYMBOL_ORDER: Final[tuple[Symbol, ...]] = ("a", "b", TERMINATOR)


def ordered(symbols) -> tuple[Symbol, ...]:
    known = [s for s in SYMBOL_ORDER if s in symbols]
    extra = sorted(s for s in symbols if s not in SYMBOL_ORDER)
    return tuple(known + extra)
