import logging
from typing import TextIO

from .grammar import GRAMMAR
from .outcome import Accepted, Outcome, Rejected, RecognitionError
from .reader import Cursor
from .util import TERMINATOR

logger = logging.getLogger(__name__)


class Recognizer:
    """Predictive recursive-descent recognizer for `(a|b)* '.'`.

    Grammar (one symbol of lookahead decides every alternative):
      P -> S '.'
      S -> T S | ε        (T S on 'a'/'b', ε on '.')
      T -> 'a' | 'b'

    Each production takes the cursor and returns None on a match or the
    `Rejected` outcome at the first deviation; nothing is read after that.
    Alternatives are chosen with `Production.predict` on `GRAMMAR`.
    """

    def __init__(self) -> None:
        self.G = GRAMMAR

    def run(self, source: str | TextIO) -> Outcome:
        cursor = Cursor(source)
        cursor.advance()
        rejected = self._p(cursor)
        if rejected is not None:
            logger.debug(
                "rejected at offset %d (symbol %d): found %r, expected %s",
                rejected.offset, rejected.index, rejected.found, rejected.expected,
            )
            return rejected
        logger.debug("accepted %d symbols", cursor.index)
        return Accepted()

    # -------------------- productions --------------------
    def _reject(self, lhs: str, cursor: Cursor) -> Rejected:
        logger.debug("no alternative of %s for %r", self.G.production(lhs), cursor.lookahead)
        return Rejected(self.G.expected(lhs), cursor.lookahead, cursor.offset, cursor.index)

    def _p(self, cursor: Cursor) -> Rejected | None:
        rejected = self._s(cursor)
        if rejected is not None:
            return rejected
        # S returned on the terminator without consuming it
        if cursor.lookahead != TERMINATOR:
            return Rejected((TERMINATOR,), cursor.lookahead, cursor.offset, cursor.index)
        cursor.consume_last()
        return None

    def _s(self, cursor: Cursor) -> Rejected | None:
        # T S flattened into a loop; ε is taken on the terminator
        production = self.G.production("S")
        while True:
            alt = production.predict(cursor.lookahead)
            if alt is None:
                return self._reject("S", cursor)
            if not alt.rhs:
                return None
            rejected = self._t(cursor)
            if rejected is not None:
                return rejected

    def _t(self, cursor: Cursor) -> Rejected | None:
        if self.G.production("T").predict(cursor.lookahead) is None:
            return self._reject("T", cursor)
        cursor.advance()
        return None


def recognize(source: str | TextIO) -> Outcome:
    """Recognize `source` (a string or a text stream) with the fixed grammar."""
    return Recognizer().run(source)


def check(source: str | TextIO) -> None:
    outcome = recognize(source)
    if isinstance(outcome, Rejected):
        raise RecognitionError(outcome)
