import enum
import logging

from .grammar import GRAMMAR
from .outcome import Accepted, Outcome, Rejected
from .util import END, SPACE, TERMINATOR, Symbol

logger = logging.getLogger(__name__)


class RecognizerState(enum.Enum):
    START = "start"
    REPEATING = "repeating"
    TERMINATED = "terminated"
    ERROR = "error"


class StreamingRecognizer:
    """Push-style form of the recognizer as a four-state machine.

    Symbols are fed one at a time with `step()`. `allowed_terminals()` gives
    the symbols that keep the input inside the language, which is the first
    set of the sequence production until the terminator is seen.
    """

    def __init__(self) -> None:
        self.G = GRAMMAR
        self.reset()

    def reset(self) -> None:
        self.state = RecognizerState.START
        self.offset = 0
        self.index = 0
        self._rejected: Rejected | None = None

    def allowed_terminals(self) -> set[str]:
        if self.state in (RecognizerState.START, RecognizerState.REPEATING):
            return set(self.G.first("S"))
        return set()

    def step(self, symbol: Symbol) -> bool:
        if self.state in (RecognizerState.TERMINATED, RecognizerState.ERROR):
            return False
        if symbol == SPACE:
            self.offset += 1
            return True
        if symbol in self.G.first("T"):
            self.state = RecognizerState.REPEATING
        elif symbol == TERMINATOR:
            self.state = RecognizerState.TERMINATED
        else:
            self._fail(symbol)
            return False
        self.offset += 1
        self.index += 1
        return True

    def feed(self, text: str) -> bool:
        for ch in text:
            if self.accepted():
                # nothing after the terminator is inspected
                break
            if not self.step(ch):
                return False
        return True

    def accepted(self) -> bool:
        return self.state is RecognizerState.TERMINATED

    def outcome(self) -> Outcome:
        """Outcome if the input ended here."""
        if self.state is RecognizerState.TERMINATED:
            return Accepted()
        if self._rejected is None:
            return Rejected(self.G.expected("S"), END, self.offset, self.index)
        return self._rejected

    def _fail(self, symbol: Symbol) -> None:
        self._rejected = Rejected(self.G.expected("S"), symbol, self.offset, self.index)
        logger.debug(
            "%s -> error on %r at offset %d", self.state.value, symbol, self.offset
        )
        self.state = RecognizerState.ERROR
