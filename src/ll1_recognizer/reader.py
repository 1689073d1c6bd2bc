from __future__ import annotations

import io
from typing import TextIO

from .util import END, SPACE, Symbol


class Cursor:
    """Single-symbol lookahead over a character stream.

    The cursor owns the lookahead: only `advance()` (and `consume_last()`)
    write it, productions only read it. Spaces are dropped between symbols;
    every other character, tabs and newlines included, is a symbol. Input is
    read one character at a time, so nothing past the current lookahead has
    been taken from the stream.
    """

    def __init__(self, source: str | TextIO) -> None:
        self.stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self.lookahead: Symbol | None = None
        self.offset = -1  # raw offset of the lookahead, spaces counted
        self.index = -1  # number of meaningful symbols before the lookahead
        self._read = 0
        self._done = False

    def _next_char(self) -> Symbol:
        if self._done:
            return END
        ch = self.stream.read(1)
        if ch == END:
            self._done = True
        else:
            self._read += 1
        return ch

    def advance(self) -> Symbol:
        ch = self._next_char()
        while ch == SPACE:
            ch = self._next_char()
        self.lookahead = ch
        self.offset = self._read - 1 if ch != END else self._read
        self.index += 1
        return ch

    def consume_last(self) -> None:
        """Consume the lookahead without reading past it."""
        self.lookahead = END
        self.offset = self._read
        self.index += 1

    @property
    def primed(self) -> bool:
        return self.lookahead is not None
