"""
Byte-level scanning primitives shared by the parser and the matcher.

A :class:`Scanner` is an explicit cursor over an immutable byte buffer.
Failed productions raise :class:`ParseError` subclasses positioned at the
offending byte; the parser lets them propagate, the matcher uses the
lenient :meth:`Scanner.segment` mode that never raises.
"""

from typing import Callable, Optional

from ..grammar import ALNUM, ALPHA, HEXDIG, PCHAR, PERCENT, WHITESPACE
from ..diagnostics.errors import (
    ExpectedByteError,
    ExpectedClassError,
    ParseError,
    UnexpectedEndError,
)


class Scanner:
    """Cursor over a byte buffer with capture-since-anchor support."""

    __slots__ = ("data", "source", "anchor", "cursor")

    def __init__(self, data: bytes, source: Optional[str] = None):
        self.data = data
        # Original text, attached to errors for display
        self.source = source
        # Start of the literal run being accumulated
        self.anchor = 0
        self.cursor = 0

    def peek(self) -> Optional[int]:
        """Return the next byte without consuming it, or None at the end."""
        if self.cursor < len(self.data):
            return self.data[self.cursor]
        return None

    def at_end(self) -> bool:
        return self.cursor >= len(self.data)

    def any(self) -> int:
        """Consume and return the next byte."""
        if self.cursor >= len(self.data):
            raise UnexpectedEndError(self.cursor, pattern=self.source)
        value = self.data[self.cursor]
        self.cursor += 1
        return value

    def consume(self, expected: int) -> int:
        """Consume the next byte if it equals ``expected``."""
        value = self.peek()
        if value is None:
            raise UnexpectedEndError(self.cursor, pattern=self.source)
        if value != expected:
            raise ExpectedByteError(expected, value, self.cursor, pattern=self.source)
        self.cursor += 1
        return value

    def skip_while(self, predicate: Callable[[int], bool]) -> None:
        while self.cursor < len(self.data) and predicate(self.data[self.cursor]):
            self.cursor += 1

    def ws(self) -> None:
        """Skip spaces and tabs."""
        self.skip_while(WHITESPACE.__contains__)

    def flush(self) -> bytes:
        """Return the bytes since the anchor and move the anchor to the cursor."""
        run = self.data[self.anchor:self.cursor]
        self.anchor = self.cursor
        return run

    def hex_digit(self) -> int:
        """Consume one hexadecimal digit and return its value."""
        pos = self.cursor
        value = self.any()
        if value not in HEXDIG:
            raise ExpectedClassError("a hex digit", value, pos, pattern=self.source)
        return int(chr(value), 16)

    def percent_encoded(self) -> int:
        """Consume a ``%XX`` triple and return the encoded byte value."""
        self.consume(PERCENT)
        upper = self.hex_digit()
        lower = self.hex_digit()
        return (upper << 4) | lower

    def name(self) -> str:
        """Consume a parameter name: ``ALPHA ( ALPHA | DIGIT )*``."""
        start = self.cursor
        first = self.any()
        if first not in ALPHA:
            raise ExpectedClassError("an ASCII letter", first, start, pattern=self.source)
        self.skip_while(ALNUM.__contains__)
        return self.data[start:self.cursor].decode("ascii")

    def segment(self, strict: bool = True) -> bytes:
        """
        Consume a (possibly empty) run of pchars and return it.

        Scanning stops before the first byte that is not a pchar. A ``%``
        that does not start a well-formed triple raises in strict mode;
        otherwise the cursor is left on the ``%`` and the run ends there.
        """
        start = self.cursor
        data = self.data
        end = len(data)
        while self.cursor < end:
            value = data[self.cursor]
            if value in PCHAR:
                self.cursor += 1
            elif value == PERCENT:
                mark = self.cursor
                try:
                    self.percent_encoded()
                except ParseError:
                    if strict:
                        raise
                    self.cursor = mark
                    break
            else:
                break
        return data[start:self.cursor]
