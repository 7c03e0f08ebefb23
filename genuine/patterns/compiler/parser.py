"""
Recursive-descent parser for route patterns.

Implements the grammar in :mod:`genuine.patterns.grammar` directly over the
pattern bytes, with no separate tokenizing pass. Literal bytes accumulate
between anchors and are flushed as a single :class:`Literal` whenever a
param starts or the input ends, so adjacent literals are never split.
"""

from typing import List

from .ast_nodes import Literal, Param, Part
from .scanner import Scanner
from ..grammar import LBRACE, RBRACE, SLASH
from ..diagnostics.errors import ExpectedByteError, NotAbsoluteError


class PatternParser:
    """Parser for a single route pattern."""

    def __init__(self, source: str):
        self.source = source
        self.scanner = Scanner(source.encode("utf-8"), source)

    def parse(self) -> List[Part]:
        """Parse the pattern into parts, raising ParseError on any violation."""
        scanner = self.scanner
        data = scanner.data

        if data[:1] != b"/":
            raise NotAbsoluteError(0, pattern=self.source)
        # The first segment must be non-empty or absent (RFC 3986, 3.3)
        if data[1:2] == b"/":
            raise NotAbsoluteError(1, pattern=self.source)
        if len(data) == 1:
            return []

        parts: List[Part] = []
        while not scanner.at_end():
            self.separator()
            if scanner.peek() == LBRACE:
                literal = scanner.flush()
                parts.append(Literal(literal))
                parts.append(self.param())
                scanner.anchor = scanner.cursor
            else:
                scanner.segment(strict=True)

        tail = scanner.flush()
        if tail:
            parts.append(Literal(tail))

        return parts

    def separator(self) -> None:
        """Consume the '/' that must precede every segment."""
        try:
            self.scanner.consume(SLASH)
        except ExpectedByteError as exc:
            if exc.actual == LBRACE:
                exc.suggestions.append("Parameters must span a whole segment, e.g. '/files/{name}'")
            elif exc.actual == RBRACE:
                exc.suggestions.append("Unbalanced '}' in pattern")
            raise

    def param(self) -> Param:
        """Parse ``"{" WSP* name WSP* "}"``."""
        scanner = self.scanner
        scanner.consume(LBRACE)
        scanner.ws()
        name = scanner.name()
        scanner.ws()
        scanner.consume(RBRACE)
        return Param(name)


def parse_pattern(source: str) -> List[Part]:
    """Parse a route pattern into its parts."""
    return PatternParser(source).parse()
