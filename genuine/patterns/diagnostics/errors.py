"""
Diagnostic errors for route patterns.

Every parse failure carries the 0-based byte offset into the pattern at
which it was detected, so that a route registration can be rejected with
an actionable message before the server starts serving.
"""

from dataclasses import dataclass
from typing import List, Optional


def _describe_byte(value: int) -> str:
    if 0x20 < value < 0x7F:
        return f"0x{value:02x} ({chr(value)!r})"
    return f"0x{value:02x}"


@dataclass(eq=False)
class PatternDiagnostic:
    """Base class for all pattern diagnostics."""
    message: str
    pos: Optional[int] = None
    pattern: Optional[str] = None
    suggestions: List[str] = None

    def __post_init__(self):
        if self.suggestions is None:
            self.suggestions = []

    def __str__(self) -> str:
        return self.message

    def caret_column(self) -> Optional[int]:
        """Column of ``pos`` in the decoded pattern, for display."""
        if self.pos is None or self.pattern is None:
            return None
        prefix = self.pattern.encode("utf-8")[:self.pos]
        return len(prefix.decode("utf-8", errors="replace"))

    def format(self) -> str:
        """Format diagnostic for display."""
        parts = [f"{self.__class__.__name__}: {self.message}"]

        column = self.caret_column()
        if column is not None:
            parts.append(f"  {self.pattern}")
            parts.append("  " + " " * column + "^")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                parts.append(f"  {i}) {suggestion}")

        return "\n".join(parts)


class ParseError(PatternDiagnostic, Exception):
    """A route pattern violates the path grammar."""


class ExpectedByteError(ParseError):
    """A specific byte was required but another one was found."""

    def __init__(self, expected: int, actual: int, pos: int, pattern: Optional[str] = None, **kwargs):
        super().__init__(
            f"encountered byte {_describe_byte(actual)} at position {pos}, "
            f"but expected {_describe_byte(expected)}",
            pos=pos,
            pattern=pattern,
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class ExpectedClassError(ParseError):
    """A byte of some class (hex digit, letter, ...) was required."""

    def __init__(self, expected: str, actual: int, pos: int, pattern: Optional[str] = None, **kwargs):
        super().__init__(
            f"encountered byte {_describe_byte(actual)} at position {pos}, "
            f"but expected {expected}",
            pos=pos,
            pattern=pattern,
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class UnexpectedEndError(ParseError):
    """The pattern ended in the middle of a production."""

    def __init__(self, pos: int, pattern: Optional[str] = None, **kwargs):
        super().__init__(
            f"encountered unexpected end of input at position {pos}",
            pos=pos,
            pattern=pattern,
            **kwargs,
        )


class NotAbsoluteError(ParseError):
    """The pattern does not start with a single '/'."""

    def __init__(self, pos: int = 0, pattern: Optional[str] = None, **kwargs):
        kwargs.setdefault("suggestions", ["Route patterns must start with exactly one '/'"])
        super().__init__(
            "route patterns must start with a '/' followed by a non-empty segment or nothing",
            pos=pos,
            pattern=pattern,
            **kwargs,
        )
