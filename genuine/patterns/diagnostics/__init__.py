"""Diagnostics package."""

from .errors import (
    PatternDiagnostic,
    ParseError,
    ExpectedByteError,
    ExpectedClassError,
    UnexpectedEndError,
    NotAbsoluteError,
)

__all__ = [
    "PatternDiagnostic",
    "ParseError",
    "ExpectedByteError",
    "ExpectedClassError",
    "UnexpectedEndError",
    "NotAbsoluteError",
]
