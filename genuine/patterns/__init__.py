"""
Route path patterns for genuine.

Patterns are compiled once into an immutable :class:`Pattern` made of
literal byte runs and named single-segment params, then matched against
normalized request paths:

    >>> pattern = Pattern.compile("/users/{id}/posts")
    >>> pattern.try_match("/users/42/posts")
    [Match(name='id', value='42')]
    >>> pattern.try_match("/users/42") is None
    True
"""

from .compiler.ast_nodes import Literal, Param, Part, PartKind
from .compiler.parser import PatternParser, parse_pattern
from .compiler.compiler import Pattern, compile_pattern
from .diagnostics.errors import (
    PatternDiagnostic,
    ParseError,
    ExpectedByteError,
    ExpectedClassError,
    UnexpectedEndError,
    NotAbsoluteError,
)
from .matcher import Match, match_parts

__all__ = [
    # Parts
    "Literal",
    "Param",
    "Part",
    "PartKind",
    # Parser
    "PatternParser",
    "parse_pattern",
    # Compiler
    "Pattern",
    "compile_pattern",
    # Diagnostics
    "PatternDiagnostic",
    "ParseError",
    "ExpectedByteError",
    "ExpectedClassError",
    "UnexpectedEndError",
    "NotAbsoluteError",
    # Matcher
    "Match",
    "match_parts",
]
