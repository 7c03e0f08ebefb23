"""Compiler package for route patterns."""

from .ast_nodes import Literal, Param, Part, PartKind
from .scanner import Scanner
from .parser import PatternParser, parse_pattern
from .compiler import Pattern, compile_pattern

__all__ = [
    "Literal",
    "Param",
    "Part",
    "PartKind",
    "Scanner",
    "PatternParser",
    "parse_pattern",
    "Pattern",
    "compile_pattern",
]
