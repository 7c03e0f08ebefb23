"""
Compiled route patterns.

A :class:`Pattern` is built once at route registration and is immutable
afterwards, so it can be shared by any number of concurrent matches.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .ast_nodes import Literal, Param, Part
from .parser import parse_pattern
from ..matcher import Match, match_parts

logger = logging.getLogger("genuine.patterns.compiler")


@dataclass(frozen=True)
class Pattern:
    """Fully compiled pattern ready for matching."""
    raw: str
    parts: Tuple[Part, ...] = ()

    @classmethod
    def compile(cls, pattern: str) -> "Pattern":
        """Compile ``pattern``, raising ParseError if it is malformed."""
        parts = tuple(parse_pattern(pattern))
        logger.debug("Compiled pattern %r into %d part(s)", pattern, len(parts))
        return cls(raw=pattern, parts=parts)

    def try_match(self, path: str) -> Optional[List[Match]]:
        """Match a normalized request path, returning captures or None."""
        return match_parts(self.parts, path)

    @property
    def is_root(self) -> bool:
        return not self.parts

    @property
    def is_static(self) -> bool:
        """True when the pattern has no params."""
        return not any(isinstance(part, Param) for part in self.parts)

    @property
    def param_names(self) -> List[str]:
        """Param names in pattern order, duplicates included."""
        return [part.name for part in self.parts if isinstance(part, Param)]

    @property
    def static_prefix(self) -> bytes:
        """Leading literal bytes, empty if the pattern starts with a param."""
        if self.parts and isinstance(self.parts[0], Literal):
            return self.parts[0].value
        return b""

    def render(self) -> str:
        """Re-serialize the parts; equals ``raw`` minus whitespace inside braces."""
        if not self.parts:
            return "/"
        return "".join(part.render() for part in self.parts)

    def __str__(self) -> str:
        return self.raw

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "raw": self.raw,
            "parts": [part.to_dict() for part in self.parts],
            "params": self.param_names,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def compile_pattern(pattern: str) -> Pattern:
    """Compile a route pattern."""
    return Pattern.compile(pattern)
