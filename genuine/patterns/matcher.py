"""
Pattern matcher.

Walks the compiled parts left to right against a cursor into the request
path bytes. Literals must match byte for byte; params capture one segment
using the same scanning rule as the parser, in lenient mode, so that a
malformed request path is simply a non-match.

The caller is expected to pass a normalized path: a single trailing '/'
stripped unless the path is the root. No normalization happens here.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import unquote

from .compiler.ast_nodes import Literal, Param, Part
from .compiler.scanner import Scanner


@dataclass(frozen=True)
class Match:
    """A single captured parameter."""
    name: str
    value: str

    @property
    def decoded(self) -> str:
        """Percent-decoded value; invalid UTF-8 is replaced."""
        return unquote(self.value, errors="replace")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
        }


def match_parts(parts: Sequence[Part], path: str) -> Optional[List[Match]]:
    """
    Match ``path`` against ``parts``.

    Returns the captures in pattern order, or None when the path does not
    fit. An empty part sequence matches only the root path.
    """
    if not parts:
        return [] if path == "/" else None

    data = path.encode("utf-8", errors="surrogatepass")
    scanner = Scanner(data)
    matches: List[Match] = []

    for part in parts:
        if isinstance(part, Literal):
            if not data.startswith(part.value, scanner.cursor):
                return None
            scanner.cursor += len(part.value)
        elif isinstance(part, Param):
            # Zero-length captures are allowed, e.g. /a//b against /a/{id}/b
            value = scanner.segment(strict=False)
            matches.append(Match(part.name, value.decode("ascii")))
        else:
            raise TypeError(f"Unknown pattern part: {part!r}")

    if not scanner.at_end():
        return None

    return matches
