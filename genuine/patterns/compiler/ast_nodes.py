"""
Part definitions for compiled route patterns.

A pattern compiles to an ordered sequence of parts: exact byte runs and
named single-segment captures.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union
from enum import Enum


class PartKind(str, Enum):
    """Kind of pattern part."""
    LITERAL = "literal"
    PARAM = "param"


@dataclass(frozen=True)
class Literal:
    """Exact, non-empty byte run. Percent escapes are kept as written."""
    value: bytes

    kind = PartKind.LITERAL

    def render(self) -> str:
        return self.value.decode("ascii")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "value": self.render(),
        }


@dataclass(frozen=True)
class Param:
    """Named capture of one path segment."""
    name: str

    kind = PartKind.PARAM

    def render(self) -> str:
        return "{" + self.name + "}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
        }


Part = Union[Literal, Param]
