"""
Route, RouteMatch and the hook callable types.

Hooks are plain callables kept in ordered lists and invoked by explicit
iteration. Each stage has its own signature, which is the whole of what a
hook at that stage may observe or replace:

- begin(method, path): sees the raw request line before lookup.
- before(request, match): sees the request and the matched route.
- after(request, match, response) -> response: may replace the response.
- finish(method, path, response): sees the outcome; response is None
  when nothing matched.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple

from ..patterns import Match, Pattern

if TYPE_CHECKING:
    from .group import Group

Handler = Callable[[Any, "RouteMatch"], Any]
BeginHook = Callable[[str, str], None]
BeforeHook = Callable[[Any, "RouteMatch"], None]
AfterHook = Callable[[Any, "RouteMatch", Any], Any]
FinishHook = Callable[[str, str, Any], None]


@dataclass
class Route:
    """A registered route. Mutable only until its table is frozen."""

    method: str
    pattern: Pattern
    handler: Handler
    name: Optional[str] = None
    before: List[BeforeHook] = field(default_factory=list)
    after: List[AfterHook] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.method} {self.pattern.raw}"

    def freeze(self) -> None:
        self.before = tuple(self.before)
        self.after = tuple(self.after)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "pattern": self.pattern.raw,
            "name": self.name,
            "params": self.pattern.param_names,
        }


@dataclass(frozen=True)
class RouteMatch:
    """Result of a successful route lookup."""

    route: Route
    group: "Group"
    matches: Tuple[Match, ...]

    @property
    def params(self) -> Dict[str, str]:
        """Captures by name; with duplicate names the last one wins."""
        return {m.name: m.value for m in self.matches}
