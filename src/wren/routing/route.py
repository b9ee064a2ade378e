"""RoutePattern and MatchResult frozen dataclasses."""

from dataclasses import dataclass, field

from wren._internal.types import Handler
from wren.http.methods import HTTPMethod

PARAM_PREFIX = ":"


def is_param(segment: str) -> bool:
    """True if *segment* is a ``:name`` parameter token."""
    return segment.startswith(PARAM_PREFIX)


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A registered route definition.

    ``path`` is kept exactly as registered; ``segments`` is derived from
    it once, at registration time::

        "/data/:id/item" -> ("", "data", ":id", "item")
        "/"              -> ("",)

    The handler is a plain reference to application code; the pattern
    never calls it.
    """

    method: HTTPMethod | str
    path: str
    segments: tuple[str, ...]
    handler: Handler = field(compare=False, repr=False)

    @property
    def param_names(self) -> tuple[str, ...]:
        """Names of the parameter segments, in path order."""
        return tuple(s[len(PARAM_PREFIX) :] for s in self.segments if is_param(s))

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of comparing one request path against one route pattern."""

    matched: bool
    params: dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.matched

