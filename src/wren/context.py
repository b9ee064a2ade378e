"""Request-scoped routing metadata.

Provides:
- ``RequestContext``: what the dispatcher learned about a request — the
  matched route, the captured path parameters, and the trace id. Carried
  as a typed field on ``Request`` so handlers read named attributes
  instead of casting values out of an untyped store.
- ``context_var`` / ``get_context()``: the same object, published for the
  duration of the handler call so helpers deep in the call stack can
  reach it without threading the request through.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. ``RequestContext`` is frozen. No locks needed.
"""

from collections.abc import Mapping
from contextvars import ContextVar
from dataclasses import dataclass
from types import MappingProxyType

from wren.routing.route import RoutePattern


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Per-request routing metadata handed to the handler.

    ``route`` is the frozen pattern that matched; ``params`` is a
    read-only view over a dict owned by this request alone.
    """

    route: RoutePattern
    params: Mapping[str, str]
    trace_id: str

    @classmethod
    def create(
        cls,
        route: RoutePattern,
        params: Mapping[str, str],
        trace_id: str,
    ) -> "RequestContext":
        """Build a context, copying *params* behind a read-only proxy."""
        return cls(route=route, params=MappingProxyType(dict(params)), trace_id=trace_id)

    def param(self, name: str, default: str | None = None) -> str | None:
        """Return the captured value for *name*, or *default*."""
        return self.params.get(name, default)


context_var: ContextVar[RequestContext] = ContextVar("wren_request_context")
"""The current request's context. Set by the dispatcher around the handler call."""


def get_context() -> RequestContext:
    """Return the routing context of the request being handled.

    Raises ``LookupError`` if called outside a handler invocation.
    """
    return context_var.get()
