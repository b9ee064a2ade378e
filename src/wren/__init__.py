"""Wren — an embeddable HTTP request router.

Matches a request's method and path against an ordered table of route
patterns, captures ``:param`` segments, and hands the handler a typed
request context carrying the matched route, the parameters, and a
trace id.

Basic usage::

    from wren import Router, RequestContext

    router = Router()

    @router.get("/users/:id")
    def get_user(id: str, context: RequestContext):
        return {"id": id, "trace": context.trace_id}

    router.run()
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "HTTPMethod",
    "NotFound",
    "Request",
    "RequestContext",
    "Response",
    "RoutePattern",
    "Router",
    "Server",
    "ServerConfig",
    "WrenError",
    "get_context",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from wren.router import Router

        return Router

    if name in ("ServerConfig", "load_config"):
        from wren import config as _config

        return getattr(_config, name)

    if name == "Server":
        from wren.server.assembly import Server

        return Server

    if name == "HTTPMethod":
        from wren.http.methods import HTTPMethod

        return HTTPMethod

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name in ("RequestContext", "get_context"):
        from wren import context as _ctx

        return getattr(_ctx, name)

    if name == "RoutePattern":
        from wren.routing.route import RoutePattern

        return RoutePattern

    if name in ("WrenError", "ConfigurationError", "HTTPError", "NotFound"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
