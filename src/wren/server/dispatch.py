"""Request dispatch — route lookup, context enrichment, handler call.

For every request the dispatcher scans the route table once. A miss is
answered with an empty ``404``. A hit gets a fresh trace id, a typed
``RequestContext`` attached to the request, a log line, and an
``x-trace-id`` header on whatever the handler returns.
"""

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from wren._internal.invoke import invoke
from wren._internal.types import Handler
from wren.context import RequestContext, context_var
from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response
from wren.routing.matcher import find_route
from wren.routing.table import RouteTable
from wren.server.errors import handle_http_error, handle_internal_error
from wren.server.negotiation import negotiate
from wren.tracing import TRACE_HEADER, new_trace_id

DEFAULT_LOGGER_NAME = "wren"


class Dispatcher:
    """Dispatches requests against a ``RouteTable``.

    The dispatcher holds no per-request state; any number of dispatches
    may run concurrently against the same instance once registration
    has finished.
    """

    __slots__ = ("_logger", "_table")

    def __init__(self, table: RouteTable, logger: logging.Logger | None = None) -> None:
        self._table = table
        self._logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    async def dispatch(self, request: Request) -> Response:
        """Route *request* and return the handler's response, or a 404."""
        found = find_route(self._table, request.method, request.path)

        if found is None:
            self._logger.info("Route not found: %s %s", request.method, request.url)
            return Response(body="", status=404)

        route, params = found
        trace_id = new_trace_id()
        context = RequestContext.create(route, params, trace_id)
        request = request.with_context(context)

        self._logger.info("[trace-id=%s] Route: %s %s", trace_id, request.method, request.url)

        token = context_var.set(context)
        try:
            response = await call_handler(route.handler, request, context)
        except HTTPError as exc:
            response = handle_http_error(exc, request)
        except Exception as exc:
            response = handle_internal_error(exc, request)
        finally:
            context_var.reset(token)

        return response.with_header(TRACE_HEADER, trace_id)


async def call_handler(handler: Handler, request: Request, context: RequestContext) -> Response:
    """Call the matched handler with injected arguments and negotiate its result.

    Raises ``ValueError`` if the resulting headers cannot be sent over
    HTTP/1.1 (non-latin-1 names or values).
    """
    kwargs = build_handler_kwargs(handler, request, context.params)
    result = await invoke(handler, **kwargs)
    response = negotiate(result)
    for name, value in response.headers:
        name.encode("latin-1")
        value.encode("latin-1")
    return response


def build_handler_kwargs(
    handler: Handler,
    request: Request,
    path_params: Mapping[str, str],
) -> dict[str, Any]:
    """Inspect handler signature and build kwargs from the enriched request.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. ``context`` parameter (by name or ``RequestContext`` annotation)
    3. Path parameters (by name, converted to the annotated type when possible)
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name == "context" or param.annotation is RequestContext:
            kwargs[name] = request.context
        elif name in path_params:
            value = path_params[name]
            if param.annotation is not inspect.Parameter.empty and callable(param.annotation):
                try:
                    kwargs[name] = param.annotation(value)
                except (ValueError, TypeError):
                    kwargs[name] = value
            else:
                kwargs[name] = value

    return kwargs
