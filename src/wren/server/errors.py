"""Error handling for handler failures.

Maps ``HTTPError`` raised by a handler, and any unexpected exception,
to a Response. Routing itself never raises; these paths only cover code
running inside the matched handler.
"""

import logging

from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response

logger = logging.getLogger("wren.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response carrying its status and headers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    response = Response(body=exc.detail).with_status(exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception(
        "500 %s %s (trace-id=%s): %s",
        request.method,
        request.path,
        request.trace_id,
        type(exc).__name__,
    )
    return Response(body="Internal Server Error").with_status(500)
