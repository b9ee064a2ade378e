"""Wren router — the public facade.

Mutable during setup (route registration), read-only while serving.
The router is itself an ASGI 3.0 application.
"""

import logging
from collections.abc import Callable

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.types import Handler
from wren.config import ServerConfig
from wren.http.methods import HTTPMethod
from wren.http.request import Request
from wren.http.response import Response
from wren.routing.route import RoutePattern
from wren.routing.table import RouteTable
from wren.server.assembly import Server, build_server
from wren.server.dispatch import Dispatcher
from wren.server.handler import handle_lifespan, handle_request


class Router:
    """An embeddable HTTP request router.

    Usage::

        router = Router()

        @router.get("/users/:id")
        def get_user(id: str):
            return f"user {id}"

        router.add_route(HTTPMethod.DELETE, "/users/:id", delete_user)

        router.new_server().run()

    Thread safety:
        Register every route before serving starts. Dispatch only reads
        the route table, so concurrent requests need no locking as long
        as nothing registers while requests are in flight.
    """

    __slots__ = ("_dispatcher", "_table", "config", "logger")

    def __init__(
        self,
        config: ServerConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or ServerConfig()
        self._table = RouteTable()
        self._dispatcher = Dispatcher(self._table, logger)
        self.logger = self._dispatcher.logger

    # -- Registration --

    def add_route(self, method: HTTPMethod | str, path: str, handler: Handler) -> None:
        """Register *handler* for *method* and *path*.

        Path segments prefixed with ``:`` capture a parameter. Routes are
        tried in registration order; the first match wins.
        """
        self._table.register(method, path, handler)

    def route(self, method: HTTPMethod | str, path: str) -> Callable[[Handler], Handler]:
        """Decorator form of ``add_route``."""

        def decorator(func: Handler) -> Handler:
            self.add_route(method, path, func)
            return func

        return decorator

    def get(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(HTTPMethod.GET, path)

    def post(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(HTTPMethod.POST, path)

    def put(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(HTTPMethod.PUT, path)

    def patch(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(HTTPMethod.PATCH, path)

    def delete(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(HTTPMethod.DELETE, path)

    def options(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(HTTPMethod.OPTIONS, path)

    def head(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(HTTPMethod.HEAD, path)

    @property
    def routes(self) -> tuple[RoutePattern, ...]:
        """Registered routes, in registration order."""
        return self._table.routes

    # -- Dispatch --

    async def dispatch(self, request: Request) -> Response:
        """Route a single request without going through ASGI."""
        return await self._dispatcher.dispatch(request)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, dispatcher=self._dispatcher)

    # -- Server --

    def new_server(self) -> Server:
        """Build a server for this router from ``self.config``.

        Raises ``ConfigurationError`` if a timeout is not a valid
        duration string.
        """
        return build_server(self, self.config, self.logger)

    def run(self) -> None:
        """Build a server and serve until interrupted."""
        self.new_server().run()
