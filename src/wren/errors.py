"""Wren exception hierarchy.

Shared across the router, dispatcher, and server assembly so every
module raises and catches the same types.

A request that matches no route is not an error: the dispatcher answers
it with an empty ``404`` response and never raises.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when server configuration is invalid.

    Raised by ``Router.new_server()`` before any server object exists.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    Handlers raise it to short-circuit with a status. The ASGI handler
    catches it and answers with ``status`` and ``detail`` as the body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — raised by handlers when the addressed resource does not exist."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
