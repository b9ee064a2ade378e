"""Ordered route table.

Routes are appended during a startup registration phase and scanned in
registration order while serving. The table is never mutated once
serving starts, so concurrent dispatches read it without locks. Keeping
registration ahead of serving is the embedding application's job; the
table does not enforce it.
"""

from collections.abc import Iterator

from wren._internal.types import Handler
from wren.http.methods import HTTPMethod
from wren.routing.route import RoutePattern


def split_path(path: str) -> tuple[str, ...]:
    """Split a path into segments after trimming trailing slashes.

    Examples::

        ""            -> ("",)
        "/"           -> ("",)
        "/data/"      -> ("", "data")
        "/data/:id"   -> ("", "data", ":id")
        "/data//item" -> ("", "data", "", "item")
    """
    return tuple(path.rstrip("/").split("/"))


class RouteTable:
    """Append-only, insertion-ordered sequence of ``RoutePattern``.

    Order is significant: the first registered pattern that matches a
    request wins. Duplicate and shadowing patterns are accepted as-is.

    Usage::

        table = RouteTable()
        table.register(HTTPMethod.GET, "/data/:id", get_data)
        for route in table:
            ...
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[RoutePattern] = []

    def register(self, method: HTTPMethod | str, path: str, handler: Handler) -> RoutePattern:
        """Append a route. Never validates, never fails."""
        route = RoutePattern(
            method=method,
            path=path,
            segments=split_path(path),
            handler=handler,
        )
        self._routes.append(route)
        return route

    @property
    def routes(self) -> tuple[RoutePattern, ...]:
        """Snapshot of the registered routes, in registration order."""
        return tuple(self._routes)

    def __iter__(self) -> Iterator[RoutePattern]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({len(self._routes)} routes)"
