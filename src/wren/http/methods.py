"""HTTP methods accepted by the route table."""

from enum import StrEnum


class HTTPMethod(StrEnum):
    """Request methods a route can be registered for.

    Members compare equal to their upper-case names, so
    ``HTTPMethod.GET == "GET"`` holds.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
