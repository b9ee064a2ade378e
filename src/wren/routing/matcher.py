"""Segment-by-segment route matching.

Pure functions over strings: no I/O, no shared state, no exceptions.
A request either matches the first compatible route in the table or
matches nothing.
"""

from wren.routing.route import PARAM_PREFIX, MatchResult, RoutePattern, is_param
from wren.routing.table import RouteTable, split_path


def match_segments(
    request_segments: tuple[str, ...],
    route_segments: tuple[str, ...],
) -> MatchResult:
    """Compare two equal-length segment sequences in lock-step.

    A ``:name`` route segment captures the request segment when it is
    non-blank; captured values keep their case. Literal segments compare
    case-insensitively. The walk stops at the first mismatch.

    The pattern matches iff every route segment was matched.
    """
    params: dict[str, str] = {}
    matched = 0

    for route_segment, request_segment in zip(route_segments, request_segments, strict=False):
        if is_param(route_segment) and request_segment.strip():
            params[route_segment[len(PARAM_PREFIX) :]] = request_segment
            matched += 1
        elif route_segment.lower() == request_segment.lower():
            matched += 1
        else:
            break

    return MatchResult(matched=matched == len(route_segments), params=params)


def match_method(method: str, route: RoutePattern) -> bool:
    """Case-insensitive comparison of a request method against a route's."""
    return method.lower() == str(route.method).lower()


def find_route(
    table: RouteTable,
    method: str,
    path: str,
) -> tuple[RoutePattern, dict[str, str]] | None:
    """Return the first route matching *method* and *path*, with its params.

    Routes whose segment count differs from the request's are skipped
    before any segment is compared, so ``/data`` and ``/data/:id`` never
    collide. Returns ``None`` when nothing matches.
    """
    request_segments = split_path(path)
    count = len(request_segments)

    for route in table:
        if len(route.segments) != count:
            continue

        result = match_segments(request_segments, route.segments)
        if result.matched and match_method(method, route):
            return route, result.params

    return None
