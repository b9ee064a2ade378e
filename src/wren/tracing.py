"""Trace id generation.

Every matched request gets a fresh id that appears in the request log
line and in the ``x-trace-id`` response header.
"""

import uuid

TRACE_HEADER = "x-trace-id"


def new_trace_id() -> str:
    """Return a new random trace id (canonical UUID4 text).

    Stateless, so concurrent dispatches never contend or collide on a
    shared counter.
    """
    return str(uuid.uuid4())
