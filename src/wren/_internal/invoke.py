"""Invoke helper — call sync or async handlers uniformly.

Route handlers can be ``def`` or ``async def``. The dispatcher is the
only caller, so the sync/async check lives here and nowhere else.

Usage::

    from wren._internal.invoke import invoke

    result = await invoke(handler, request=request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync — returns immediately
        def get_user(id: str):
            return f"user {id}"

        # async — returns a coroutine, awaited here
        async def get_user(id: str):
            user = await repo.fetch(id)
            return {"id": user.id}
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
