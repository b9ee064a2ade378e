"""ASGI handler — translates ASGI scope/messages to wren types.

The only component that touches raw ASGI directly. Converts the scope
to a typed Request, runs it through the dispatcher, and sends the
Response back through ASGI send().
"""

from wren._internal.asgi import Receive, Scope, Send
from wren.http.request import Request
from wren.server.dispatch import Dispatcher
from wren.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher,
) -> None:
    """Process a single HTTP request through the dispatch pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = await dispatcher.dispatch(request)
    await send_response(response, send)


async def handle_lifespan(receive: Receive, send: Send) -> None:
    """Run the ASGI lifespan protocol.

    The router has nothing to start or stop; it acknowledges both phases
    so servers that speak lifespan can proceed.
    """
    while True:
        message = await receive()
        msg_type = message["type"]

        if msg_type == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif msg_type == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return
