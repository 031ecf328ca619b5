"""ASGI handler — translates ASGI scope/messages to cowl types.

The only component besides the sender that touches raw ASGI. Converts the
scope to a Request, runs it through the middleware chain down to the
fallback handler, and sends the resulting response.
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

from cowl._internal.asgi import Receive, Scope, Send
from cowl.errors import AssetIOError, HTTPError
from cowl.http.request import Request
from cowl.http.response import FileResponse
from cowl.middleware.protocol import AnyResponse, Next
from cowl.server.errors import handle_http_error, handle_internal_error
from cowl.server.sender import send_file_response, send_response

Fallback: TypeAlias = Callable[[Request], Awaitable[AnyResponse]]


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    middleware: tuple[Callable[..., Any], ...],
    fallback: Fallback,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    head = request.method == "HEAD"

    # Wrap middleware around the fallback, outermost first
    handler: Next = fallback
    for mw in reversed(middleware):

        async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> AnyResponse:
            return await _mw(req, _next)

        handler = make_next

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    if isinstance(response, FileResponse):
        try:
            await send_file_response(response, send, head=head)
        except AssetIOError as exc:
            # Nothing has been sent yet; the client still gets a status.
            await send_response(handle_http_error(exc, request), send, head=head)
    else:
        await send_response(response, send, head=head)
