"""ASGI response sending — translates cowl responses to ASGI messages.

In-memory ``Response`` bodies go out in one message. ``FileResponse``
bodies are streamed from disk in chunks with ``anyio.open_file``.
"""

import logging
import os

import anyio

from cowl._internal.asgi import Send
from cowl.errors import AssetIOError
from cowl.http.response import FileResponse, Response

logger = logging.getLogger("cowl.server")


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _raw_headers(
    content_type: str, headers: tuple[tuple[str, str], ...]
) -> list[tuple[bytes, bytes]]:
    raw: list[tuple[bytes, bytes]] = [(b"content-type", content_type.encode("latin-1"))]
    raw.extend((name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in headers)
    return raw


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Translate a Response into ASGI send() calls.

    For HEAD requests the Content-Length of the full body is still sent.
    """
    raw_headers = _raw_headers(response.content_type, response.headers)
    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": b"" if head else body,
        }
    )


async def send_file_response(response: FileResponse, send: Send, *, head: bool = False) -> None:
    """Stream a file from disk.

    The file is opened before any message is sent, so a file that vanished
    since rendering raises ``AssetIOError`` while the caller can still
    answer with a 500. Content-Length comes from the open handle and
    exactly that many bytes are sent.

    Raises:
        AssetIOError: The file cannot be opened.
    """
    try:
        file = await anyio.open_file(response.path, "rb")
    except OSError as exc:
        logger.error("Cannot open static asset %s: %s", response.path, exc)
        raise AssetIOError(path=response.path) from exc

    async with file:
        size = os.fstat(file.wrapped.fileno()).st_size if _body_allowed(response.status) else 0
        raw_headers = _raw_headers(response.content_type, response.headers)
        raw_headers.append((b"content-length", str(size).encode("latin-1")))

        await send(
            {
                "type": "http.response.start",
                "status": response.status,
                "headers": raw_headers,
            }
        )

        remaining = 0 if head else size
        while remaining > 0:
            chunk = await file.read(min(response.chunk_size, remaining))
            if not chunk:
                # Truncated underneath us; the client sees a short body.
                logger.warning("Static asset %s shrank while streaming", response.path)
                break
            remaining -= len(chunk)
            await send(
                {
                    "type": "http.response.body",
                    "body": chunk,
                    "more_body": True,
                }
            )

    await send(
        {
            "type": "http.response.body",
            "body": b"",
            "more_body": False,
        }
    )
