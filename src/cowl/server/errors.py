"""Error handling pipeline for cowl requests.

Maps HTTPError exceptions and unexpected failures to plain-text
responses. I/O failures on a resolved asset are server errors and are
logged as such; everything else in the 4xx range is routine.
"""

import logging

from cowl.errors import AssetIOError, HTTPError
from cowl.http.request import Request
from cowl.http.response import Response

logger = logging.getLogger("cowl.server")

_PLAIN_TEXT = "text/plain; charset=utf-8"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response carrying its status and headers."""
    if isinstance(exc, AssetIOError):
        logger.error("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
        # The on-disk path is not the client's business.
        detail = "Internal Server Error"
    else:
        logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
        detail = exc.detail or f"Error {exc.status}"

    response = Response(body=detail, status=exc.status, content_type=_PLAIN_TEXT)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:  # noqa: ARG001
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    return Response(body="Internal Server Error", status=500, content_type=_PLAIN_TEXT)
