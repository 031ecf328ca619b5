"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> AnyResponse: ...

No base class required. The host checks the shape, not the lineage.
Both response types share the ``.with_header()`` / ``.with_status()``
chainable API, so middleware can modify them uniformly.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from cowl.http.request import Request
from cowl.http.response import FileResponse, Response

# Any response type the pipeline can produce
AnyResponse: TypeAlias = Response | FileResponse

# The next handler in the middleware chain
Next: TypeAlias = Callable[[Request], Awaitable[AnyResponse]]


class Middleware(Protocol):
    """Protocol for cowl middleware.

    Accepts both functions and callable objects::

        async def powered_by(request: Request, next: Next) -> AnyResponse:
            response = await next(request)
            return response.with_header("X-Powered-By", "cowl")
    """

    async def __call__(self, request: Request, next: Next) -> AnyResponse: ...
