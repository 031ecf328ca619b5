"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> AnyResponse

Built-in middleware:
    StaticAssets -- Serve resolved static assets with ETag revalidation
"""

from cowl.middleware.protocol import AnyResponse, Middleware, Next
from cowl.middleware.static import StaticAssets

__all__ = [
    "AnyResponse",
    "Middleware",
    "Next",
    "StaticAssets",
]
