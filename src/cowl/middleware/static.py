"""Static asset middleware.

Answers GET and HEAD requests whose path resolves to a servable asset and
falls through to the next handler for everything else, so dynamic routes
keep working for paths the resolver turns down.

Resolution and rendering stat the filesystem, so both run in a worker
thread; the event loop only ever awaits.
"""

import logging

import anyio

from cowl.config import StaticConfig
from cowl.http.request import Request
from cowl.middleware.protocol import AnyResponse, Next
from cowl.static.renderer import render
from cowl.static.resolver import AssetRequest, resolve

logger = logging.getLogger("cowl.static")


class StaticAssets:
    """Middleware that serves static assets with conditional-GET support.

    ``AssetServer`` installs one innermost, directly in front of its
    fallback. Construct it yourself only to embed it in another
    ``(request, next)`` chain::

        static = StaticAssets(StaticConfig(asset_root="./app"))
        response = await static(request, next)

    The configuration is validated on construction, so an unset or
    missing asset root fails at startup rather than on the first request.
    """

    __slots__ = ("_config",)

    def __init__(self, config: StaticConfig) -> None:
        config.validate()
        self._config = config

    async def __call__(self, request: Request, next: Next) -> AnyResponse:
        """Serve a static asset or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        asset: AssetRequest = await anyio.to_thread.run_sync(resolve, request.path, self._config)
        if not asset.is_servable:
            return await next(request)

        return await anyio.to_thread.run_sync(render, asset, request.headers)
