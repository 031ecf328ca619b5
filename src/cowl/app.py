"""AssetServer — the ASGI application that hosts static asset serving.

Mutable during setup (add middleware, set the fallback), frozen on first
request or at lifespan startup. Freezing validates the configuration, so a
missing asset root stops the process before it accepts traffic instead of
failing per request.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from cowl._internal.asgi import Receive, Scope, Send
from cowl.config import StaticConfig
from cowl.errors import NotFound
from cowl.http.request import Request
from cowl.middleware.protocol import AnyResponse, Middleware
from cowl.middleware.static import StaticAssets
from cowl.server.handler import Fallback, handle_request

logger = logging.getLogger("cowl.server")


async def not_found(request: Request) -> AnyResponse:
    """Default fallback: nothing static matched and there is no dynamic layer."""
    raise NotFound(f"No static asset for {request.path}")


class AssetServer:
    """ASGI application serving static assets, delegating everything else.

    Usage::

        server = AssetServer(StaticConfig(asset_root="./app"), fallback=dynamic)

    ``fallback`` is the dynamic layer: an async callable receiving the
    ``Request`` for every path the static layer turned down. The default
    answers 404. Extra middleware runs outside the static layer, in
    registration order.

    Lifecycle:
        - **Setup**: ``add_middleware()``, ``set_fallback()``.
        - **Freeze**: on lifespan startup or the first request. Validates
          the config and compiles the middleware chain.
        - **Runtime**: read-only; safe to share across workers.

        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the chain even when several workers receive their
        first request at once.
    """

    __slots__ = (
        "_fallback",
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "config",
    )

    def __init__(self, config: StaticConfig, *, fallback: Fallback | None = None) -> None:
        self.config: StaticConfig = config
        self._fallback: Fallback = fallback or not_found
        self._middleware_list: list[Middleware] = []
        self._middleware: tuple[Callable[..., Any], ...] = ()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Setup --

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware that runs before the static layer."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    def set_fallback(self, fallback: Fallback) -> None:
        """Replace the handler for requests the static layer does not serve."""
        self._check_not_frozen()
        self._fallback = fallback

    def check(self) -> None:
        """Validate the configuration now.

        Raises:
            MisconfiguredRoot: The asset root is unset.
            ConfigurationError: The asset root is not a directory.
        """
        self.config.validate()

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            middleware=self._middleware,
            fallback=self._fallback,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes at startup; a configuration error is reported back to the
        server as ``lifespan.startup.failed``.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    logger.error("Startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Freeze --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Validate config and compile the middleware chain.

        MUST only be called while holding _freeze_lock.
        """
        self.check()
        self._middleware = (*self._middleware_list, StaticAssets(self.config))
        self._frozen = True
        logger.debug("Serving static assets from %s", self.config.asset_root)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the server after it has started serving requests. "
                "Register middleware and the fallback before the first request."
            )
            raise RuntimeError(msg)
