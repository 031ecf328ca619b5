"""Cowl exception hierarchy.

Shared across the resolver, renderer, middleware, and ASGI host so every
module raises and catches the same types.

Classification failures (missing file, denied extension, no asset marker)
are not exceptions: they surface through ``AssetRequest.is_servable``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cowl.static.resolver import AssetRequest


class CowlError(Exception):
    """Base for all cowl-specific errors."""


class ConfigurationError(CowlError):
    """Raised when static configuration is invalid.

    Typically raised by ``StaticConfig.validate()`` at startup.
    """


class MisconfiguredRoot(ConfigurationError):  # noqa: N818
    """The asset root was never configured.

    Raised at startup by ``StaticConfig.validate()`` and by every
    resolution attempt, before the filesystem is touched.
    """

    def __init__(self, detail: str = "Static asset root is not configured") -> None:
        super().__init__(detail)


class NotServableError(CowlError):
    """``render()`` was called for a request that is not servable.

    Callers are expected to check ``AssetRequest.is_servable`` first and
    fall through to their own 404 or dynamic handling.
    """

    def __init__(self, asset: AssetRequest) -> None:
        self.asset = asset
        super().__init__(f"Not a servable static asset: {asset.requested_path!r}")


@dataclass(frozen=True, slots=True)
class HTTPError(CowlError):
    """An error that maps directly to an HTTP status code.

    Raised by middleware or fallback handlers. The ASGI host catches
    these and answers with the carried status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — nothing static or dynamic answered the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


@dataclass(frozen=True, slots=True)
class AssetIOError(HTTPError):
    """500 — a resolved file vanished or became unreadable before it was sent.

    Always chained to the underlying ``OSError``. Never downgraded to an
    empty 200.
    """

    status: int = 500
    path: str = ""

    def __post_init__(self) -> None:
        if not self.detail:
            object.__setattr__(self, "detail", f"Cannot read static asset {self.path!r}")
