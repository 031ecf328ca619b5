"""Immutable HTTP request metadata.

Static serving never reads a request body, so the request carries only what
the router and the cache validator need: method, path, and headers.
"""

from __future__ import annotations

from dataclasses import dataclass

from cowl._internal.asgi import Scope
from cowl.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, built once per ASGI call."""

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Build a Request from a raw ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
