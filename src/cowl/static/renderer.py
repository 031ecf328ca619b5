"""Cache-validating renderer for resolved static assets.

Given a servable ``AssetRequest`` and the inbound request headers, produce
either a full ``FileResponse`` (200) or a bodiless ``Response`` (304).

Every response is marked private and carries Last-Modified plus an ETag.
No Expires or long max-age is sent: some clients skip revalidation
entirely when one is present, and then the 304 path is never taken.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from cowl.errors import AssetIOError, NotServableError
from cowl.http.headers import Headers
from cowl.http.response import FileResponse, Response
from cowl.static.resolver import AssetRequest
from cowl.static.validators import compute_etag, http_date, is_not_modified

logger = logging.getLogger("cowl.static")


def _request_header(headers: Mapping[str, str], name: str) -> str | None:
    """Look up *name* as an HTTP field name or its CGI environ key.

    A field sent more than once is joined with ``", "``, the way a CGI
    gateway folds it into a single environ value.
    """
    if isinstance(headers, Headers):
        values = headers.get_list(name)
        return ", ".join(values) if values else None
    value = headers.get(name)
    if value is not None:
        return value
    environ_key = "HTTP_" + name.upper().replace("-", "_")
    value = headers.get(environ_key)
    if value is not None:
        return value
    # Plain dicts are case-sensitive
    name_lower = name.lower()
    for key, candidate in headers.items():
        if key.lower() == name_lower:
            return candidate
    return None


def cache_headers(asset: AssetRequest, mod_time: int) -> tuple[str, tuple[tuple[str, str], ...]]:
    """Compute the ETag and the validator headers for *asset* at *mod_time*."""
    etag = compute_etag(asset.resolved_path, mod_time, asset.config.etag_prefix)
    headers = (
        ("Cache-Control", "private"),
        ("Pragma", "private"),
        ("Last-Modified", http_date(mod_time)),
        ("ETag", f'"{etag}"'),
    )
    return etag, headers


def render(asset: AssetRequest, headers: Mapping[str, str]) -> Response | FileResponse:
    """Answer a conditional GET for a resolved asset.

    Args:
        asset: A resolved request. Must be servable.
        headers: Request headers. HTTP field names (any case) and CGI
            names (``HTTP_IF_NONE_MATCH``) are both accepted.

    Returns:
        A 304 ``Response`` with an empty body when the client's validator
        is current, otherwise a 200 ``FileResponse`` streaming the file.

    Raises:
        NotServableError: *asset* is not servable.
        AssetIOError: The file could not be stat'ed (removed or unreadable
            since resolution).
    """
    if not asset.is_servable:
        raise NotServableError(asset)

    path = asset.resolved_path
    content_type = asset.content_type
    try:
        mod_time = int(os.stat(path).st_mtime)
    except OSError as exc:
        raise AssetIOError(path=path) from exc

    etag, validator_headers = cache_headers(asset, mod_time)

    if is_not_modified(
        etag,
        _request_header(headers, "If-None-Match"),
        _request_header(headers, "Cache-Control"),
    ):
        logger.debug("304 %s (%s)", asset.requested_path, etag)
        return Response(body=b"", status=304, content_type=content_type, headers=validator_headers)

    return FileResponse(
        path=path,
        status=200,
        content_type=content_type,
        headers=validator_headers,
        chunk_size=asset.config.chunk_size,
    )
