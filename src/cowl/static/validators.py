"""Cache validators for conditional GET.

The ETag is a CRC32 over the resolved path and the whole-second modification
time, so it changes whenever the file moves or is touched and is stable
across requests otherwise.
"""

import zlib
from email.utils import formatdate

from cowl.static.types import ETAG_PREFIX


def compute_etag(resolved_path: str, mod_time: int, prefix: str = ETAG_PREFIX) -> str:
    """Return the unquoted validator for a file state.

    >>> compute_etag("/srv/app/css/site.css", 1700000000)[:5]
    'cowl-'
    """
    checksum = zlib.crc32(f"{resolved_path}{mod_time}".encode()) & 0xFFFFFFFF
    return f"{prefix}{checksum:x}"


def http_date(timestamp: float) -> str:
    """Format a POSIX timestamp as an RFC 1123 date in GMT."""
    return formatdate(timestamp, usegmt=True)


def is_not_modified(etag: str, if_none_match: str | None, cache_control: str | None) -> bool:
    """Whether the client's cached copy is still current.

    Both request headers must be present. ``no-cache`` anywhere in
    Cache-Control forces a full response; otherwise the validator only has
    to appear somewhere in If-None-Match.
    """
    if if_none_match is None or cache_control is None:
        return False
    if "no-cache" in cache_control:
        return False
    return etag in if_none_match
