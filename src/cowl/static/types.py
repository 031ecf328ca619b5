"""Wire-visible constants for static asset classification.

The MIME table and the deny-list are part of the public contract: clients
and upstream caches see these exact content types, and the deny-list keeps
server-side scripts, config, and SQL dumps from ever being sent even if
they end up under the asset root.
"""

from types import MappingProxyType

MIME_TYPES = MappingProxyType(
    {
        "json": "text/json",
        "css": "text/css",
        "js": "application/javascript",
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "gif": "image/gif",
        "png": "image/png",
        "bmp": "image/bmp",
        "html": "text/html",
        "rss": "application/rss+xml",
        "partial": "text/html",
        "otf": "font/opentype",
        "ttf": "font/ttf",
    }
)

DENIED_EXTENSIONS: frozenset[str] = frozenset({"php", "phtml", "ini", "sql"})

# Cheap pre-filter: a request path must mention one of these to be
# considered static at all. Not a security boundary.
ASSET_MARKERS: tuple[str, ...] = ("gfx", "css", "js")

DEFAULT_CONTENT_TYPE = "text/html"

ETAG_PREFIX = "cowl-"

DEFAULT_CHUNK_SIZE = 64 * 1024
