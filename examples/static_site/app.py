"""Static assets in front of a dynamic fallback.

Demonstrates:
- AssetServer serving ./assets with ETag revalidation
- A fallback handler for every path the static layer turns down
- Denied extensions (a stray .php file) falling through untouched

Run:
    uvicorn app:app
"""

from pathlib import Path

from cowl import AssetServer, Request, Response, StaticConfig

ASSETS_DIR = Path(__file__).parent / "assets"

PAGE = """\
<!doctype html>
<link rel="stylesheet" href="/css/site.css">
<script src="/js/app.js" defer></script>
<h1>{title}</h1>
"""


async def pages(request: Request) -> Response:
    """Dynamic layer: render a page for anything that isn't a static asset."""
    if request.path == "/":
        return Response(body=PAGE.format(title="Home"))
    return Response(body=PAGE.format(title="Not Found"), status=404)


app = AssetServer(StaticConfig(asset_root=ASSETS_DIR), fallback=pages)
