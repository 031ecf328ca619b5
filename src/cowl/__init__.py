"""Cowl — static asset resolution and conditional-GET serving.

Decides whether a request path maps to a servable file on disk, classifies
it by extension, refuses dangerous file types, and answers with ETag /
Last-Modified validation and 304 short-circuiting.

Direct use::

    from cowl import StaticConfig, render, resolve

    config = StaticConfig(asset_root="./app")
    config.validate()

    asset = resolve("/css/site.css", config)
    if asset.is_servable:
        response = render(asset, {"If-None-Match": etag, "Cache-Control": "max-age=0"})

As an ASGI application::

    from cowl import AssetServer

    app = AssetServer(config, fallback=dynamic_handler)
"""

__version__ = "0.1.0"
__all__ = [
    "AnyResponse",
    "AssetIOError",
    "AssetRequest",
    "AssetServer",
    "ConfigurationError",
    "CowlError",
    "FileResponse",
    "HTTPError",
    "Middleware",
    "MisconfiguredRoot",
    "Next",
    "NotFound",
    "NotServableError",
    "Request",
    "Response",
    "StaticAssets",
    "StaticConfig",
    "render",
    "resolve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import cowl`` fast while providing a clean top-level API.
    """
    if name == "AssetServer":
        from cowl.app import AssetServer

        return AssetServer

    if name == "StaticConfig":
        from cowl.config import StaticConfig

        return StaticConfig

    if name in ("AssetRequest", "resolve"):
        from cowl.static import resolver as _resolver

        return getattr(_resolver, name)

    if name == "render":
        from cowl.static.renderer import render

        return render

    if name == "Request":
        from cowl.http.request import Request

        return Request

    if name in ("Response", "FileResponse"):
        from cowl.http import response as _resp

        return getattr(_resp, name)

    if name in ("AnyResponse", "Middleware", "Next"):
        from cowl.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "StaticAssets":
        from cowl.middleware.static import StaticAssets

        return StaticAssets

    if name in (
        "AssetIOError",
        "ConfigurationError",
        "CowlError",
        "HTTPError",
        "MisconfiguredRoot",
        "NotFound",
        "NotServableError",
    ):
        from cowl import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
