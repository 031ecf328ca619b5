"""Static asset resolution and cache-validating rendering.

Public API::

    from cowl.static import AssetRequest, render, resolve

    asset = resolve("/css/site.css", config)
    if asset.is_servable:
        response = render(asset, request.headers)
"""

__all__ = [
    "AssetRequest",
    "compute_etag",
    "extension_of",
    "http_date",
    "is_not_modified",
    "render",
    "resolve",
]


def __getattr__(name: str) -> object:
    """Lazy imports; ``cowl.config`` imports ``cowl.static.types``."""
    if name in ("AssetRequest", "extension_of", "resolve"):
        from cowl.static import resolver

        return getattr(resolver, name)

    if name == "render":
        from cowl.static.renderer import render

        return render

    if name in ("compute_etag", "http_date", "is_not_modified"):
        from cowl.static import validators

        return getattr(validators, name)

    msg = f"module 'cowl.static' has no attribute {name!r}"
    raise AttributeError(msg)
