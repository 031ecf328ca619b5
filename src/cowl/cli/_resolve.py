"""``cowl resolve`` — show how a request path would be answered.

Prints the classification of the path and, when it is servable, the
status and headers the renderer produces for the given validators.

Exit codes: 0 servable, 1 not servable, 2 misconfigured root.
"""

import argparse
import sys

from cowl.config import StaticConfig
from cowl.errors import ConfigurationError
from cowl.static.renderer import render
from cowl.static.resolver import resolve


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` under ``args.root`` and print the outcome."""
    config = StaticConfig(asset_root=args.root, confine_to_root=not args.unconfined)
    try:
        config.validate()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    asset = resolve(args.path, config)
    print(f"path:       {asset.requested_path}")
    print(f"resolved:   {asset.resolved_path or '-'}")
    print(f"extension:  {asset.extension or '-'}")
    print(f"servable:   {'yes' if asset.is_servable else 'no'}")
    if not asset.is_servable:
        raise SystemExit(1)

    headers = {"Cache-Control": "no-cache" if args.no_cache else "max-age=0"}
    if args.if_none_match:
        headers["If-None-Match"] = args.if_none_match

    response = render(asset, headers)
    print(f"status:     {response.status}")
    print(f"Content-Type: {response.content_type}")
    for name, value in response.headers:
        print(f"{name}: {value}")
