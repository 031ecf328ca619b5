"""Path resolution and classification for static assets.

Turns a caller-supplied request path into a verified, classified on-disk
location, or marks it not servable. Nothing here raises for a missing or
denied file; the only fatal condition is an unset asset root.

Resolution order:

1. Pre-filter: the path must mention one of the configured asset markers.
2. The path as given (relative paths against the working directory).
3. The path joined under the asset root.
4. Deny-list check, last and unconditional.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cowl.config import StaticConfig
from cowl.errors import MisconfiguredRoot

logger = logging.getLogger("cowl.static")


def extension_of(path: str) -> str:
    """Lower-cased extension of the last ``/`` segment, or ``""``.

    >>> extension_of("/css/Site.CSS")
    'css'
    >>> extension_of("/gfx.d/logo")
    ''
    """
    segment = path.rsplit("/", 1)[-1]
    if "." not in segment:
        return ""
    return segment.rsplit(".", 1)[-1].lower()


def _is_regular_file(candidate: Path) -> bool:
    """``Path.is_file()`` that treats every lookup error as "no file".

    ``is_file`` itself only swallows a few errno values; an over-long name
    or an unreadable parent directory would otherwise escape.
    """
    try:
        return candidate.is_file()
    except (OSError, ValueError) as exc:
        logger.debug("Lookup failed for %s: %s", candidate, exc)
        return False


class AssetRequest:
    """Resolution state for one inbound path.

    Request scoped and unsynchronized: one instance per request flow,
    discarded after the response is sent. Construction resolves the path
    immediately::

        asset = AssetRequest("/css/site.css", config)
        if asset.is_servable:
            response = render(asset, request.headers)

    ``force_set_path()`` and ``set_servable()`` bypass resolution and the
    lock. They exist for trusted callers that have already applied their
    own policy (a rewrite rule, a caching plugin) and should not be used
    to answer untrusted input.
    """

    __slots__ = (
        "_config",
        "_extension",
        "_locked",
        "_requested_path",
        "_resolved_path",
        "_servable",
    )

    def __init__(self, path: str, config: StaticConfig) -> None:
        self._config = config
        self._requested_path = ""
        self._resolved_path = ""
        self._extension = ""
        self._servable = False
        self._locked = False
        self.set_path(path)

    def __repr__(self) -> str:
        return (
            f"AssetRequest({self._requested_path!r}, resolved={self._resolved_path!r}, "
            f"servable={self._servable}, locked={self._locked})"
        )

    # -- Mutators --

    def set_path(self, path: str) -> None:
        """Replace the requested path and resolve it again.

        Ignored while the path is locked.
        """
        if self._locked:
            logger.debug("Path locked; ignoring set_path(%r)", path)
            return
        self._requested_path = path
        self._resolve()

    def force_set_path(self, path: str) -> None:
        """Overwrite requested and resolved path without resolving.

        Extension and servability are left as they were.
        """
        self._requested_path = path
        self._resolved_path = path

    def set_servable(self, servable: bool) -> None:
        """Override the computed servability flag."""
        self._servable = servable

    def lock_path(self) -> None:
        """Make subsequent ``set_path()`` calls no-ops."""
        self._locked = True

    def unlock_path(self) -> None:
        """Undo ``lock_path()``."""
        self._locked = False

    # -- Accessors --

    @property
    def config(self) -> StaticConfig:
        return self._config

    @property
    def requested_path(self) -> str:
        return self._requested_path

    @property
    def resolved_path(self) -> str:
        """On-disk path of the file, or ``""`` if nothing was found."""
        return self._resolved_path

    @property
    def extension(self) -> str:
        return self._extension

    @property
    def is_servable(self) -> bool:
        """True iff a regular file was found and its extension is allowed."""
        return self._servable

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def content_type(self) -> str:
        """MIME type for the extension, ``text/html`` when unknown."""
        return self._config.content_type_for(self._extension)

    # -- Resolution --

    def _resolve(self) -> None:
        config = self._config
        if config.asset_root is None or str(config.asset_root) == "":
            raise MisconfiguredRoot

        path = self._requested_path
        self._resolved_path = ""
        self._servable = False
        self._extension = extension_of(path)

        if not path or not any(marker in path for marker in config.asset_markers):
            return

        for candidate in (Path(path), Path(config.asset_root) / path.lstrip("/")):
            if _is_regular_file(candidate) and self._within_root(candidate):
                self._resolved_path = str(candidate)
                self._servable = True
                break

        if self._servable and config.is_denied(self._extension):
            logger.debug("Denied extension %r for %s", self._extension, path)
            self._servable = False

        logger.debug("Resolved %s -> %r (servable=%s)", path, self._resolved_path, self._servable)

    def _within_root(self, candidate: Path) -> bool:
        if not self._config.confine_to_root:
            return True
        try:
            root = Path(self._config.asset_root).resolve()  # type: ignore[arg-type]
            return candidate.resolve().is_relative_to(root)
        except (OSError, RuntimeError):
            # Symlink loop or an unreadable component.
            return False


def resolve(path: str, config: StaticConfig) -> AssetRequest:
    """Resolve *path* against *config*.

    Raises:
        MisconfiguredRoot: ``config.asset_root`` is unset.
    """
    return AssetRequest(path, config)
