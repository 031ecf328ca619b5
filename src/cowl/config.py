"""Static asset configuration.

StaticConfig is a frozen dataclass: built once at process start, passed by
reference into every resolver, never mutated afterwards. Rebinding the asset
root produces a new config via ``with_root()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from cowl.errors import ConfigurationError, MisconfiguredRoot
from cowl.static.types import (
    ASSET_MARKERS,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CONTENT_TYPE,
    DENIED_EXTENSIONS,
    ETAG_PREFIX,
    MIME_TYPES,
)


@dataclass(frozen=True, slots=True)
class StaticConfig:
    """Static asset configuration. Immutable after creation.

    Only ``asset_root`` has to be provided; everything else defaults to
    the standard tables::

        config = StaticConfig(asset_root="./app")
        config.validate()  # at startup, not per request
    """

    # Directory that requested paths are joined under
    asset_root: str | Path | None = None

    # Classification
    mime_types: Mapping[str, str] = field(default_factory=lambda: MIME_TYPES, hash=False)
    denied_extensions: frozenset[str] = DENIED_EXTENSIONS
    asset_markers: tuple[str, ...] = ASSET_MARKERS
    default_content_type: str = DEFAULT_CONTENT_TYPE

    # Reject candidates whose canonical location escapes asset_root
    confine_to_root: bool = True

    # Rendering
    chunk_size: int = DEFAULT_CHUNK_SIZE
    etag_prefix: str = ETAG_PREFIX

    def validate(self) -> None:
        """Fail fast on a configuration that cannot serve anything.

        Raises:
            MisconfiguredRoot: ``asset_root`` is unset.
            ConfigurationError: ``asset_root`` is not a directory, or
                ``chunk_size`` is not positive.
        """
        if self.asset_root is None or str(self.asset_root) == "":
            raise MisconfiguredRoot
        if not Path(self.asset_root).is_dir():
            msg = f"Static asset root {str(self.asset_root)!r} is not a directory"
            raise ConfigurationError(msg)
        if self.chunk_size <= 0:
            msg = f"chunk_size must be positive, got {self.chunk_size}"
            raise ConfigurationError(msg)

    def with_root(self, asset_root: str | Path) -> StaticConfig:
        """Return a copy of this config bound to another asset root."""
        return replace(self, asset_root=asset_root)

    def content_type_for(self, extension: str) -> str:
        """MIME type for *extension*, falling back to the default type."""
        return self.mime_types.get(extension.lower(), self.default_content_type)

    def is_denied(self, extension: str) -> bool:
        """Whether *extension* must never be served."""
        return extension.lower() in self.denied_extensions
