"""Tests for cowl.config — StaticConfig frozen dataclass."""

from pathlib import Path

import pytest

from cowl.config import StaticConfig
from cowl.errors import ConfigurationError, MisconfiguredRoot
from cowl.static.types import DENIED_EXTENSIONS, MIME_TYPES


class TestStaticConfig:
    def test_defaults(self) -> None:
        cfg = StaticConfig()

        assert cfg.asset_root is None
        assert cfg.mime_types is MIME_TYPES
        assert cfg.denied_extensions == frozenset({"php", "phtml", "ini", "sql"})
        assert cfg.asset_markers == ("gfx", "css", "js")
        assert cfg.default_content_type == "text/html"
        assert cfg.confine_to_root is True
        assert cfg.etag_prefix == "cowl-"

    def test_frozen(self) -> None:
        cfg = StaticConfig(asset_root="/srv/app")

        with pytest.raises(AttributeError):
            cfg.asset_root = "/elsewhere"  # type: ignore[misc]

    def test_with_root_returns_copy(self, tmp_path: Path) -> None:
        cfg = StaticConfig(asset_root="/srv/app", confine_to_root=False)
        moved = cfg.with_root(tmp_path)

        assert moved.asset_root == tmp_path
        assert moved.confine_to_root is False
        assert cfg.asset_root == "/srv/app"


class TestMimeTable:
    @pytest.mark.parametrize(
        ("extension", "expected"),
        [
            ("json", "text/json"),
            ("css", "text/css"),
            ("js", "application/javascript"),
            ("jpg", "image/jpeg"),
            ("jpeg", "image/jpeg"),
            ("gif", "image/gif"),
            ("png", "image/png"),
            ("bmp", "image/bmp"),
            ("html", "text/html"),
            ("rss", "application/rss+xml"),
            ("partial", "text/html"),
            ("otf", "font/opentype"),
            ("ttf", "font/ttf"),
        ],
    )
    def test_known_types(self, extension: str, expected: str) -> None:
        assert StaticConfig().content_type_for(extension) == expected

    def test_table_is_exactly_the_published_set(self) -> None:
        assert len(MIME_TYPES) == 13

    def test_lookup_is_case_insensitive(self) -> None:
        assert StaticConfig().content_type_for("PNG") == "image/png"

    def test_unknown_falls_back_to_html(self) -> None:
        assert StaticConfig().content_type_for("svg") == "text/html"
        assert StaticConfig().content_type_for("") == "text/html"

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            MIME_TYPES["svg"] = "image/svg+xml"  # type: ignore[index]


class TestDenyList:
    @pytest.mark.parametrize("extension", sorted(DENIED_EXTENSIONS))
    def test_denied(self, extension: str) -> None:
        assert StaticConfig().is_denied(extension)

    def test_denied_case_insensitive(self) -> None:
        assert StaticConfig().is_denied("PHP")

    def test_allowed(self) -> None:
        assert not StaticConfig().is_denied("css")


class TestValidate:
    def test_unset_root_is_misconfigured(self) -> None:
        with pytest.raises(MisconfiguredRoot):
            StaticConfig().validate()

    def test_empty_root_is_misconfigured(self) -> None:
        with pytest.raises(MisconfiguredRoot):
            StaticConfig(asset_root="").validate()

    def test_misconfigured_root_is_a_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            StaticConfig().validate()

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not a directory"):
            StaticConfig(asset_root=tmp_path / "nope").validate()

    def test_file_is_not_a_root(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(ConfigurationError):
            StaticConfig(asset_root=target).validate()

    def test_bad_chunk_size(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="chunk_size"):
            StaticConfig(asset_root=tmp_path, chunk_size=0).validate()

    def test_valid(self, tmp_path: Path) -> None:
        StaticConfig(asset_root=tmp_path).validate()
        StaticConfig(asset_root=str(tmp_path)).validate()
