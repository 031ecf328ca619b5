"""Tests for cowl.errors — the exception hierarchy."""

import pytest

from cowl.config import StaticConfig
from cowl.errors import (
    AssetIOError,
    ConfigurationError,
    CowlError,
    HTTPError,
    MisconfiguredRoot,
    NotFound,
    NotServableError,
)
from cowl.static.resolver import AssetRequest


class TestHierarchy:
    def test_all_derive_from_base(self) -> None:
        for exc_type in (ConfigurationError, MisconfiguredRoot, NotServableError, HTTPError):
            assert issubclass(exc_type, CowlError)

    def test_misconfigured_root_is_configuration_error(self) -> None:
        assert issubclass(MisconfiguredRoot, ConfigurationError)

    def test_io_error_is_http_500(self) -> None:
        exc = AssetIOError(path="/srv/app/css/site.css")

        assert isinstance(exc, HTTPError)
        assert exc.status == 500
        assert exc.path == "/srv/app/css/site.css"
        assert "site.css" in str(exc)

    def test_io_error_keeps_explicit_detail(self) -> None:
        exc = AssetIOError(path="/srv/app/js/app.js", detail="disk gone")

        assert exc.detail == "disk gone"
        assert str(exc) == "500: disk gone"

    def test_io_error_is_frozen(self) -> None:
        exc = AssetIOError(path="/srv/app/css/site.css")
        with pytest.raises(AttributeError):
            exc.path = "/etc/passwd"  # type: ignore[misc]

    def test_io_error_raises_chained(self) -> None:
        with pytest.raises(AssetIOError) as exc_info:
            try:
                raise FileNotFoundError("/srv/app/css/site.css")
            except OSError as cause:
                raise AssetIOError(path="/srv/app/css/site.css") from cause

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestHTTPError:
    def test_str(self) -> None:
        assert str(HTTPError(status=418)) == "418"
        assert str(HTTPError(status=418, detail="teapot")) == "418: teapot"

    def test_not_found(self) -> None:
        exc = NotFound()
        assert exc.status == 404
        assert exc.detail == "Not Found"

    def test_frozen(self) -> None:
        exc = NotFound()
        with pytest.raises(AttributeError):
            exc.status = 200  # type: ignore[misc]


class TestNotServableError:
    def test_carries_asset(self, tmp_path) -> None:
        asset = AssetRequest("/index", StaticConfig(asset_root=tmp_path))
        exc = NotServableError(asset)

        assert exc.asset is asset
        assert "/index" in str(exc)
