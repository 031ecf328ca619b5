"""Tests for cowl.cli — CLI entrypoint and ``cowl resolve``."""

import os
from pathlib import Path

import pytest

from cowl.cli import main


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "app"
    (root / "css").mkdir(parents=True)
    site = root / "css" / "site.css"
    site.write_text("body {}")
    os.utime(site, (1700000000, 1700000000))
    (root / "css" / "x.php").write_text("<?php ?>")
    return root


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_resolve_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "cowl" in capsys.readouterr().out

    def test_resolve_requires_root(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "/css/site.css"])
        assert exc_info.value.code == 2


class TestResolveCommand:
    def test_servable(self, asset_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "/css/site.css", "--root", str(asset_root)])
        out = capsys.readouterr().out

        assert "servable:   yes" in out
        assert "status:     200" in out
        assert "Content-Type: text/css" in out
        assert "Last-Modified: Tue, 14 Nov 2023 22:13:20 GMT" in out
        assert 'ETag: "cowl-' in out

    def test_if_none_match_gives_304(
        self, asset_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["resolve", "/css/site.css", "--root", str(asset_root)])
        etag_line = next(
            line for line in capsys.readouterr().out.splitlines() if line.startswith("ETag:")
        )
        etag = etag_line.split(": ", 1)[1]

        main(["resolve", "/css/site.css", "--root", str(asset_root), "--if-none-match", etag])
        assert "status:     304" in capsys.readouterr().out

        main(
            [
                "resolve",
                "/css/site.css",
                "--root",
                str(asset_root),
                "--if-none-match",
                etag,
                "--no-cache",
            ]
        )
        assert "status:     200" in capsys.readouterr().out

    def test_denied_exits_one(self, asset_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "/css/x.php", "--root", str(asset_root)])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "servable:   no" in out
        assert "extension:  php" in out

    def test_missing_root_exits_two(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "/css/site.css", "--root", str(tmp_path / "nope")])

        assert exc_info.value.code == 2
        assert "not a directory" in capsys.readouterr().err
