"""Tests for command-line parsing and help output."""

from __future__ import annotations

from pathlib import Path

import pytest

from terminal.cli import CLIParser


def test_defaults() -> None:
    parsed = CLIParser().parse([])
    assert parsed.config is None
    assert parsed.repo_root is None
    assert parsed.debug is False


def test_options(tmp_path: Path) -> None:
    parsed = CLIParser().parse(["--config", "alt.json", "--repo-root", str(tmp_path), "--debug"])
    assert parsed.config == Path("alt.json")
    assert parsed.repo_root == tmp_path
    assert parsed.debug is True


def test_repo_root_must_exist(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CLIParser().parse(["--repo-root", str(tmp_path / "missing")])
    assert excinfo.value.code == 2


def test_help_lists_options(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CLIParser().parse(["--help"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "Theme Publisher" in out
    assert "--repo-root" in out
