"""Tests for the --debug file logger."""

from __future__ import annotations

from pathlib import Path

import pytest

from utilities import debug_logger
from utilities.logging_utils import log_exception, safe_log


def test_safe_log_without_logger_does_not_raise() -> None:
    safe_log("nothing configured\n", level="INFO")
    assert debug_logger.get_logger() is None


def test_messages_reach_the_log_file(tmp_path: Path) -> None:
    debug_logger.init_debug(tmp_path / "logs")
    log_file = debug_logger.get_log_file()

    safe_log("Merged aurora-blast/1920x1080\n", level="INFO")
    log_exception(ValueError("boom"), "Publishing failed", level="ERROR")
    debug_logger.finalize()

    assert log_file is not None
    assert log_file.name.startswith("publisher_debug_")
    text = log_file.read_text(encoding="utf-8")
    assert "INFO theme_publisher_debug: Merged aurora-blast/1920x1080" in text
    assert "Publishing failed" in text
    assert "ValueError" in text
    assert "# In-memory buffer:" in text


def test_init_debug_is_idempotent(tmp_path: Path) -> None:
    first = debug_logger.init_debug(tmp_path)
    assert debug_logger.init_debug(tmp_path / "other") is first
    assert not (tmp_path / "other").exists()


def test_log_dir_inside_repo_moves_to_home(
    repo: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    home = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(repo)

    log_dir = debug_logger.log_dir_for(repo)
    debug_logger.init_debug(log_dir)
    debug_logger.finalize()

    assert log_dir == home / ".theme_publisher" / "logs"
    assert any(log_dir.glob("publisher_debug_*.log"))
    assert sorted(p.name for p in repo.iterdir()) == [".gitignore"]


def test_log_dir_outside_repo_is_kept(
    repo: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert debug_logger.log_dir_for(repo) == (workdir / "logs").resolve()
    assert debug_logger.log_dir_for(repo, tmp_path / "elsewhere") == (tmp_path / "elsewhere").resolve()
