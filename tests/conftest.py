"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from collections.abc import Generator
from pathlib import Path

import pytest
from rich.console import Console

from models.config import PublisherConfig
from utilities import debug_logger


@pytest.fixture(autouse=True)
def reset_debug_logger() -> Generator[None, None, None]:
    """Keep the module-level debug logger state isolated between tests."""
    debug_logger.reset()
    yield
    debug_logger.reset()


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """An empty content repository with a .gitignore already in place."""
    root = tmp_path / "repo"
    root.mkdir()
    (root / ".gitignore").write_text("logs/\n", encoding="utf-8")
    return root


@pytest.fixture
def config(repo: Path) -> PublisherConfig:
    return PublisherConfig(
        github_username="octo",
        github_repo="themes",
        repo_root=repo,
    )


@pytest.fixture
def theme_source(tmp_path: Path) -> Path:
    """A small theme folder with one nested file and an empty folder."""
    source = tmp_path / "aurora"
    (source / "assets").mkdir(parents=True)
    (source / "empty").mkdir()
    (source / "index.html").write_text("<html></html>", encoding="utf-8")
    (source / "assets" / "style.css").write_text("body {}", encoding="utf-8")
    return source


@pytest.fixture
def preview_image(tmp_path: Path) -> Path:
    image = tmp_path / "shot.png"
    image.write_bytes(b"\x89PNG fake image")
    return image


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)
