"""Unit tests for id, tag and path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from utilities.paths import (
    clean_path_input,
    file_extension,
    file_size_mb,
    normalize_theme_id,
    relative_posix,
    sanitize_label,
    split_tags,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Aurora Blast", "aurora-blast"),
        ("  Neon   City!! ", "neon-city"),
        ("Café_2024", "caf2024"),
        ("already-normal", "already-normal"),
        ("!!!", ""),
    ],
)
def test_normalize_theme_id(raw: str, expected: str) -> None:
    assert normalize_theme_id(raw) == expected


def test_normalize_theme_id_is_idempotent() -> None:
    once = normalize_theme_id("  My Cool\tTheme #1 ")
    assert normalize_theme_id(once) == once


def test_split_tags_drops_blanks_and_trims() -> None:
    assert split_tags("a, b ,, c") == ["a", "b", "c"]
    assert split_tags("") == []
    assert split_tags(" , ") == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("'/tmp/my folder'", "/tmp/my folder"),
        ('"C:\\Themes\\Aurora"', "C:\\Themes\\Aurora"),
        ("  /plain/path  ", "/plain/path"),
        ("'/only/leading", "/only/leading"),
    ],
)
def test_clean_path_input(raw: str, expected: str) -> None:
    assert clean_path_input(raw) == expected


def test_sanitize_label_keeps_safe_characters() -> None:
    assert sanitize_label("1920x1080") == "1920x1080"
    assert sanitize_label("Dark Mode/v2") == "Dark_Mode_v2"
    assert sanitize_label("a.b-c_d") == "a.b-c_d"


def test_file_size_mb_rounds_to_two_decimals(tmp_path: Path) -> None:
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\0" * (1024 * 1024 + 5 * 1024))
    assert file_size_mb(path) == 1.0


def test_file_extension() -> None:
    assert file_extension(Path("shot.PNG")) == ".PNG"
    assert file_extension(Path("noext")) == ""


def test_relative_posix(tmp_path: Path) -> None:
    nested = tmp_path / "wallpapers" / "aurora" / "aurora_1920x1080.zip"
    assert relative_posix(nested, tmp_path) == "wallpapers/aurora/aurora_1920x1080.zip"
