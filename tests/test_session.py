"""Tests for the interactive questionnaire."""

from __future__ import annotations

from pathlib import Path

import pytest

from models.answers import BaseAnswers, ClockAnswers, WallpaperAnswers
from models.config import PublisherConfig
from models.types import ItemType
from terminal.questions import build_questions
from terminal.session import InteractiveSession
from tests.helpers import ScriptedPrompter, wallpaper_answers


def test_wallpaper_answers_are_normalized(
    config: PublisherConfig, preview_image: Path, theme_source: Path
) -> None:
    prompter = ScriptedPrompter(wallpaper_answers(preview_image, theme_source))

    answers = InteractiveSession(prompter, build_questions(config)).collect()

    assert isinstance(answers, WallpaperAnswers)
    assert answers.item_type is ItemType.WALLPAPER
    assert answers.theme_id == "aurora-blast"
    assert answers.description == "A beautiful new theme."
    assert answers.author == "Theme Team"
    assert answers.tags == ["space", "aurora"]
    assert answers.preview_image == preview_image
    assert answers.source_folder == theme_source
    assert not prompter.responses


def test_invalid_answers_are_asked_again(
    config: PublisherConfig, preview_image: Path, theme_source: Path, tmp_path: Path
) -> None:
    prompter = ScriptedPrompter([
        "Wallpaper",
        "!!!",
        "Aurora",
        "   ",
        "Aurora",
        None,
        None,
        "",
        str(tmp_path / "missing.png"),
        f"'{preview_image}'",
        "",
        "1920x1080",
        str(preview_image),
        f'"{theme_source}"',
    ])

    answers = InteractiveSession(prompter, build_questions(config)).collect()

    assert prompter.rejections == [
        "Theme ID cannot be empty.",
        "Display name cannot be empty.",
        f"File does not exist: {tmp_path / 'missing.png'}",
        "Resolution or variant cannot be empty.",
        f"Path is not a directory: {preview_image}",
    ]
    assert answers.theme_id == "aurora"
    assert answers.tags == []
    assert answers.preview_image == preview_image
    assert answers.source_folder == theme_source


def test_customizable_question_only_for_clocks(
    config: PublisherConfig, preview_image: Path, theme_source: Path
) -> None:
    wallpaper_prompter = ScriptedPrompter(wallpaper_answers(preview_image, theme_source))
    InteractiveSession(wallpaper_prompter, build_questions(config)).collect()
    assert not any("customizable" in q for q in wallpaper_prompter.asked)

    clock_script = wallpaper_answers(preview_image, theme_source, resolution="Default")
    clock_script[0] = "Clock"
    clock_prompter = ScriptedPrompter([*clock_script, True])

    answers = InteractiveSession(clock_prompter, build_questions(config)).collect()

    assert isinstance(answers, ClockAnswers)
    assert answers.is_customizable is True
    assert answers.item_type is ItemType.CLOCK
    assert "customizable" in clock_prompter.asked[-1]


def test_question_defaults_come_from_config(config: PublisherConfig) -> None:
    config.default_author = "Night Owl"
    questions = {q.name: q for q in build_questions(config)}

    assert questions["author"].default == "Night Owl"
    assert questions["item_type"].default == "Wallpaper"
    assert questions["is_customizable"].default is False


def test_base_answers_cannot_be_built_without_item_type(tmp_path: Path) -> None:
    with pytest.raises(TypeError, match="abstract"):
        BaseAnswers(  # type: ignore[abstract]
            theme_id="aurora",
            name="Aurora",
            description="d",
            author="a",
            tags=[],
            preview_image=tmp_path / "shot.png",
            resolution="1920x1080",
            source_folder=tmp_path,
        )
