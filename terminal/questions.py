"""The ordered questions asked before every publish.

Each question carries its own parser, which normalizes the raw answer and
raises ValidationError when it is unacceptable. The session re-asks until
the parser accepts.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from core.exceptions import ValidationError
from models.config import PublisherConfig
from models.types import ItemType
from utilities.paths import clean_path_input, normalize_theme_id, split_tags

AnswerValue = object
AnswerMap = dict[str, AnswerValue]


class QuestionKind(Enum):
    """How a question is presented to the operator."""

    TEXT = auto()
    CHOICE = auto()
    CONFIRM = auto()


@dataclass
class Question:
    """One prompt in the publishing questionnaire.

    Attributes:
        name: Key the parsed answer is stored under.
        message: Prompt text.
        kind: Presentation of the prompt.
        default: Value offered when the operator just presses Enter.
        choices: Allowed values for CHOICE questions.
        parse: Turns the raw answer into the stored value; raises
            ValidationError to reject it.
        when: Predicate over earlier answers; the question is skipped when
            it returns False.
    """

    name: str
    message: str
    kind: QuestionKind = QuestionKind.TEXT
    default: str | bool | None = None
    choices: list[str] = field(default_factory=lambda: [])
    parse: Callable[[str], AnswerValue] = str
    when: Callable[[AnswerMap], bool] | None = None

    def applies(self, answers: AnswerMap) -> bool:
        """Check whether this question should be asked given earlier answers."""
        return self.when is None or self.when(answers)


def parse_item_type(raw: str) -> ItemType:
    try:
        return ItemType(raw.strip())
    except ValueError as e:
        choices = ", ".join(t.value for t in ItemType)
        raise ValidationError(f"Choose one of: {choices}.") from e


def parse_theme_id(raw: str) -> str:
    theme_id = normalize_theme_id(raw)
    if not theme_id:
        raise ValidationError("Theme ID cannot be empty.")
    return theme_id


def required(label: str) -> Callable[[str], str]:
    """Build a parser that rejects blank answers."""

    def parse(raw: str) -> str:
        value = raw.strip()
        if not value:
            raise ValidationError(f"{label} cannot be empty.")
        return value

    return parse


def parse_optional(raw: str) -> str:
    return raw.strip()


def parse_existing_file(raw: str) -> Path:
    """Clean a dropped path and require it to be an existing file."""
    cleaned = clean_path_input(raw)
    path = Path(cleaned)
    if not cleaned or not path.is_file():
        raise ValidationError(f"File does not exist: {path}")
    return path


def parse_existing_dir(raw: str) -> Path:
    """Clean a dropped path and require it to be an existing directory."""
    cleaned = clean_path_input(raw)
    path = Path(cleaned)
    if not cleaned or not path.exists():
        raise ValidationError(f"Folder does not exist: {path}")
    if not path.is_dir():
        raise ValidationError(f"Path is not a directory: {path}")
    return path


def is_clock(answers: AnswerMap) -> bool:
    return answers.get("item_type") == ItemType.CLOCK


def build_questions(config: PublisherConfig) -> list[Question]:
    """Build the questionnaire in the order it is asked.

    Args:
        config: Supplies the default description and author.

    Returns:
        Ordered list of questions.
    """
    return [
        Question(
            name="item_type",
            message="What are you publishing?",
            kind=QuestionKind.CHOICE,
            choices=[t.value for t in ItemType],
            default=ItemType.WALLPAPER.value,
            parse=parse_item_type,
        ),
        Question(
            name="theme_id",
            message="Enter a unique Theme ID (e.g., aurora-blast)",
            parse=parse_theme_id,
        ),
        Question(
            name="name",
            message="Enter the display name (e.g., Aurora Blast)",
            parse=required("Display name"),
        ),
        Question(
            name="description",
            message="Enter a short description",
            default=config.default_description,
            parse=parse_optional,
        ),
        Question(
            name="author",
            message="Enter the author's name",
            default=config.default_author,
            parse=parse_optional,
        ),
        Question(
            name="tags",
            message="Enter tags (comma-separated)",
            default="",
            parse=split_tags,
        ),
        Question(
            name="preview_image",
            message="Drag and drop the preview image file here, then press Enter",
            parse=parse_existing_file,
        ),
        Question(
            name="resolution",
            message="Enter the Resolution (e.g., 1920x1080) or Clock Variant (e.g., Default)",
            parse=required("Resolution or variant"),
        ),
        Question(
            name="source_folder",
            message="Drag and drop the theme's SOURCE FOLDER here, then press Enter",
            parse=parse_existing_dir,
        ),
        Question(
            name="is_customizable",
            message="Is this a customizable Clock theme?",
            kind=QuestionKind.CONFIRM,
            default=False,
            when=is_clock,
        ),
    ]
