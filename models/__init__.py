"""Data models for the Theme Publisher."""

from models.answers import BaseAnswers, ClockAnswers, PublishAnswers, WallpaperAnswers
from models.config import PublisherConfig
from models.types import (
    ARCHIVE_EXTENSION,
    DEFAULT_IGNORE_ENTRIES,
    IGNORE_COMMIT_MESSAGE,
    IGNORE_FILENAME,
    ITEM_LAYOUTS,
    ItemLayout,
    ItemType,
    ResolutionEntry,
    ThemeEntry,
)

__all__ = [
    "ARCHIVE_EXTENSION",
    "BaseAnswers",
    "ClockAnswers",
    "DEFAULT_IGNORE_ENTRIES",
    "IGNORE_COMMIT_MESSAGE",
    "IGNORE_FILENAME",
    "ITEM_LAYOUTS",
    "ItemLayout",
    "ItemType",
    "PublishAnswers",
    "PublisherConfig",
    "ResolutionEntry",
    "ThemeEntry",
    "WallpaperAnswers",
]
