"""Validated operator answers for a single publish run."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from models.types import ItemType


@dataclass(frozen=True)
class BaseAnswers(ABC):
    """Answers shared by every item type.

    Values are already normalized and validated by the interactive session.
    """

    theme_id: str
    name: str
    description: str
    author: str
    tags: list[str]
    preview_image: Path
    resolution: str
    source_folder: Path

    @property
    @abstractmethod
    def item_type(self) -> ItemType: ...


@dataclass(frozen=True)
class WallpaperAnswers(BaseAnswers):
    """Answers for a wallpaper publish."""

    @property
    def item_type(self) -> ItemType:
        return ItemType.WALLPAPER


@dataclass(frozen=True)
class ClockAnswers(BaseAnswers):
    """Answers for a clock publish, which also carries the customizable flag."""

    is_customizable: bool = False

    @property
    def item_type(self) -> ItemType:
        return ItemType.CLOCK


PublishAnswers = Union[WallpaperAnswers, ClockAnswers]
