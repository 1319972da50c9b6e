"""Core type definitions for the Theme Publisher.

This module contains the shared enums, constants, and TypedDicts describing
the catalog documents and the fixed repository layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict


class ItemType(str, Enum):
    """Kind of theme being published."""

    WALLPAPER = "Wallpaper"
    CLOCK = "Clock"


# Archive extension for packaged theme folders
ARCHIVE_EXTENSION = ".zip"

# Base URL template for raw file access on GitHub
RAW_GITHUB_URL_TEMPLATE = "https://raw.githubusercontent.com/{username}/{repo}/{branch}/"

# Repository ignore file and the commit used when it is first added
IGNORE_FILENAME = ".gitignore"
IGNORE_COMMIT_MESSAGE = "chore: Add .gitignore for tools"
DEFAULT_IGNORE_ENTRIES = ["logs/", "__pycache__/", ".venv/"]


@dataclass(frozen=True)
class ItemLayout:
    """Where a given item type lives inside the content repository.

    All paths are relative to the repository root.
    """

    catalog_file: str
    catalog_key: str
    archive_dir: str
    preview_dir: str


ITEM_LAYOUTS: dict[ItemType, ItemLayout] = {
    ItemType.WALLPAPER: ItemLayout(
        catalog_file="update.json",
        catalog_key="themes",
        archive_dir="wallpapers",
        preview_dir="previews",
    ),
    ItemType.CLOCK: ItemLayout(
        catalog_file="updateClock.json",
        catalog_key="clockThemes",
        archive_dir="clocks",
        preview_dir="clock_previews",
    ),
}


class ResolutionEntry(TypedDict):
    """One published artifact of a theme."""

    resolution: str
    downloadUrl: str
    version: int
    sizeMB: float


class ThemeEntry(TypedDict, total=False):
    """Catalog record for one theme.

    ``isCustomizable`` is only present on clock themes.
    """

    id: str
    name: str
    description: str
    author: str
    tags: list[str]
    previewUrl: str
    resolutions: list[ResolutionEntry]
    isCustomizable: bool
