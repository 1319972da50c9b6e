"""Catalog loading, merging and writing.

A catalog is a JSON object with a single recognized top-level array
(``themes`` or ``clockThemes``) of theme entries. Publishing a theme either
inserts a new entry or updates an existing one in place, and does the same
for the resolution/variant entry inside it. Entries are never removed.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import cast

from core.exceptions import CatalogParseError, FileReadError, FileWriteError
from models.answers import ClockAnswers, PublishAnswers
from models.types import ResolutionEntry, ThemeEntry
from utilities.logging_utils import log_exception, safe_log

Catalog = dict[str, object]


class ThemeEvent(Enum):
    """What happened to the theme entry during a merge."""

    NEW_THEME = "new theme"
    METADATA_UPDATED = "metadata updated"


class ResolutionEvent(Enum):
    """What happened to the resolution entry during a merge."""

    NEW_RESOLUTION = "new resolution"
    UPDATED_RESOLUTION = "updated resolution"


@dataclass
class MergeResult:
    """Outcome of merging one publish into a catalog."""

    theme_event: ThemeEvent
    resolution_event: ResolutionEvent
    theme: ThemeEntry
    resolution: ResolutionEntry

    @property
    def version(self) -> int:
        return self.resolution["version"]


class CatalogStore:
    """Reads, merges and rewrites one catalog file.

    Attributes:
        path: Location of the catalog JSON file.
        key: Name of the top-level array holding theme entries.
        recovered_error: Parse error that was swallowed by the last load(),
            if the file existed but was unusable.
    """

    def __init__(self, path: Path, key: str) -> None:
        """Initialize CatalogStore.

        Args:
            path: Location of the catalog JSON file.
            key: Name of the top-level array holding theme entries.
        """
        self.path = path
        self.key = key
        self.recovered_error: CatalogParseError | None = None

    def empty(self) -> Catalog:
        """Create a catalog holding no entries."""
        return {self.key: []}

    def exists(self) -> bool:
        """Check if the catalog file exists."""
        return self.path.exists()

    def read(self) -> Catalog:
        """Read the catalog strictly.

        Returns:
            The parsed catalog, or an empty one when the file is absent.

        Raises:
            CatalogParseError: If the file is not a JSON object, or its
                entry collection is not an array.
            FileReadError: If the file exists but cannot be read.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data: object = json.load(f)
        except FileNotFoundError:
            return self.empty()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogParseError(str(self.path), str(e)) from e
        except OSError as e:
            raise FileReadError(str(self.path), str(e)) from e

        if not isinstance(data, dict):
            raise CatalogParseError(str(self.path), "expected object at root")

        catalog = cast(Catalog, data)
        entries = catalog.setdefault(self.key, [])
        if not isinstance(entries, list):
            raise CatalogParseError(str(self.path), f"'{self.key}' must be a list")
        return catalog

    def load(self) -> Catalog:
        """Read the catalog, starting over with an empty one if it is unparseable.

        Whatever was in an unparseable file is lost on the next save(); the
        swallowed error is kept in recovered_error so callers can warn.

        Raises:
            FileReadError: If the file exists but cannot be read.
        """
        self.recovered_error = None
        try:
            return self.read()
        except CatalogParseError as e:
            log_exception(e, "Catalog unparseable, starting a new one", level="WARNING")
            self.recovered_error = e
            return self.empty()

    def entries(self, catalog: Catalog) -> list[ThemeEntry]:
        """The theme entries of a catalog, creating the collection if missing."""
        return cast(list[ThemeEntry], catalog.setdefault(self.key, []))

    def find_theme(self, catalog: Catalog, theme_id: str) -> ThemeEntry | None:
        """Find the first theme entry whose id matches exactly."""
        for entry in self.entries(catalog):
            if isinstance(entry, dict) and entry.get("id") == theme_id:
                return entry
        return None

    @staticmethod
    def find_resolution(theme: ThemeEntry, label: str) -> ResolutionEntry | None:
        """Find the resolution entry whose label matches exactly."""
        for entry in theme.get("resolutions", []):
            if isinstance(entry, dict) and entry.get("resolution") == label:
                return entry
        return None

    def merge(
        self,
        catalog: Catalog,
        answers: PublishAnswers,
        preview_url: str,
        download_url: str,
        size_mb: float,
    ) -> MergeResult:
        """Insert or update the theme and resolution entries for one publish.

        Theme entries are matched on id and resolution entries on their
        label, both by exact string equality. New entries are appended.
        An existing resolution gets its version bumped by one (a missing
        version counts as 0) and its URL and size overwritten.

        Args:
            catalog: Catalog to modify in place.
            answers: Validated answers of this publish.
            preview_url: Public URL of the copied preview image.
            download_url: Public URL of the archive.
            size_mb: Archive size in megabytes.

        Returns:
            MergeResult describing the changes.
        """
        theme = self.find_theme(catalog, answers.theme_id)

        if theme is None:
            theme = {
                "id": answers.theme_id,
                "name": answers.name,
                "description": answers.description,
                "author": answers.author,
                "tags": list(answers.tags),
                "previewUrl": preview_url,
                "resolutions": [],
            }
            self.entries(catalog).append(theme)
            theme_event = ThemeEvent.NEW_THEME
        else:
            theme["name"] = answers.name
            theme["description"] = answers.description
            theme["author"] = answers.author
            theme["tags"] = list(answers.tags)
            theme["previewUrl"] = preview_url
            theme_event = ThemeEvent.METADATA_UPDATED

        if isinstance(answers, ClockAnswers):
            theme["isCustomizable"] = answers.is_customizable

        if not isinstance(theme.get("resolutions"), list):
            theme["resolutions"] = []

        resolution = self.find_resolution(theme, answers.resolution)

        if resolution is None:
            resolution = {
                "resolution": answers.resolution,
                "downloadUrl": download_url,
                "version": 1,
                "sizeMB": size_mb,
            }
            theme["resolutions"].append(resolution)
            resolution_event = ResolutionEvent.NEW_RESOLUTION
        else:
            resolution["version"] = int(resolution.get("version") or 0) + 1
            resolution["downloadUrl"] = download_url
            resolution["sizeMB"] = size_mb
            resolution_event = ResolutionEvent.UPDATED_RESOLUTION

        safe_log(
            f"Merged {answers.theme_id}/{answers.resolution}: "
            f"{theme_event.value}, {resolution_event.value}, "
            f"v{resolution['version']}\n",
            level="INFO",
        )

        return MergeResult(
            theme_event=theme_event,
            resolution_event=resolution_event,
            theme=theme,
            resolution=resolution,
        )

    def save(self, catalog: Catalog) -> None:
        """Rewrite the whole catalog file.

        The document is written to a temporary file next to the catalog and
        then moved over it, so an interrupted write never truncates it.

        Raises:
            FileWriteError: If the file cannot be written.
        """
        text = json.dumps(catalog, indent=2, ensure_ascii=False) + "\n"
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(text)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise FileWriteError(str(self.path), str(e)) from e

        safe_log(f"Catalog written: {self.path}\n", level="INFO")

    def _file_mode(self) -> int:
        """Permission bits for the rewritten file.

        An existing catalog keeps its mode; a new one gets the usual 0o666
        minus the process umask instead of the temporary file's 0o600.
        """
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
