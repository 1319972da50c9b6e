"""Configuration data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

from models.types import (
    DEFAULT_IGNORE_ENTRIES,
    ITEM_LAYOUTS,
    RAW_GITHUB_URL_TEMPLATE,
    ItemLayout,
    ItemType,
)

DEFAULT_BRANCH = "main"
DEFAULT_REMOTE = "origin"
DEFAULT_DESCRIPTION = "A beautiful new theme."
DEFAULT_AUTHOR = "Theme Team"


@dataclass
class PublisherConfig:
    """Repository identity and publishing defaults.

    Built once at startup and passed to every component that needs it.
    """

    github_username: str
    github_repo: str
    repo_root: Path
    branch: str = DEFAULT_BRANCH
    remote: str = DEFAULT_REMOTE
    base_url_override: str | None = None
    ignore_entries: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_ENTRIES))
    default_description: str = DEFAULT_DESCRIPTION
    default_author: str = DEFAULT_AUTHOR

    @property
    def base_url(self) -> str:
        """Remote base URL that repository-relative paths are appended to."""
        if self.base_url_override:
            url = self.base_url_override
        else:
            url = RAW_GITHUB_URL_TEMPLATE.format(
                username=self.github_username,
                repo=self.github_repo,
                branch=self.branch,
            )
        return url if url.endswith("/") else url + "/"

    def layout_for(self, item_type: ItemType) -> ItemLayout:
        """Get the repository layout for an item type."""
        return ITEM_LAYOUTS[item_type]

    def catalog_path(self, item_type: ItemType) -> Path:
        """Absolute path of the catalog file for an item type."""
        return self.repo_root / self.layout_for(item_type).catalog_file

    def archive_dir(self, item_type: ItemType, theme_id: str) -> Path:
        """Directory holding every archive of one theme."""
        return self.repo_root / self.layout_for(item_type).archive_dir / theme_id

    def preview_dir(self, item_type: ItemType) -> Path:
        """Flat directory holding preview images for an item type."""
        return self.repo_root / self.layout_for(item_type).preview_dir

    @classmethod
    def from_dict(
        cls,
        data: dict[str, object],
        repo_root: Path | None = None,
    ) -> PublisherConfig:
        """Create PublisherConfig from dictionary (loaded from JSON).

        Args:
            data: Configuration dictionary from JSON.
            repo_root: Optional override for the repository root. Takes
                precedence over the 'repo_root' key.

        Returns:
            PublisherConfig instance.
        """
        if repo_root is None:
            root_raw = data.get("repo_root")
            repo_root = Path(cast(str, root_raw)) if root_raw else Path.cwd()

        base_url_raw = data.get("base_url")

        return cls(
            github_username=cast(str, data["github_username"]),
            github_repo=cast(str, data["github_repo"]),
            repo_root=repo_root.expanduser().resolve(),
            branch=cast(str, data.get("branch", DEFAULT_BRANCH)),
            remote=cast(str, data.get("remote", DEFAULT_REMOTE)),
            base_url_override=cast(str, base_url_raw) if base_url_raw else None,
            ignore_entries=list(
                cast(list[str], data.get("ignore_entries", DEFAULT_IGNORE_ENTRIES))
            ),
            default_description=cast(
                str, data.get("default_description", DEFAULT_DESCRIPTION)
            ),
            default_author=cast(str, data.get("default_author", DEFAULT_AUTHOR)),
        )
