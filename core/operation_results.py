"""Result and summary objects for the publish operation.

The publish handler fills a PublishSummary as it goes and returns it; the
ResultPrinter turns it into console output afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from core.catalog import MergeResult
from models.answers import PublishAnswers


class PublishOutcome(Enum):
    """Terminal state of a publish run."""

    COMPLETED = "completed"
    ABORTED = "aborted"
    FAILED = "failed"

    @property
    def exit_code(self) -> int:
        """Process exit status for this outcome."""
        return {
            PublishOutcome.COMPLETED: 0,
            PublishOutcome.ABORTED: 1,
            PublishOutcome.FAILED: 2,
        }[self]


class PublishStep(Enum):
    """States of the publishing sequence, in order."""

    CHECK_REPO_STATUS = "check repository status"
    PULL = "pull"
    COLLECT_ANSWERS = "collect answers"
    BUILD_ARCHIVE = "build archive"
    COPY_PREVIEW = "copy preview"
    MERGE_CATALOG = "merge catalog"
    WRITE_CATALOG = "write catalog"
    COMMIT_AND_PUSH = "commit and push"
    RESTORE_STASH = "restore stash"


@dataclass
class PublishSummary:
    """
    Everything that happened during one publish run.

    Fields stay None for steps that never ran.
    """

    outcome: PublishOutcome = PublishOutcome.FAILED
    step: PublishStep = PublishStep.CHECK_REPO_STATUS
    answers: PublishAnswers | None = None
    archive_path: Path | None = None
    size_mb: float | None = None
    preview_path: Path | None = None
    preview_url: str | None = None
    download_url: str | None = None
    merge: MergeResult | None = None
    commit_message: str | None = None
    ignore_file_committed: bool = False
    stashed: bool = False
    stash_restored: bool | None = None
    error: BaseException | None = None
    warnings: list[str] = field(default_factory=lambda: [])

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code

    def has_warnings(self) -> bool:
        """
        Check if there are any warnings.

        Returns:
            bool: True if warnings list is not empty
        """
        return len(self.warnings) > 0
