"""Handler for the publish operation.

Drives the fixed publishing sequence:

    check repository -> (pull) -> collect answers -> build archive ->
    copy preview -> merge catalog -> write catalog -> commit and push ->
    restore stash (always, when something was stashed)

Nothing already written is rolled back when a later step fails.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from rich.console import Console
from rich.text import Text

from core.catalog import CatalogStore, ResolutionEvent, ThemeEvent
from core.component_factory import CoreComponents
from core.exceptions import (
    CommandError,
    FileReadError,
    FileWriteError,
    PublishAborted,
)
from core.operation_results import PublishOutcome, PublishStep, PublishSummary
from handlers.base_handler import BaseHandler
from models.answers import PublishAnswers
from models.config import PublisherConfig
from models.types import ARCHIVE_EXTENSION, IGNORE_COMMIT_MESSAGE, IGNORE_FILENAME
from terminal.components import Panels, StatusIndicators, StepLine
from terminal.theme import theme
from utilities.logging_utils import log_exception, safe_log
from utilities.paths import file_extension, relative_posix, sanitize_label

TOTAL_STEPS = 4


def format_commit_message(answers: PublishAnswers, version: int) -> str:
    """Commit message recording what was published."""
    return (
        f"Publish {answers.item_type.value}: {answers.name} - "
        f"{answers.resolution} (v{version})"
    )


def archive_filename(answers: PublishAnswers) -> str:
    """Archive name for one (theme id, resolution label) pair."""
    return f"{answers.theme_id}_{sanitize_label(answers.resolution)}{ARCHIVE_EXTENSION}"


def preview_filename(answers: PublishAnswers) -> str:
    """Preview name, keeping the original image extension."""
    return f"{answers.theme_id}_preview{file_extension(answers.preview_image)}"


class PublishHandler(BaseHandler):
    """Runs one publish from repository checks to push."""

    def __init__(self, config: PublisherConfig, components: CoreComponents) -> None:
        """Initialize PublishHandler.

        Args:
            config: Repository identity and layout.
            components: Configured collaborators.
        """
        self.config = config
        self.components = components
        self.git = components.git
        self.prompter = components.prompter
        self.console: Console = components.console

    def execute(self) -> PublishSummary:
        """Run the whole sequence.

        Errors are caught here once, recorded on the summary and logged;
        the stash is restored afterwards whatever happened.

        Returns:
            PublishSummary describing the run.
        """
        summary = PublishSummary()
        self.console.print(Panels.info(
            Text("Package a theme, update the catalog and push it.", style=theme.colors.TEXT_MUTED),
            "Theme Publisher",
        ))

        try:
            summary.step = PublishStep.CHECK_REPO_STATUS
            self.prepare_repository(summary)

            if self.prompter.confirm(
                "Pull the latest changes from the remote first? (Recommended)",
                default=True,
            ):
                summary.step = PublishStep.PULL
                self.console.print(
                    f"\n[{theme.colors.PRIMARY}]Pulling latest changes from "
                    f"{self.git.remote}/{self.git.branch}...[/{theme.colors.PRIMARY}]"
                )
                self.git.pull()
                self.console.print(StatusIndicators.success("Pull complete."))

            summary.step = PublishStep.COLLECT_ANSWERS
            answers = self.components.session.collect()
            summary.answers = answers
            safe_log(f"Answers: {answers}\n", level="INFO")

            self.publish(answers, summary)
            summary.outcome = PublishOutcome.COMPLETED
        except PublishAborted as e:
            summary.outcome = PublishOutcome.ABORTED
            summary.error = e
            safe_log(f"Publishing aborted at {summary.step.value}\n", level="WARNING")
        except Exception as e:
            summary.outcome = PublishOutcome.FAILED
            summary.error = e
            log_exception(
                e,
                f"Publishing failed at {summary.step.value}",
                level="ERROR",
                with_traceback=True,
            )
        finally:
            if summary.stashed:
                self.restore_stash(summary)

        return summary

    # -- pre-publish -------------------------------------------------------

    def prepare_repository(self, summary: PublishSummary) -> None:
        """Make sure the working tree is safe to publish from.

        Raises:
            PublishAborted: If the tree is dirty and the operator won't stash.
            CommandError: If a git command fails.
        """
        self.console.print(
            f"[{theme.colors.PRIMARY}]Checking repository status...[/{theme.colors.PRIMARY}]"
        )
        self.ensure_ignore_file()

        # A freshly created ignore file goes in on its own so it doesn't count as dirt
        if self.git.is_untracked(IGNORE_FILENAME):
            self.console.print(
                f"[{theme.colors.PRIMARY}]Adding new {IGNORE_FILENAME} to version control..."
                f"[/{theme.colors.PRIMARY}]"
            )
            self.git.add(IGNORE_FILENAME)
            self.git.commit(IGNORE_COMMIT_MESSAGE)
            summary.ignore_file_committed = True
            self.console.print(StatusIndicators.success(f"Committed {IGNORE_FILENAME}."))

        status = self.git.status()
        if not status:
            self.console.print(StatusIndicators.success("Repository is clean."))
            return

        self.console.print()
        self.console.print(StatusIndicators.warning("Your repository has other uncommitted changes:"))
        self.console.print(Text(status, style=theme.colors.TEXT_DIM))

        if not self.prompter.confirm(
            "Do you want to temporarily stash these changes to proceed?",
            default=True,
        ):
            self.console.print(StatusIndicators.error(
                "Publishing cancelled. Please commit or stash your changes manually."
            ))
            raise PublishAborted()

        self.console.print(f"[{theme.colors.PRIMARY}]Stashing changes...[/{theme.colors.PRIMARY}]")
        self.git.stash()
        summary.stashed = True

    def ensure_ignore_file(self) -> None:
        """Offer to create the ignore file when the repository has none."""
        ignore_path = self.config.repo_root / IGNORE_FILENAME
        if ignore_path.exists():
            return

        entries = ", ".join(self.config.ignore_entries)
        if not self.prompter.confirm(
            f"{IGNORE_FILENAME} file not found. It's recommended to create one "
            f"to ignore {entries}. Create it now?",
            default=True,
        ):
            return

        try:
            ignore_path.write_text(
                "".join(f"{entry}\n" for entry in self.config.ignore_entries),
                encoding="utf-8",
            )
        except OSError as e:
            raise FileWriteError(str(ignore_path), str(e)) from e
        self.console.print(StatusIndicators.success(f"{IGNORE_FILENAME} created and configured."))

    # -- publishing --------------------------------------------------------

    def publish(self, answers: PublishAnswers, summary: PublishSummary) -> None:
        """Build, copy, catalog and push one theme/resolution."""
        self.console.print()
        self.console.print(Panels.summary(
            Text(
                f"{answers.item_type.value} '{answers.theme_id}' - {answers.resolution}",
                style=theme.styles.BOLD,
            ),
            "Starting Publishing Process",
        ))

        download_url, size_mb = self.build_archive(answers, summary)
        preview_url = self.copy_preview(answers, summary)
        version = self.update_catalog(answers, summary, preview_url, download_url, size_mb)
        self.commit_and_push(answers, summary, version)

        self.console.print()
        self.console.print(StatusIndicators.success("PUBLISHING COMPLETE!"))

    def build_archive(self, answers: PublishAnswers, summary: PublishSummary) -> tuple[str, float]:
        summary.step = PublishStep.BUILD_ARCHIVE
        archive_path = self.config.archive_dir(answers.item_type, answers.theme_id) / archive_filename(answers)

        self.console.print(StepLine.render(1, TOTAL_STEPS, f"Zipping folder: {answers.source_folder}"))
        size_mb = self.components.archive_builder.build(answers.source_folder, archive_path)

        summary.archive_path = archive_path
        summary.size_mb = size_mb
        download_url = self.public_url(archive_path)
        summary.download_url = download_url
        self.console.print(StepLine.detail(StatusIndicators.success(
            f"Zip created at: {relative_posix(archive_path, self.config.repo_root)} ({size_mb} MB)"
        )))
        return download_url, size_mb

    def copy_preview(self, answers: PublishAnswers, summary: PublishSummary) -> str:
        summary.step = PublishStep.COPY_PREVIEW
        preview_dir = self.config.preview_dir(answers.item_type)
        preview_path = preview_dir / preview_filename(answers)

        self.console.print()
        self.console.print(StepLine.render(2, TOTAL_STEPS, "Copying preview image..."))
        copy_file(answers.preview_image, preview_path)

        summary.preview_path = preview_path
        preview_url = self.public_url(preview_path)
        summary.preview_url = preview_url
        self.console.print(StepLine.detail(StatusIndicators.success(
            f"Preview saved to: {relative_posix(preview_path, self.config.repo_root)}"
        )))
        return preview_url

    def update_catalog(
        self,
        answers: PublishAnswers,
        summary: PublishSummary,
        preview_url: str,
        download_url: str,
        size_mb: float,
    ) -> int:
        summary.step = PublishStep.MERGE_CATALOG
        layout = self.config.layout_for(answers.item_type)
        store = CatalogStore(self.config.catalog_path(answers.item_type), layout.catalog_key)

        self.console.print()
        self.console.print(StepLine.render(3, TOTAL_STEPS, f"Updating catalog file: {layout.catalog_file}"))

        existed = store.exists()
        catalog = store.load()
        if store.recovered_error is not None:
            warning = (
                f"{layout.catalog_file} is not valid ({store.recovered_error.details}); "
                "a new catalog will be created."
            )
            summary.warnings.append(warning)
            self.console.print(StepLine.detail(StatusIndicators.warning(warning)))
        elif not existed:
            self.console.print(StepLine.detail(StatusIndicators.warning(
                "Catalog file not found. A new one will be created."
            )))

        merge = store.merge(
            catalog,
            answers,
            preview_url=preview_url,
            download_url=download_url,
            size_mb=size_mb,
        )
        summary.merge = merge

        kind = answers.item_type.value.lower()
        if merge.theme_event is ThemeEvent.NEW_THEME:
            self.console.print(StepLine.detail(StatusIndicators.new(
                f"New {kind} '{answers.theme_id}' added to catalog."
            )))
        else:
            self.console.print(StepLine.detail(StatusIndicators.updated(
                f"Updating metadata for existing {kind} '{answers.theme_id}'."
            )))
        if merge.resolution_event is ResolutionEvent.NEW_RESOLUTION:
            self.console.print(StepLine.detail(StatusIndicators.new(
                f"New resolution/variant '{answers.resolution}' added."
            )))
        else:
            self.console.print(StepLine.detail(StatusIndicators.updated(
                f"Updated resolution/variant '{answers.resolution}' to version {merge.version}."
            )))

        summary.step = PublishStep.WRITE_CATALOG
        store.save(catalog)
        self.console.print(StepLine.detail(StatusIndicators.success("Catalog file successfully written.")))
        return merge.version

    def commit_and_push(self, answers: PublishAnswers, summary: PublishSummary, version: int) -> None:
        summary.step = PublishStep.COMMIT_AND_PUSH

        self.console.print()
        self.console.print(StepLine.render(4, TOTAL_STEPS, "Committing and pushing..."))
        self.git.add()

        message = format_commit_message(answers, version)
        self.git.commit(message)
        summary.commit_message = message
        self.console.print(StepLine.detail(StatusIndicators.success(
            f'Changes committed with message: "{message}"'
        )))

        self.console.print(StepLine.detail(StatusIndicators.info(
            f"Pushing to {self.git.remote}/{self.git.branch}..."
        )))
        self.git.push()

    # -- cleanup -----------------------------------------------------------

    def restore_stash(self, summary: PublishSummary) -> None:
        """Pop the stash taken before publishing; failure is only a warning."""
        # A failed run keeps the step it failed at
        if summary.outcome is not PublishOutcome.FAILED:
            summary.step = PublishStep.RESTORE_STASH
        self.console.print()
        self.console.print(
            f"[{theme.colors.PRIMARY}]Restoring your previously stashed changes..."
            f"[/{theme.colors.PRIMARY}]"
        )
        try:
            self.git.stash_pop()
        except CommandError as e:
            summary.stash_restored = False
            log_exception(e, "Stash restore failed", level="WARNING")
            warning = (
                "Could not automatically restore stash. A merge conflict may have occurred. "
                "Please run `git stash pop` manually to resolve it."
            )
            summary.warnings.append(warning)
            self.console.print(StatusIndicators.warning(warning))
            return

        summary.stash_restored = True
        self.console.print(StatusIndicators.success("Stash restored successfully."))

    def public_url(self, path: Path) -> str:
        """Remote URL of a file inside the repository."""
        return self.config.base_url + relative_posix(path, self.config.repo_root)


def copy_file(source: Path, destination: Path) -> None:
    """Copy a file, creating the destination directory first.

    Raises:
        FileReadError: If the source cannot be read.
        FileWriteError: If the destination cannot be written.
    """
    if not source.is_file():
        raise FileReadError(str(source), "File does not exist")
    if destination.exists() and source.resolve() == destination.resolve():
        return
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
    except PermissionError as e:
        if e.filename is not None and Path(e.filename) == source:
            raise FileReadError(str(source), str(e)) from e
        raise FileWriteError(str(destination), str(e)) from e
    except OSError as e:
        raise FileWriteError(str(destination), str(e)) from e


def handle_publish(
    config: PublisherConfig,
    components: CoreComponents,
) -> PublishSummary:
    """Run a publish with configured components.

    Args:
        config: Repository identity and layout.
        components: Configured collaborators.

    Returns:
        Results of the publish operation.
    """
    safe_log(f"Publishing from {config.repo_root} to {config.base_url}\n", level="INFO")
    return PublishHandler(config, components).execute()
