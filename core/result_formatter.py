"""Formatter for publish results.

This module converts a PublishSummary into human-readable lines suitable
for console display. Formatters are independent of display concerns - they
return strings that describe how results should be displayed.
"""

from __future__ import annotations

from pathlib import Path

from core.catalog import ResolutionEvent, ThemeEvent
from core.operation_results import PublishOutcome, PublishSummary
from terminal.theme import theme
from utilities.paths import relative_posix


class ResultFormatter:
    """
    Formats publish results for display.

    All formatting logic is centralized here for consistency.
    """

    @staticmethod
    def format_publish_summary(summary: PublishSummary, repo_root: Path) -> list[str]:
        """
        Format the publish summary with two sections: Artifacts and Catalog.

        Args:
            summary: PublishSummary object with run results
            repo_root: Repository root, used to shorten paths

        Returns:
            List[str]: Formatted summary lines for display
        """
        lines: list[str] = []

        if summary.answers is not None:
            answers = summary.answers
            lines.append(
                f"{theme.symbols.BULLET} Item: {answers.item_type.value} "
                f"'{answers.theme_id}' ({answers.name})"
            )
            lines.append(f"{theme.symbols.BULLET} Resolution/Variant: {answers.resolution}")

        lines.append("")
        lines.append(f"{theme.symbols.SECTION_LINE} Artifacts {theme.symbols.SECTION_LINE}")
        if summary.archive_path is not None:
            lines.append(
                f"{theme.symbols.BULLET} Archive: {relative_posix(summary.archive_path, repo_root)} "
                f"({summary.size_mb} MB)"
            )
        if summary.preview_path is not None:
            lines.append(f"{theme.symbols.BULLET} Preview: {relative_posix(summary.preview_path, repo_root)}")
        if summary.download_url:
            lines.append(f"{theme.symbols.BULLET} Download URL: {summary.download_url}")
        if summary.preview_url:
            lines.append(f"{theme.symbols.BULLET} Preview URL: {summary.preview_url}")

        if summary.merge is not None:
            lines.append("")
            lines.append(f"{theme.symbols.SECTION_LINE} Catalog {theme.symbols.SECTION_LINE}")
            lines.append(
                f"{theme.symbols.BULLET} Theme: "
                f"{ResultFormatter.format_theme_event(summary.merge.theme_event)}"
            )
            lines.append(
                f"{theme.symbols.BULLET} Resolution: "
                f"{ResultFormatter.format_resolution_event(summary.merge.resolution_event)}"
            )
            lines.append(f"{theme.symbols.BULLET} Version: v{summary.merge.version}")

        if summary.commit_message:
            lines.append("")
            lines.append(f"{theme.symbols.SECTION_LINE} Git {theme.symbols.SECTION_LINE}")
            lines.append(f"{theme.symbols.BULLET} Commit: {summary.commit_message}")

        if summary.stashed:
            restored = "yes" if summary.stash_restored else "no (run `git stash pop`)"
            lines.append(f"{theme.symbols.BULLET} Stash restored: {restored}")

        return lines

    @staticmethod
    def format_theme_event(event: ThemeEvent) -> str:
        if event is ThemeEvent.NEW_THEME:
            return "added"
        return "metadata updated"

    @staticmethod
    def format_resolution_event(event: ResolutionEvent) -> str:
        if event is ResolutionEvent.NEW_RESOLUTION:
            return "added"
        return "updated"

    @staticmethod
    def format_summary_title(summary: PublishSummary) -> str:
        """
        Generate the summary panel title from the outcome.

        Args:
            summary: PublishSummary object

        Returns:
            str: Title string
        """
        if summary.outcome is PublishOutcome.COMPLETED:
            return "Publishing | Complete"
        if summary.outcome is PublishOutcome.ABORTED:
            return "Publishing | Cancelled"
        return "Publishing | Failed"

    @staticmethod
    def format_error(summary: PublishSummary) -> list[str]:
        """
        Format the failure of a run.

        Args:
            summary: PublishSummary object with an error set

        Returns:
            List[str]: Lines naming the failed step and the error
        """
        if summary.error is None:
            return []
        error = summary.error
        return [
            f"Step: {summary.step.value}",
            f"{type(error).__name__}: {error}",
        ]

    @staticmethod
    def format_warnings(warnings: list[str]) -> list[str]:
        return [f"{theme.symbols.BULLET} {warning}" for warning in warnings]

    @staticmethod
    def format_warnings_title(warning_count: int) -> str:
        return f"Warnings ({warning_count})"
