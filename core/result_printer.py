"""Printer for publish results.

All console output for the final summary, errors and warnings flows
through here, ensuring a consistent visual style.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from core.operation_results import PublishOutcome, PublishSummary
from core.result_formatter import ResultFormatter


class ResultPrinter:
    """
    Printer for publish results.

    The publish handler prints step-by-step progress while it runs;
    ResultPrinter handles the FINAL result after the run ends.
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the result printer.

        Args:
            console: Optional Console instance. If not provided, creates one.
        """
        self.console = console or Console()

    def print_summary_panel(
        self,
        summary_lines: list[str],
        title: str,
        border_style: str = "cyan",
    ) -> None:
        """
        Print a summary panel.

        Args:
            summary_lines: Lines of summary content to display
            title: Panel title
            border_style: Border color (default: cyan)
        """
        content = escape("\n".join(summary_lines))
        self.console.print(Panel(
            content,
            title=f"[bold {border_style}]{title}",
            title_align="left",
            border_style=border_style,
            padding=(1, 2)
        ))

    def print_error_panel(
        self,
        lines: list[str],
        title: str = "Publishing Failed",
    ) -> None:
        """
        Print error panel with consistent formatting.

        Args:
            lines: Error description lines
            title: Panel title
        """
        if not lines:
            return

        self.console.print(Panel(
            escape("\n".join(lines)),
            title=f"[bold red]{title}",
            title_align="left",
            border_style="red",
            padding=(1, 2)
        ))

    def print_warnings_panel(
        self,
        warnings: list[str],
    ) -> None:
        """
        Print warnings panel.

        Args:
            warnings: List of warning messages
        """
        if not warnings:
            return

        warning_lines = ResultFormatter.format_warnings(warnings)
        content = escape("\n".join(warning_lines))
        title = ResultFormatter.format_warnings_title(len(warnings))

        self.console.print(Panel(
            content,
            title=f"[bold yellow]{title}",
            title_align="left",
            border_style="yellow",
            padding=(1, 2)
        ))

    def print_publish_summary(
        self,
        summary: PublishSummary,
        repo_root: Path,
    ) -> None:
        """
        Print the publish summary with proper formatting.

        Aborted runs only get the cancellation panel; failed runs get the
        summary of what did happen followed by the error.

        Args:
            summary: PublishSummary object with results
            repo_root: Repository root, used to shorten paths
        """
        self.console.print()

        if summary.outcome is PublishOutcome.ABORTED:
            self.print_summary_panel(
                [str(summary.error)] if summary.error else ["Publishing cancelled."],
                ResultFormatter.format_summary_title(summary),
                border_style="orange3",
            )
            return

        border = "cyan" if summary.outcome is PublishOutcome.COMPLETED else "red"
        summary_lines = ResultFormatter.format_publish_summary(summary, repo_root)
        self.print_summary_panel(
            summary_lines,
            ResultFormatter.format_summary_title(summary),
            border_style=border,
        )

        if summary.outcome is PublishOutcome.FAILED:
            self.print_error_panel(ResultFormatter.format_error(summary))

        if summary.has_warnings():
            self.print_warnings_panel(summary.warnings)
