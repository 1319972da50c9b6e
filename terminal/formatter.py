"""Rich help screen for the publisher's argparse parser."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from io import StringIO

from rich.console import Console, Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .help_content import HelpContent, HelpSection, HelpStyles


def _heading(title: str, note: str = "") -> Text:
    text = Text("  ")
    text.append(title, style=HelpStyles.SECTION_HEADER)
    if note:
        text.append(f" {note}", style=HelpStyles.SECTION_DIM)
    return text


def _rows(rows: Iterable[tuple[str, str]], left_style: str) -> Padding:
    """Two aligned columns indented under a heading."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(no_wrap=True, style=left_style)
    grid.add_column()
    for left, right in rows:
        grid.add_row(left, right)
    return Padding(grid, (0, 0, 0, 4))


class HelpRenderer:
    """Builds the help screen from HelpContent."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def _section(self, section: HelpSection, left_style: str) -> list[RenderableType]:
        return [
            _heading(section.title, section.subtitle),
            _rows(((item.command, item.description) for item in section.items), left_style),
        ]

    def _examples(self) -> list[RenderableType]:
        lines: list[RenderableType] = [_heading("Examples")]
        for example in HelpContent.EXAMPLES:
            lines.append(Text(f"    {example.title}", style=HelpStyles.EXAMPLE_TITLE))
            lines.append(Text(f"      $ {example.command}", style=HelpStyles.EXAMPLE_COMMAND))
        return lines

    def render_all(self) -> str:
        """Print the whole help screen.

        Returns:
            Empty string; output already went to the console.
        """
        banner = Text(HelpContent.APP_TITLE, style=HelpStyles.TITLE)
        banner.append(f"\n{HelpContent.APP_DESCRIPTION}", style=HelpStyles.SUBTITLE)

        usage = Text("  ")
        usage.append("Usage: ", style=HelpStyles.USAGE_HEADER)
        usage.append(f"{HelpContent.USAGE_PROGRAM} ", style=HelpStyles.USAGE_PROGRAM)
        usage.append(HelpContent.USAGE_OPTIONS_PLACEHOLDER, style=HelpStyles.USAGE_OPTIONS)

        self.console.print()
        self.console.print(Panel(banner, border_style=HelpStyles.BORDER, padding=(1, 2)))
        self.console.print()
        self.console.print(Group(
            usage,
            Text(),
            *self._section(HelpContent.GENERAL_OPTIONS, HelpStyles.OPTION_COMMAND),
            Text(),
            *self._section(HelpContent.PUBLISH_STEPS, HelpStyles.STEP_COMMAND),
            Text(),
            *self._examples(),
            Text(),
            _heading("Notes"),
            _rows(HelpContent.NOTES, HelpStyles.NOTE_BULLET),
        ))
        self.console.print()
        return ""


class RichHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """argparse formatter that replaces the plain help with HelpRenderer output."""

    def _format_usage(
        self,
        usage: str | None,
        actions: Iterable[argparse.Action],
        groups: Iterable[object],
        prefix: str | None,
    ) -> str:
        return ""

    def format_help(self) -> str:
        output = StringIO()
        HelpRenderer(Console(file=output, legacy_windows=True)).render_all()
        return output.getvalue()
