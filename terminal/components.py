"""Styled Rich building blocks for the publisher's step-by-step output."""

from __future__ import annotations

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text

from terminal.theme import theme


def _framed(content: RenderableType, title: str, border: str) -> Panel:
    return Panel(
        content,
        title=f"[{theme.styles.PANEL_TITLE_PRIMARY}]{title}",
        title_align=theme.panel.TITLE_ALIGN,
        border_style=border,
        padding=theme.panel.PADDING,
    )


def _marked(symbol: str, message: str, style: str) -> Text:
    return Text(f"{symbol} {message}", style=style)


class Panels:
    """The two framed blocks of a run: the opening banner and the publishing header."""

    @staticmethod
    def summary(content: RenderableType, title: str) -> Panel:
        """Frame the header printed once the answers are collected.

        Args:
            content: Item type, theme id and resolution line.
            title: Heading shown in the top border.

        Returns:
            Panel with the success border.
        """
        return _framed(content, title, theme.colors.BORDER_SUCCESS)

    @staticmethod
    def info(content: RenderableType, title: str) -> Panel:
        """Frame the banner shown before the repository checks."""
        return _framed(content, title, theme.colors.BORDER_PRIMARY)


class StatusIndicators:
    """One-line results printed under each step."""

    @staticmethod
    def success(message: str) -> Text:
        return _marked(theme.symbols.CHECK, message, theme.colors.SUCCESS)

    @staticmethod
    def error(message: str) -> Text:
        return _marked(theme.symbols.CROSS, message, theme.colors.ERROR)

    @staticmethod
    def warning(message: str) -> Text:
        return _marked(theme.symbols.WARNING, message, theme.colors.WARNING)

    @staticmethod
    def info(message: str) -> Text:
        return _marked(theme.symbols.INFO, message, theme.colors.INFO)

    @staticmethod
    def new(message: str) -> Text:
        """A catalog entry that did not exist before this run."""
        return _marked(theme.symbols.NEW, message, theme.colors.SUCCESS)

    @staticmethod
    def updated(message: str) -> Text:
        """A catalog entry replaced in place, e.g. a version bump."""
        return _marked(theme.symbols.UPDATED, message, theme.colors.SUCCESS)


class StepLine:
    """Numbered progress lines such as '[2/4] Copying preview image...'."""

    @staticmethod
    def render(step: int, total: int, message: str) -> Text:
        """Render a step header.

        Args:
            step: Current step number, starting at 1.
            total: Number of steps.
            message: What the step does.
        """
        text = Text(f"[{step}/{total}] ", style=theme.styles.STEP)
        text.append(message, style=theme.colors.PRIMARY)
        return text

    @staticmethod
    def detail(renderable: Text) -> Text:
        """Indent a status indicator under its step header."""
        return Text("      ") + renderable


def create_console() -> Console:
    """Console shared by prompts, step output and the final report."""
    return Console()
