"""Tests for the styled terminal building blocks."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from terminal.components import Panels, StatusIndicators, StepLine
from terminal.theme import theme


def render(console: Console, renderable: object) -> str:
    console.print(renderable)
    return console.file.getvalue()  # type: ignore[attr-defined]


def test_summary_panel_has_title_and_content(console: Console) -> None:
    panel = Panels.summary(Text("Wallpaper 'aurora' - 1920x1080"), "Starting Publishing Process")

    out = render(console, panel)

    assert panel.border_style == theme.colors.BORDER_SUCCESS
    assert panel.subtitle is None
    assert "Starting Publishing Process" in out
    assert "Wallpaper 'aurora' - 1920x1080" in out


def test_info_panel_uses_primary_border() -> None:
    assert Panels.info(Text("x"), "Theme Publisher").border_style == theme.colors.BORDER_PRIMARY


def test_step_line_and_detail() -> None:
    header = StepLine.render(2, 4, "Copying preview image...")
    detail = StepLine.detail(StatusIndicators.success("Preview copied."))

    assert header.plain == "[2/4] Copying preview image..."
    assert detail.plain == f"      {theme.symbols.CHECK} Preview copied."


def test_catalog_indicators_use_their_symbols() -> None:
    assert StatusIndicators.new("Theme added").plain.startswith(theme.symbols.NEW)
    assert StatusIndicators.updated("Version bumped").plain.startswith(theme.symbols.UPDATED)
