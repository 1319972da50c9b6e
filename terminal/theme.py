"""Colors, styles and symbols for the publisher's terminal output.

Everything printed by the step lines, prompts and panels takes its look from
the single `theme` instance at the bottom of this module.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Literal

AlignMethod = Literal["left", "center", "right"]


@dataclass(frozen=True)
class ThemeColors:
    """Rich color names."""

    PRIMARY: str = "bright_blue"

    # Step results
    SUCCESS: str = "green"
    WARNING: str = "orange3"
    ERROR: str = "red"
    INFO: str = "bright_cyan"

    # git status echo and banner text
    TEXT_DIM: str = "dim"
    TEXT_MUTED: str = "grey70"

    BORDER_PRIMARY: str = "bright_blue"
    BORDER_SUCCESS: str = "cyan"


@dataclass(frozen=True)
class ThemeStyles:
    STEP: str = "bold bright_blue"
    PANEL_TITLE_PRIMARY: str = "bold cyan"
    BOLD: str = "bold"
    PROMPT: str = "bold cyan"


@dataclass(frozen=True)
class ThemeSymbols:
    """Markers in front of step results and report lines."""

    CHECK: str = "✓"
    CROSS: str = "✗"
    BULLET: str = "•"
    WARNING: str = "!"
    INFO: str = "i"
    NEW: str = "✦"
    UPDATED: str = "↻"
    SECTION_LINE: str = "──"


@dataclass(frozen=True)
class AsciiSymbols(ThemeSymbols):
    """Plain fallbacks for legacy Windows consoles."""

    CHECK: str = "[v]"
    CROSS: str = "[x]"
    BULLET: str = "*"
    WARNING: str = "[!]"
    INFO: str = "[i]"
    NEW: str = "*"
    UPDATED: str = ">>"
    SECTION_LINE: str = "--"


@dataclass(frozen=True)
class PanelConfig:
    PADDING: tuple[int, int] = (1, 2)
    TITLE_ALIGN: AlignMethod = "left"


class Theme:
    """Groups the palette, styles, symbols and panel layout.

    Symbols switch to AsciiSymbols on Windows.
    """

    colors = ThemeColors()
    styles = ThemeStyles()
    symbols: ThemeSymbols = AsciiSymbols() if sys.platform == "win32" else ThemeSymbols()
    panel = PanelConfig()


theme = Theme()
