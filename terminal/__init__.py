"""Terminal presentation layer for the Theme Publisher.

Provides CLI parsing, theming, prompts, and reusable UI components.
"""

from .cli import CLIParser, ParsedArgs, parse_arguments
from .components import (
    Panels,
    StatusIndicators,
    StepLine,
    create_console,
)
from .formatter import RichHelpFormatter
from .questions import Question, QuestionKind, build_questions
from .session import InteractiveSession, Prompter, RichPrompter
from .theme import Theme, theme

__all__ = [
    # CLI
    "CLIParser",
    "ParsedArgs",
    "parse_arguments",
    # Theme
    "Theme",
    "theme",
    # Components
    "create_console",
    "Panels",
    "RichHelpFormatter",
    "StatusIndicators",
    "StepLine",
    # Prompts
    "build_questions",
    "InteractiveSession",
    "Prompter",
    "Question",
    "QuestionKind",
    "RichPrompter",
]
