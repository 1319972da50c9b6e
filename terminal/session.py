"""Interactive collection of publish answers."""

from __future__ import annotations

from typing import Protocol, cast

from rich.console import Console
from rich.prompt import Confirm, Prompt

from core.exceptions import ValidationError
from models.answers import ClockAnswers, PublishAnswers, WallpaperAnswers
from models.types import ItemType
from terminal.components import StatusIndicators
from terminal.questions import AnswerMap, Question, QuestionKind
from terminal.theme import theme
from utilities.logging_utils import safe_log


class Prompter(Protocol):
    """Anything able to ask the operator questions."""

    def text(self, message: str, default: str | None = None) -> str: ...

    def choice(self, message: str, choices: list[str], default: str | None = None) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def reject(self, message: str) -> None: ...


class RichPrompter:
    """Prompter backed by rich.prompt on a console."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def _styled(self, message: str) -> str:
        return f"[{theme.styles.PROMPT}]?[/{theme.styles.PROMPT}] {message}"

    def text(self, message: str, default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(self._styled(message), console=self.console)
        return Prompt.ask(
            self._styled(message),
            console=self.console,
            default=default,
            show_default=bool(default),
        )

    def choice(self, message: str, choices: list[str], default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(self._styled(message), console=self.console, choices=choices)
        return Prompt.ask(
            self._styled(message),
            console=self.console,
            choices=choices,
            default=default,
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(self._styled(message), console=self.console, default=default)

    def reject(self, message: str) -> None:
        self.console.print(StatusIndicators.error(message))


class InteractiveSession:
    """Asks an ordered list of questions and builds the answer record.

    Invalid answers are reported through the prompter and asked again, so
    ValidationError never leaves collect().
    """

    def __init__(self, prompter: Prompter, questions: list[Question]) -> None:
        """Initialize InteractiveSession.

        Args:
            prompter: Where questions are asked.
            questions: Questionnaire in the order it is asked.
        """
        self.prompter = prompter
        self.questions = questions

    def ask(self, question: Question) -> object:
        """Ask one question until its parser accepts the answer."""
        while True:
            if question.kind is QuestionKind.CONFIRM:
                return self.prompter.confirm(question.message, default=bool(question.default))

            default = None if question.default is None else str(question.default)
            if question.kind is QuestionKind.CHOICE:
                raw = self.prompter.choice(question.message, question.choices, default=default)
            else:
                raw = self.prompter.text(question.message, default=default)

            try:
                return question.parse(raw)
            except ValidationError as e:
                safe_log(f"Rejected answer for {question.name}: {e.message}\n")
                self.prompter.reject(e.message)

    def collect(self) -> PublishAnswers:
        """Run the whole questionnaire.

        Returns:
            WallpaperAnswers or ClockAnswers depending on the item type.
        """
        answers: AnswerMap = {}
        for question in self.questions:
            if question.applies(answers):
                answers[question.name] = self.ask(question)
        return build_answers(answers)


def build_answers(answers: AnswerMap) -> PublishAnswers:
    """Turn a map of parsed answers into the typed answer record."""
    common = dict(
        theme_id=cast(str, answers["theme_id"]),
        name=cast(str, answers["name"]),
        description=cast(str, answers["description"]),
        author=cast(str, answers["author"]),
        tags=cast(list[str], answers["tags"]),
        preview_image=answers["preview_image"],
        resolution=cast(str, answers["resolution"]),
        source_folder=answers["source_folder"],
    )
    if answers["item_type"] == ItemType.CLOCK:
        return ClockAnswers(
            is_customizable=bool(answers.get("is_customizable", False)),
            **common,
        )
    return WallpaperAnswers(**common)
