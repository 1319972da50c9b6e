"""Test doubles for the prompter and git, plus scripted answer builders."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from core.component_factory import ComponentFactory, CoreComponents
from core.exceptions import CommandError
from models.config import PublisherConfig


class ScriptedPrompter:
    """Prompter answering from a fixed script.

    A None entry accepts the question's default.
    """

    def __init__(self, responses: list[object]) -> None:
        self.responses = list(responses)
        self.asked: list[str] = []
        self.rejections: list[str] = []

    def _next(self, message: str, default: object) -> object:
        self.asked.append(message)
        if not self.responses:
            raise AssertionError(f"Unexpected question: {message}")
        value = self.responses.pop(0)
        return default if value is None else value

    def text(self, message: str, default: str | None = None) -> str:
        return str(self._next(message, default or ""))

    def choice(self, message: str, choices: list[str], default: str | None = None) -> str:
        return str(self._next(message, default))

    def confirm(self, message: str, default: bool = False) -> bool:
        return bool(self._next(message, default))

    def reject(self, message: str) -> None:
        self.rejections.append(message)


class FakeGit:
    """In-memory stand-in for GitBridge that records every call."""

    def __init__(
        self,
        status_output: str = "",
        untracked: tuple[str, ...] = (),
        fail_on: tuple[str, ...] = (),
    ) -> None:
        self.remote = "origin"
        self.branch = "main"
        self.status_output = status_output
        self.untracked = set(untracked)
        self.fail_on = set(fail_on)
        self.calls: list[tuple[str, ...]] = []

    def _record(self, *call: str) -> str:
        self.calls.append(call)
        if call[0] in self.fail_on:
            raise CommandError(["git", *call], 1, f"{call[0]} failed")
        return ""

    def status(self, *paths: str) -> str:
        self._record("status", *paths)
        return self.status_output

    def is_untracked(self, path: str) -> bool:
        self._record("is_untracked", path)
        return path in self.untracked

    def add(self, *paths: str) -> str:
        self.untracked.difference_update(paths)
        return self._record("add", *paths)

    def commit(self, message: str) -> str:
        return self._record("commit", message)

    def pull(self) -> str:
        return self._record("pull")

    def push(self) -> str:
        return self._record("push")

    def stash(self) -> str:
        result = self._record("stash")
        self.status_output = ""
        return result

    def stash_pop(self) -> str:
        return self._record("stash_pop")

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


def make_components(
    config: PublisherConfig,
    prompter: ScriptedPrompter,
    git: FakeGit,
    console: Console,
) -> CoreComponents:
    """Build real components around a scripted prompter and fake git."""
    components = ComponentFactory.create_all(config, console=console, prompter=prompter)
    components.git = git  # type: ignore[assignment]
    return components


def wallpaper_answers(
    preview: Path,
    source: Path,
    theme_id: str = "Aurora Blast",
    resolution: str = "1920x1080",
) -> list[object]:
    """Scripted responses for the wallpaper questionnaire."""
    return [
        "Wallpaper",
        theme_id,
        "Aurora Blast",
        None,
        None,
        "space, aurora",
        str(preview),
        resolution,
        str(source),
    ]
