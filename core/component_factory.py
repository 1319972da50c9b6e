"""Factory for creating and configuring core components.

This module provides centralized component creation so main.py and the
tests build the publisher the same way.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from core.archive import ArchiveBuilder
from core.git_bridge import GitBridge
from models.config import PublisherConfig
from terminal.components import StatusIndicators, create_console
from terminal.questions import build_questions
from terminal.session import InteractiveSession, Prompter, RichPrompter


@dataclass
class CoreComponents:
    """Container for core application components.

    Attributes:
        console: Console all progress output goes to.
        prompter: Asks the operator questions.
        git: Bridge to the git command line.
        archive_builder: Packs theme folders into zip files.
        session: Collects the publish answers.
    """

    console: Console
    prompter: Prompter
    git: GitBridge
    archive_builder: ArchiveBuilder
    session: InteractiveSession


class ComponentFactory:
    """Factory for creating configured application components."""

    @staticmethod
    def create_git_bridge(config: PublisherConfig, console: Console) -> GitBridge:
        """Create a GitBridge that reports git's warnings on the console.

        Args:
            config: Publisher configuration.
            console: Console for stderr warnings.

        Returns:
            Configured GitBridge instance.
        """

        def _warn(stderr: str) -> None:
            console.print(StatusIndicators.warning(f"git: {stderr}"))

        return GitBridge(
            repo_root=config.repo_root,
            remote=config.remote,
            branch=config.branch,
            stderr_sink=_warn,
        )

    @staticmethod
    def create_session(config: PublisherConfig, prompter: Prompter) -> InteractiveSession:
        """Create the interactive session with the standard questionnaire.

        Args:
            config: Publisher configuration (question defaults).
            prompter: Prompter the questions are asked through.

        Returns:
            Configured InteractiveSession instance.
        """
        return InteractiveSession(prompter, build_questions(config))

    @classmethod
    def create_all(
        cls,
        config: PublisherConfig,
        console: Console | None = None,
        prompter: Prompter | None = None,
    ) -> CoreComponents:
        """Create all core components with proper configuration.

        Args:
            config: Publisher configuration.
            console: Optional console; a standard one is created otherwise.
            prompter: Optional prompter; a RichPrompter on the console otherwise.

        Returns:
            CoreComponents containing all configured instances.
        """
        console = console or create_console()
        prompter = prompter or RichPrompter(console)

        return CoreComponents(
            console=console,
            prompter=prompter,
            git=cls.create_git_bridge(config, console),
            archive_builder=ArchiveBuilder(),
            session=cls.create_session(config, prompter),
        )
