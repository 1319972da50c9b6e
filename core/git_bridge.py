"""Thin wrapper over the git command line.

Every operation runs synchronously in the repository root and either
returns the trimmed standard output or raises CommandError with the
captured error stream. Nothing is retried.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

from core.exceptions import CommandError
from utilities.logging_utils import safe_log

# git writes progress to stderr on success; these lines are not warnings
BENIGN_STDERR_MARKERS = ("Cloning into", "Applying:")


class GitBridge:
    """Runs git commands against one working tree.

    Attributes:
        repo_root: Directory the commands run in.
        remote: Remote used for pull and push.
        branch: Branch used for pull and push.
        git_path: Path to the git executable.
        stderr_sink: Called with unexpected stderr output of successful commands.
    """

    def __init__(
        self,
        repo_root: Path,
        remote: str = "origin",
        branch: str = "main",
        git_path: str = "git",
        stderr_sink: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize GitBridge.

        Args:
            repo_root: Directory the commands run in.
            remote: Remote used for pull and push.
            branch: Branch used for pull and push.
            git_path: Path to git executable (defaults to system PATH).
            stderr_sink: Optional callback for warnings printed by git.
        """
        self.repo_root = repo_root
        self.remote = remote
        self.branch = branch
        self.git_path = git_path
        self.stderr_sink = stderr_sink

    def run(self, *args: str) -> str:
        """Run a git subcommand.

        Args:
            *args: Arguments following 'git'.

        Returns:
            Trimmed standard output.

        Raises:
            CommandError: If git cannot be started or exits non-zero.
        """
        command = [self.git_path, *args]
        safe_log(f"$ {' '.join(command)}\n", level="DEBUG")

        try:
            result = subprocess.run(
                command,
                cwd=self.repo_root,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            safe_log(f"Could not start {command[0]}: {e}\n", level="ERROR")
            raise CommandError(command, None, str(e)) from e

        if result.returncode != 0:
            safe_log(
                f"{' '.join(command)} exited {result.returncode}: {result.stderr}\n",
                level="ERROR",
            )
            raise CommandError(command, result.returncode, result.stderr or result.stdout)

        stderr = (result.stderr or "").strip()
        if stderr and not any(marker in stderr for marker in BENIGN_STDERR_MARKERS):
            safe_log(f"git stderr: {stderr}\n", level="WARNING")
            if self.stderr_sink is not None:
                self.stderr_sink(stderr)

        return (result.stdout or "").strip()

    def status(self, *paths: str) -> str:
        """Porcelain status, optionally limited to some paths."""
        if paths:
            return self.run("status", "--porcelain", "--", *paths)
        return self.run("status", "--porcelain")

    def is_untracked(self, path: str) -> bool:
        """Check whether a path shows up as untracked ('??')."""
        return self.status(path).startswith("??")

    def add(self, *paths: str) -> str:
        """Stage paths (defaults to everything under the root)."""
        return self.run("add", *(paths or (".",)))

    def commit(self, message: str) -> str:
        """Commit staged changes with a message."""
        return self.run("commit", "-m", message)

    def pull(self) -> str:
        """Pull the tracking branch from the remote."""
        return self.run("pull", self.remote, self.branch)

    def push(self) -> str:
        """Push the tracking branch to the remote."""
        return self.run("push", self.remote, self.branch)

    def stash(self) -> str:
        """Stash uncommitted changes, untracked files included."""
        return self.run("stash", "push", "--include-untracked")

    def stash_pop(self) -> str:
        """Restore the most recent stash."""
        return self.run("stash", "pop")
