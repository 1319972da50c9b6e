"""Custom exceptions for the Theme Publisher.

This module defines application-specific exceptions that provide clear,
actionable error messages and enable proper error handling throughout
the publishing sequence.

Exception Hierarchy:
    PublisherError (base)
    ├── ConfigurationError
    │   ├── ConfigFileNotFoundError
    │   └── ConfigValidationError
    ├── ValidationError
    ├── CommandError
    ├── FileOperationError
    │   ├── FileReadError
    │   └── FileWriteError
    ├── CatalogParseError
    └── PublishAborted
"""

from __future__ import annotations

from collections.abc import Sequence


class PublisherError(Exception):
    """Base exception for all Theme Publisher errors.

    All application-specific exceptions inherit from this class so the
    publish handler can report them uniformly.

    Attributes:
        message: Human-readable error description.
        details: Optional additional context about the error.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


# Configuration Errors


class ConfigurationError(PublisherError):
    """Base exception for configuration-related errors."""

    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when the publisher configuration file is missing."""

    def __init__(self, filename: str) -> None:
        """Initialize the exception.

        Args:
            filename: Name of the missing configuration file.
        """
        super().__init__(
            f"Configuration file not found: {filename}",
            "Create it with at least 'github_username' and 'github_repo'.",
        )
        self.filename = filename


class ConfigValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]) -> None:
        """Initialize the exception.

        Args:
            errors: List of validation error messages.
        """
        error_list = "\n  - ".join(errors)
        super().__init__(
            "Configuration validation failed",
            f"\n  - {error_list}",
        )
        self.errors = errors


# Operator input


class ValidationError(PublisherError):
    """Raised when an operator answer is rejected by its validator.

    Only ever raised inside the interactive session, which shows the
    message and asks the question again.
    """

    pass


# External commands


class CommandError(PublisherError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
    ) -> None:
        """Initialize the exception.

        Args:
            command: The argv that was executed.
            returncode: Exit status, or None if the command never started.
            stderr: Captured error stream.
        """
        command_str = " ".join(command)
        if returncode is None:
            message = f"Could not execute: {command_str}"
        else:
            message = f"Command failed ({returncode}): {command_str}"
        super().__init__(message, stderr.strip() or None)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


# File Operation Errors


class FileOperationError(PublisherError):
    """Base exception for archive, preview and catalog I/O errors."""

    pass


class FileReadError(FileOperationError):
    """Raised when reading a file or directory fails."""

    def __init__(self, filepath: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            filepath: Path that couldn't be read.
            reason: Why the read operation failed.
        """
        super().__init__(f"Failed to read: {filepath}", reason)
        self.filepath = filepath


class FileWriteError(FileOperationError):
    """Raised when writing a file fails."""

    def __init__(self, filepath: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            filepath: Path that couldn't be written.
            reason: Why the write operation failed.
        """
        super().__init__(f"Failed to write: {filepath}", reason)
        self.filepath = filepath


# Catalog


class CatalogParseError(PublisherError):
    """Raised when a catalog file exists but is not a usable JSON object.

    The catalog store recovers from this by starting a fresh catalog.
    """

    def __init__(self, filepath: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            filepath: Path to the catalog file.
            reason: Why parsing failed.
        """
        super().__init__(f"Invalid catalog: {filepath}", reason)
        self.filepath = filepath


# Flow control


class PublishAborted(PublisherError):
    """Raised when the operator declines to stash a dirty working tree."""

    def __init__(self) -> None:
        """Initialize the exception."""
        super().__init__(
            "Publishing cancelled",
            "Please commit or stash your changes manually.",
        )
