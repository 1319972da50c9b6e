"""Command-line interface configuration and argument parsing.

The publisher itself is interactive; the command line only selects the
configuration file, the repository and debug logging.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from terminal.formatter import RichHelpFormatter


@dataclass
class ParsedArgs:
    """Structured representation of parsed CLI arguments."""

    config: Path | None = None
    repo_root: Path | None = None
    debug: bool = False


class CLIParser:
    """CLI argument parser with validation."""

    def __init__(self) -> None:
        """Initialize the CLI parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser with all arguments defined."""
        parser = argparse.ArgumentParser(
            description="Theme Publisher - Package and publish themes to the content repository",
            formatter_class=RichHelpFormatter,
            add_help=False,
        )

        self._add_options(parser)

        return parser

    def _add_options(self, parser: argparse.ArgumentParser) -> None:
        """Add general option flags."""
        options = parser.add_argument_group("options")

        options.add_argument(
            "--config",
            "-c",
            metavar="PATH",
            help="Configuration file (default: PublisherConfig.json)",
        )

        options.add_argument(
            "--repo-root",
            "-r",
            metavar="PATH",
            help="Repository root, overriding the configuration file",
        )

        options.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging",
        )

        options.add_argument(
            "-h",
            "--help",
            action="store_true",
            help="Show help message",
        )

    def parse(self, args: list[str] | None = None) -> ParsedArgs:
        """Parse command-line arguments.

        Args:
            args: Optional list of arguments. Uses sys.argv if None.

        Returns:
            ParsedArgs with validated arguments.

        Raises:
            SystemExit: If arguments are invalid or help is requested.
        """
        namespace = self.parser.parse_args(args)

        if namespace.help:
            console = Console()
            help_text = self.parser.format_help()
            console.print(help_text, end="")
            sys.exit(0)

        self._validate(namespace)

        return self._convert(namespace)

    def _validate(self, args: argparse.Namespace) -> None:
        """Validate argument values.

        Args:
            args: Parsed namespace to validate.

        Raises:
            SystemExit: If validation fails.
        """
        if args.config is not None and not args.config.strip():
            self.parser.error("--config requires a file path")
        if args.repo_root is not None:
            if not args.repo_root.strip():
                self.parser.error("--repo-root requires a directory path")
            if not Path(args.repo_root).expanduser().is_dir():
                self.parser.error(f"--repo-root is not a directory: {args.repo_root}")

    def _convert(self, args: argparse.Namespace) -> ParsedArgs:
        """Convert namespace to ParsedArgs.

        Args:
            args: Validated namespace.

        Returns:
            ParsedArgs instance.
        """
        return ParsedArgs(
            config=Path(args.config).expanduser() if args.config else None,
            repo_root=Path(args.repo_root).expanduser() if args.repo_root else None,
            debug=args.debug,
        )


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments.

    This is the main entry point for CLI parsing.

    Returns:
        ParsedArgs with validated arguments.
    """
    parser = CLIParser()
    return parser.parse(args)
