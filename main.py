#!/usr/bin/env python3
"""Theme Publisher - Main CLI Entry Point.

An interactive tool that packages a wallpaper or clock theme, records it
in the repository catalog and pushes the result.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from types import TracebackType
from typing import cast

from configuration.manager import ConfigManager
from core.component_factory import ComponentFactory
from core.operation_results import PublishOutcome, PublishSummary
from core.result_printer import ResultPrinter
from handlers.publish_handler import handle_publish
from terminal import StatusIndicators, parse_arguments
from utilities.debug_logger import buffer as debug_buffer, finalize, init_debug, log_dir_for


def setup_exception_hook() -> None:
    """Configure global exception handling for debug logging."""

    def _excepthook(
        exc_type: type[BaseException],
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            debug_buffer(
                f"Unhandled exception: {exc_type.__name__}: {exc_value}\n",
                level="ERROR",
            )
        except Exception:
            pass
        try:
            finalize()
        except Exception:
            pass
        try:
            sys.__excepthook__(exc_type, cast(BaseException, exc_value), exc_tb)
        except Exception:
            pass

    sys.excepthook = _excepthook


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit code of the publish outcome.
    """
    parsed = parse_arguments(argv)
    config_manager = ConfigManager(parsed.config)
    config = config_manager.load_config(repo_root=parsed.repo_root)

    # Initialize debug logging if requested
    if parsed.debug:
        init_debug(log_dir_for(config.repo_root))
        debug_buffer(
            f"Debug mode enabled at "
            f"{datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')}\n",
            level="INFO",
        )

    setup_exception_hook()

    components = ComponentFactory.create_all(config)
    summary = PublishSummary()

    try:
        summary = handle_publish(config, components)
        ResultPrinter(components.console).print_publish_summary(summary, config.repo_root)
    except KeyboardInterrupt:
        summary.outcome = PublishOutcome.ABORTED
        components.console.print()
        components.console.print(StatusIndicators.error("Publishing cancelled."))
        try:
            debug_buffer(
                "User interrupted execution (KeyboardInterrupt)\n", level="WARNING"
            )
        except Exception:
            pass
    finally:
        try:
            finalize()
        except Exception:
            pass

    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
