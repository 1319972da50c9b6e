"""Handlers module for the Theme Publisher.

Each handler runs an operation and returns a result object that
describes what happened.

Handlers do NOT print final results - they return result objects.
Result printing is handled by ResultPrinter after the handler completes.
"""

from handlers.publish_handler import handle_publish

__all__ = [
    "handle_publish",
]
