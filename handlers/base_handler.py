"""Base handler functionality and common patterns.

This module provides the base class used by operation handlers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from core.operation_results import PublishSummary


class BaseHandler(ABC):
    """Abstract base class for operation handlers.

    Handlers run an operation to its end and return a summary object;
    they never exit the process themselves.
    """

    @abstractmethod
    def execute(self) -> PublishSummary:
        """Execute the operation and return results.

        Returns:
            PublishSummary: Object describing the operation results
        """
        pass
