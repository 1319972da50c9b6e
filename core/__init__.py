"""Core publishing modules: archive, catalog, git and results."""

from core.archive import ArchiveBuilder
from core.catalog import CatalogStore, MergeResult, ResolutionEvent, ThemeEvent
from core.git_bridge import GitBridge
from core.operation_results import PublishOutcome, PublishStep, PublishSummary
from core.result_formatter import ResultFormatter
from core.result_printer import ResultPrinter

__all__ = [
    "ArchiveBuilder",
    "CatalogStore",
    "GitBridge",
    "MergeResult",
    "PublishOutcome",
    "PublishStep",
    "PublishSummary",
    "ResolutionEvent",
    "ResultFormatter",
    "ResultPrinter",
    "ThemeEvent",
]
