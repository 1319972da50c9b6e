"""Utility modules for the Theme Publisher."""

from utilities.debug_logger import buffer as debug_buffer
from utilities.debug_logger import finalize as finalize_debug
from utilities.debug_logger import get_logger, init_debug
from utilities.logging_utils import log_exception, safe_log
from utilities.paths import (
    clean_path_input,
    file_size_mb,
    normalize_theme_id,
    relative_posix,
    sanitize_label,
    split_tags,
)

__all__ = [
    "clean_path_input",
    "debug_buffer",
    "file_size_mb",
    "finalize_debug",
    "get_logger",
    "init_debug",
    "log_exception",
    "normalize_theme_id",
    "relative_posix",
    "safe_log",
    "sanitize_label",
    "split_tags",
]
