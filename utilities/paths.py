"""Path and size helpers shared by the publishing steps."""

from __future__ import annotations

import os
import re
from pathlib import Path

BYTES_PER_MB = 1024 * 1024

_WHITESPACE_RUN = re.compile(r"\s+")
_INVALID_ID_CHARS = re.compile(r"[^a-z0-9-]")
_INVALID_LABEL_CHARS = re.compile(r"[^A-Za-z0-9_.-]")
_QUOTES = ("'", '"')


def normalize_theme_id(raw: str) -> str:
    """
    Normalize an operator-provided theme id.

    Lower-cases the input, turns whitespace runs into a single hyphen and
    drops every character outside ``[a-z0-9-]``. Applying it twice gives
    the same result as applying it once.

    Args:
        raw: Text typed by the operator

    Returns:
        Normalized id, possibly empty
    """
    lowered = raw.strip().lower()
    hyphenated = _WHITESPACE_RUN.sub("-", lowered)
    return _INVALID_ID_CHARS.sub("", hyphenated)


def sanitize_label(label: str) -> str:
    """Replace characters that are unsafe in archive names with underscores."""
    return _INVALID_LABEL_CHARS.sub("_", label)


def split_tags(raw: str) -> list[str]:
    """
    Split a comma-separated tag string.

    Args:
        raw: Tags as typed, e.g. ``"a, b ,, c"``

    Returns:
        Trimmed, non-empty tags in input order
    """
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def clean_path_input(raw: str) -> str:
    """Trim a dragged-and-dropped path and drop one surrounding quote at each end."""
    cleaned = raw.strip()
    if cleaned.startswith(_QUOTES):
        cleaned = cleaned[1:]
    if cleaned.endswith(_QUOTES):
        cleaned = cleaned[:-1]
    return cleaned


def file_size_mb(path: Path) -> float:
    """Size of a file in megabytes, rounded to two decimals."""
    return round(path.stat().st_size / BYTES_PER_MB, 2)


def file_extension(path: Path) -> str:
    """Extension of a file including the leading dot, or '' when it has none."""
    return path.suffix


def relative_posix(path: Path, root: Path) -> str:
    """
    Express a path relative to a root using forward slashes.

    Args:
        path: File inside the repository
        root: Repository root

    Returns:
        POSIX-style relative path, suitable for appending to a URL
    """
    return os.path.relpath(path, root).replace("\\", "/")
