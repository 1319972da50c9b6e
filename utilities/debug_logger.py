"""Debug logger utilities used when --debug mode is enabled.

Provides an in-memory buffer and a file handler that will be flushed on
finalization (including on exceptions / KeyboardInterrupt).
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path


_logger: logging.Logger | None = None
_buffer: list[str] = []
_log_file: Path | None = None


def init_debug(log_dir: Path | None = None) -> logging.Logger:
    """Initialize the debug logger.

    Creates a logger that writes debug messages to a timestamped file inside
    the given log_dir (defaults to cwd). Also keeps an in-memory buffer of
    messages so they can be flushed on abrupt termination.
    """
    global _logger, _log_file

    if _logger is not None:
        return _logger

    log_dir = Path(log_dir) if log_dir is not None else Path.cwd()
    log_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    logfile = log_dir / f"publisher_debug_{ts}.log"
    _log_file = logfile

    logger = logging.getLogger("theme_publisher_debug")
    logger.setLevel(logging.DEBUG)

    # File handler only (silent on console)
    fh = logging.FileHandler(str(logfile), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    _logger = logger

    _buffer.append(f"Debug log initialized: {logfile}\n")

    return logger


def log_dir_for(repo_root: Path, preferred: Path | None = None) -> Path:
    """Pick the directory for --debug logs.

    Logs never go inside the repository being published; a preferred
    directory inside it is replaced by ~/.theme_publisher/logs.

    Args:
        repo_root: Root of the repository being published.
        preferred: Wanted log directory (defaults to ./logs).

    Returns:
        Directory to pass to init_debug().
    """
    wanted = (preferred if preferred is not None else Path("logs")).resolve()
    root = repo_root.resolve()
    if wanted == root or root in wanted.parents:
        return Path.home() / ".theme_publisher" / "logs"
    return wanted


def get_logger() -> logging.Logger | None:
    return _logger


def get_log_file() -> Path | None:
    return _log_file


def buffer(msg: str, level: str = "DEBUG") -> None:
    """Store a message in the in-memory buffer and send it to logger.

    The in-memory buffer stores lines prefixed with the level (e.g. "INFO: ...").
    The logger is called with the appropriate level so the file output also
    contains a level on the left.
    """
    _buffer.append(f"{level}: {msg}")

    if _logger is None:
        return

    lvl = level.upper()
    if lvl == "INFO":
        _logger.info(msg.rstrip("\n"))
    elif lvl in ("WARNING", "WARN"):
        _logger.warning(msg.rstrip("\n"))
    elif lvl == "ERROR":
        _logger.error(msg.rstrip("\n"))
    elif lvl == "CRITICAL":
        _logger.critical(msg.rstrip("\n"))
    else:
        _logger.debug(msg.rstrip("\n"))


def finalize() -> None:
    """Finalize debug logging by ensuring buffer is written to the log file.

    Safe to call multiple times; the buffer is cleared after each flush.
    """
    if _log_file is None or not _buffer:
        return

    try:
        # Appended after the logger output so ordering in the file is kept
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write("\n# In-memory buffer:\n")
            for line in _buffer:
                f.write(line.rstrip("\n") + "\n")
    except OSError:
        # Best-effort only
        return
    _buffer.clear()


def reset() -> None:
    """Detach the file handler and forget all state (used between runs and in tests)."""
    global _logger, _log_file

    if _logger is not None:
        for handler in list(_logger.handlers):
            handler.close()
            _logger.removeHandler(handler)
    _logger = None
    _log_file = None
    _buffer.clear()
