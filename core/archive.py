"""Packaging of theme source folders into zip archives."""

from __future__ import annotations

import os
import zipfile
from pathlib import Path

from core.exceptions import FileReadError, FileWriteError
from utilities.logging_utils import safe_log
from utilities.paths import file_size_mb


class ArchiveBuilder:
    """Compresses a directory into a single zip file.

    The archive holds the directory's contents (not the directory itself),
    with entries stored relative to the source folder.
    """

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        """Initialize ArchiveBuilder.

        Args:
            compression: zipfile compression method.
        """
        self.compression = compression

    def build(self, source_dir: Path, destination: Path) -> float:
        """Package source_dir into destination.

        Missing parent directories of the destination are created first.
        An existing archive at the destination is replaced.

        Args:
            source_dir: Directory to package.
            destination: Path of the zip file to write.

        Returns:
            Size of the written archive in megabytes, two decimals.

        Raises:
            FileReadError: If the source cannot be listed or read.
            FileWriteError: If the destination cannot be written.
        """
        if not source_dir.is_dir():
            raise FileReadError(str(source_dir), "Not a directory")

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileWriteError(str(destination.parent), str(e)) from e

        safe_log(f"Zipping {source_dir} -> {destination}\n", level="INFO")

        try:
            archive = zipfile.ZipFile(destination, "w", self.compression)
        except OSError as e:
            raise FileWriteError(str(destination), str(e)) from e

        with archive:
            for dirpath, dirnames, filenames in os.walk(source_dir, onerror=_raise_walk_error):
                dirnames.sort()
                current = Path(dirpath)
                if current != source_dir and not filenames and not dirnames:
                    # Empty folders get an explicit entry so they survive extraction
                    archive.write(current, current.relative_to(source_dir).as_posix())
                for name in sorted(filenames):
                    full = current / name
                    arcname = full.relative_to(source_dir).as_posix()
                    try:
                        archive.write(full, arcname)
                    except PermissionError as e:
                        raise FileReadError(str(full), str(e)) from e
                    except OSError as e:
                        raise FileWriteError(str(destination), str(e)) from e

        size_mb = file_size_mb(destination)
        safe_log(f"Archive written: {destination} ({size_mb} MB)\n", level="INFO")
        return size_mb


def _raise_walk_error(error: OSError) -> None:
    raise FileReadError(str(error.filename), str(error)) from error
