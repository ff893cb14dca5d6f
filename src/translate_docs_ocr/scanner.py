"""
Source directory traversal for translate-docs-ocr.

Recursively walks a directory and classifies every regular file by extension.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from translate_docs_ocr.models import FileFormat, SourceFile

logger = logging.getLogger(__name__)

# Supported file extensions and their formats
SUPPORTED_EXTENSIONS = {
    "pdf": FileFormat.PDF,
    "png": FileFormat.IMAGE,
    "jpg": FileFormat.IMAGE,
    "docx": FileFormat.DOCUMENT,
}


def classify_path(path: Path) -> FileFormat:
    """Detect the format of a file from its lower-cased extension."""
    ext = path.suffix[1:].lower() if path.suffix else ""
    return SUPPORTED_EXTENSIONS.get(ext, FileFormat.UNSUPPORTED)


def iter_source_files(source_dir: Path) -> Iterator[SourceFile]:
    """
    Yield every regular file under a directory, recursively.

    Entries are visited depth-first in name order so repeated runs see the
    same sequence. Symbolic links are not followed. Any error reading a
    directory or an entry's metadata propagates to the caller.

    Args:
        source_dir: Directory to walk.

    Yields:
        SourceFile for each regular file, including unsupported ones.
    """
    source_dir = Path(source_dir)
    if not source_dir.exists():
        raise FileNotFoundError(f"Source directory not found: {source_dir}")

    if not source_dir.is_dir():
        raise NotADirectoryError(f"Not a directory: {source_dir}")

    yield from _walk(source_dir)


def _walk(directory: Path) -> Iterator[SourceFile]:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(path)
        elif entry.is_file(follow_symlinks=False):
            # Force a metadata read so unreadable entries fail here, not later
            entry.stat(follow_symlinks=False)
            source = SourceFile(path=path, format=classify_path(path))
            logger.debug("Found %s (%s)", path, source.format.value)
            yield source
