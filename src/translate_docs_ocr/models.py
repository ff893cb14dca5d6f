"""
Data model for translate-docs-ocr.

Transient records describing source files, text units and per-file outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FileFormat(str, Enum):
    """Source file format, detected from the file extension."""

    PDF = "pdf"
    IMAGE = "image"
    DOCUMENT = "document"
    UNSUPPORTED = "unsupported"


class FileStatus(str, Enum):
    """Outcome of processing one source file."""

    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """One input file found during directory traversal."""

    path: Path
    format: FileFormat

    @property
    def name(self) -> str:
        """File name including extension."""
        return self.path.name


@dataclass(frozen=True)
class TextUnit:
    """
    One piece of text submitted for translation.

    Image and PDF units carry a region index (and a page index for PDFs);
    document units carry a chunk index.
    """

    source: str
    text: str
    page_index: int | None = None
    region_index: int | None = None
    chunk_index: int | None = None

    @property
    def locator(self) -> str:
        """Human readable position of the unit within its source file."""
        if self.chunk_index is not None:
            return f"chunk {self.chunk_index}"
        if self.page_index is not None:
            return f"page {self.page_index} region {self.region_index}"
        return f"region {self.region_index}"


@dataclass(frozen=True)
class TranslationResult:
    """Translated text on success, or a failure reason."""

    text: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> TranslationResult:
        return cls(text=text)

    @classmethod
    def failure(cls, reason: str) -> TranslationResult:
        return cls(error=reason)


@dataclass
class FileReport:
    """Per-file processing summary produced by an extractor."""

    path: Path
    format: FileFormat
    status: FileStatus = FileStatus.COMPLETED
    units_total: int = 0
    units_translated: int = 0
    units_failed: int = 0
    artifacts: list[Path] = field(default_factory=list)
    error: str | None = None

    def record(self, result: TranslationResult) -> None:
        """Count a translation outcome."""
        self.units_total += 1
        if result.ok:
            self.units_translated += 1
        else:
            self.units_failed += 1

    def add_artifact(self, path: Path) -> None:
        if path not in self.artifacts:
            self.artifacts.append(path)


@dataclass
class RunReport:
    """Aggregated summary of one translate-mode run."""

    files: list[FileReport] = field(default_factory=list)
    unsupported: int = 0

    def add(self, report: FileReport) -> None:
        self.files.append(report)

    def count(self, status: FileStatus) -> int:
        return sum(1 for f in self.files if f.status == status)

    @property
    def units_translated(self) -> int:
        return sum(f.units_translated for f in self.files)

    @property
    def units_failed(self) -> int:
        return sum(f.units_failed for f in self.files)

    @property
    def artifacts(self) -> list[Path]:
        return [a for f in self.files for a in f.artifacts]
