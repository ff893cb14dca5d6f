"""
Base classes for format extractors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from translate_docs_ocr.models import (
    FileFormat,
    FileReport,
    SourceFile,
    TextUnit,
    TranslationResult,
)
from translate_docs_ocr.ocr import OCREngine, Segmenter
from translate_docs_ocr.translation import TranslationProvider

logger = logging.getLogger(__name__)


class Extractor(ABC):
    """
    Turns one source file into translated output artifacts.

    Translation failures for single units are counted and logged but never
    stop the file. Anything else an extractor raises aborts the file.
    """

    format: FileFormat

    def __init__(self, translator: TranslationProvider):
        self.translator = translator

    @abstractmethod
    async def extract(self, source: SourceFile, output_dir: Path) -> FileReport:
        """
        Extract, translate and write outputs for one file.

        Args:
            source: File to process.
            output_dir: Flat directory receiving all artifacts.

        Returns:
            FileReport describing units and artifacts.
        """
        ...

    async def _translate(self, unit: TextUnit, report: FileReport) -> TranslationResult:
        result = await self.translator.translate(unit.text)
        report.record(result)
        if not result.ok:
            logger.warning(
                "Translation failed for %s (%s): %s", unit.source, unit.locator, result.error
            )
        return result


class OCRExtractor(Extractor):
    """Extractor for raster content, driving a shared OCR engine."""

    def __init__(
        self,
        translator: TranslationProvider,
        engine: OCREngine,
        segmenter: Segmenter | None = None,
        skip_empty_regions: bool = False,
    ):
        super().__init__(translator)
        self.engine = engine
        self.segmenter = segmenter or Segmenter()
        self.skip_empty_regions = skip_empty_regions

    def _iter_units(self, source: SourceFile, page_index: int | None = None) -> Iterator[TextUnit]:
        """Yield one text unit per region of the engine's current image."""
        for fragment in self.segmenter.iter_fragments(self.engine):
            if self.skip_empty_regions and fragment.is_blank:
                logger.debug("Skipping blank region %d of %s", fragment.index, source.name)
                continue
            yield TextUnit(
                source=source.name,
                text=fragment.text,
                page_index=page_index,
                region_index=fragment.index,
            )


def text_output_path(output_dir: Path, source: SourceFile) -> Path:
    """Output text file for a whole source file: ``<file name>.txt``."""
    return output_dir / f"{source.name}.txt"


def page_output_path(output_dir: Path, source: SourceFile, page_index: int, extension: str) -> Path:
    """Per-page artifact: ``<lower-cased base name>-page-<index>.<extension>``."""
    base = source.name.lower()
    if base.endswith(".pdf"):
        base = base[: -len(".pdf")]
    return output_dir / f"{base}-page-{page_index}.{extension}"
