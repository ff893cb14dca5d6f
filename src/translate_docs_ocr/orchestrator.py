"""
Batch orchestration for translate-docs-ocr.

Walks a source directory and dispatches each file to the extractor for its
format, one file at a time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from translate_docs_ocr.config import Settings
from translate_docs_ocr.extractors import (
    DocumentExtractor,
    Extractor,
    ImageExtractor,
    PDFExtractor,
)
from translate_docs_ocr.models import FileFormat, FileReport, FileStatus, RunReport, SourceFile
from translate_docs_ocr.ocr import OCREngine, Segmenter, TesseractEngine
from translate_docs_ocr.raster import PageRenderConfig
from translate_docs_ocr.scanner import iter_source_files
from translate_docs_ocr.translation import TranslationProvider

logger = logging.getLogger(__name__)


class BatchTranslator:
    """
    Runs the translation pipeline over a directory tree.

    Files, pages and regions are processed strictly in sequence. The single
    OCR engine is owned by this object and handed to the image and PDF
    extractors; it must not be shared with anything running concurrently.
    """

    def __init__(
        self,
        translator: TranslationProvider,
        engine: OCREngine,
        *,
        render_config: PageRenderConfig | None = None,
        jpeg_quality: int = 95,
        skip_empty_regions: bool = False,
        create_target_dir: bool = True,
        console: Console | None = None,
    ):
        """
        Initialize batch translator.

        Args:
            translator: Translation provider with a fixed language pair.
            engine: OCR engine used for images and rendered PDF pages.
            render_config: PDF page render policy.
            jpeg_quality: JPEG quality for persisted page images.
            skip_empty_regions: Drop blank OCR regions before translation.
            create_target_dir: Create the target directory if missing.
            console: Rich console for filenames mode output.
        """
        self.translator = translator
        self.engine = engine
        self.create_target_dir = create_target_dir
        self.console = console or Console()

        segmenter = Segmenter()
        self.extractors: dict[FileFormat, Extractor] = {
            FileFormat.PDF: PDFExtractor(
                translator,
                engine,
                segmenter,
                skip_empty_regions=skip_empty_regions,
                render_config=render_config,
                jpeg_quality=jpeg_quality,
            ),
            FileFormat.IMAGE: ImageExtractor(
                translator,
                engine,
                segmenter,
                skip_empty_regions=skip_empty_regions,
            ),
            FileFormat.DOCUMENT: DocumentExtractor(translator),
        }

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        translator: TranslationProvider,
        console: Console | None = None,
    ) -> BatchTranslator:
        """Build a batch translator with a Tesseract engine from settings."""
        engine = TesseractEngine(
            language=settings.ocr.language,
            tessdata_dir=settings.ocr.tessdata_dir,
            page_segmentation_mode=settings.ocr.page_segmentation_mode,
            tesseract_cmd=settings.ocr.tesseract_cmd,
        )
        render_config = PageRenderConfig(
            target_width=settings.pdf.target_width,
            max_height=settings.pdf.max_height,
            landscape_rotation=settings.pdf.landscape_rotation,
        )
        return cls(
            translator,
            engine,
            render_config=render_config,
            jpeg_quality=settings.pdf.jpeg_quality,
            skip_empty_regions=settings.processing.skip_empty_regions,
            create_target_dir=settings.processing.create_target_dir,
            console=console,
        )

    async def translate_filenames(self, source_dir: Path) -> list[str]:
        """
        Translate the path of every file under source_dir and print it.

        Used to check the connection to the translation service; no file
        content is read. A failed translation prints an error line for that
        path and the walk continues.

        Returns:
            The printed lines, one per file, in traversal order.
        """
        lines: list[str] = []
        for source in iter_source_files(source_dir):
            result = await self.translator.translate(str(source.path))
            if result.ok:
                line = result.text
                self.console.print(Text(line), soft_wrap=True)
            else:
                line = f"{source.path}: translation failed: {result.error}"
                self.console.print(Text(line, style="red"), soft_wrap=True)
            lines.append(line)
        return lines

    async def translate_directory(self, source_dir: Path, target_dir: Path) -> RunReport:
        """
        Translate every supported file under source_dir into target_dir.

        Errors walking the source directory propagate. An error inside one
        file's extractor is logged and recorded, and the run moves on.

        Args:
            source_dir: Directory tree to translate.
            target_dir: Flat output directory.

        Returns:
            RunReport with one FileReport per supported file.
        """
        target_dir = Path(target_dir)
        if self.create_target_dir:
            target_dir.mkdir(parents=True, exist_ok=True)

        report = RunReport()
        for source in iter_source_files(source_dir):
            extractor = self.extractors.get(source.format)
            if extractor is None:
                logger.debug("Skipping unsupported file %s", source.path)
                report.unsupported += 1
                continue

            report.add(await self._process(extractor, source, target_dir))

        logger.info(
            "Processed %d files: %d completed, %d failed, %d unsupported skipped",
            len(report.files),
            report.count(FileStatus.COMPLETED),
            report.count(FileStatus.FAILED),
            report.unsupported,
        )
        return report

    async def _process(
        self,
        extractor: Extractor,
        source: SourceFile,
        target_dir: Path,
    ) -> FileReport:
        logger.info("Processing %s", source.path)
        try:
            file_report = await extractor.extract(source, target_dir)
        except Exception as e:
            logger.error("Failed to process %s: %s", source.path, e)
            return FileReport(
                path=source.path,
                format=source.format,
                status=FileStatus.FAILED,
                error=str(e),
            )

        logger.info(
            "%s: %d/%d units translated",
            source.name,
            file_report.units_translated,
            file_report.units_total,
        )
        return file_report
