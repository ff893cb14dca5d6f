"""
Translation of PDF documents, page by page via rasterization and OCR.
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF

from translate_docs_ocr.extractors.base import OCRExtractor, page_output_path
from translate_docs_ocr.models import FileFormat, FileReport, SourceFile
from translate_docs_ocr.ocr import OCREngine, Segmenter
from translate_docs_ocr.raster import PageRenderConfig, render_page
from translate_docs_ocr.translation import TranslationProvider

logger = logging.getLogger(__name__)


class PDFExtractor(OCRExtractor):
    """
    Rasterize each PDF page, OCR it and translate it region by region.

    For page N this writes ``<name>-page-N.jpg`` before any recognition
    happens, then appends each successful region translation to
    ``<name>-page-N.txt`` in region order.
    """

    format = FileFormat.PDF

    def __init__(
        self,
        translator: TranslationProvider,
        engine: OCREngine,
        segmenter: Segmenter | None = None,
        skip_empty_regions: bool = False,
        render_config: PageRenderConfig | None = None,
        jpeg_quality: int = 95,
    ):
        super().__init__(translator, engine, segmenter, skip_empty_regions)
        self.render_config = render_config or PageRenderConfig()
        self.jpeg_quality = jpeg_quality

    async def extract(self, source: SourceFile, output_dir: Path) -> FileReport:
        report = FileReport(path=source.path, format=source.format)

        with fitz.open(source.path) as doc:
            logger.debug("%s: %d pages", source.name, len(doc))

            for index, page in enumerate(doc):
                try:
                    image = render_page(page, self.render_config)
                except Exception as e:
                    raise RuntimeError(f"Could not render page {index}: {e}") from e

                image_path = page_output_path(output_dir, source, index, "jpg")
                image.save(image_path, format="JPEG", quality=self.jpeg_quality)
                report.add_artifact(image_path)

                self.engine.load_image(image)

                text_path = page_output_path(output_dir, source, index, "txt")
                with open(text_path, "w", encoding="utf-8") as output:
                    report.add_artifact(text_path)
                    for unit in self._iter_units(source, page_index=index):
                        result = await self._translate(unit, report)
                        if result.ok:
                            output.write(result.text)

        return report
