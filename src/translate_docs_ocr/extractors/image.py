"""
Translation of raster images (PNG, JPEG).
"""

from __future__ import annotations

import logging
from pathlib import Path

from translate_docs_ocr.extractors.base import OCRExtractor, text_output_path
from translate_docs_ocr.models import FileFormat, FileReport, SourceFile

logger = logging.getLogger(__name__)


class ImageExtractor(OCRExtractor):
    """
    OCR an image region by region and translate each region.

    Every successful translation overwrites ``<file name>.txt``, so the file
    ends up holding only the last region that translated successfully.
    """

    format = FileFormat.IMAGE

    async def extract(self, source: SourceFile, output_dir: Path) -> FileReport:
        report = FileReport(path=source.path, format=source.format)
        out_path = text_output_path(output_dir, source)

        self.engine.load_image(source.path)

        for unit in self._iter_units(source):
            result = await self._translate(unit, report)
            if result.ok:
                with open(out_path, "w", encoding="utf-8") as output:
                    output.write(result.text)
                report.add_artifact(out_path)

        logger.debug(
            "%s: %d of %d regions translated",
            source.name,
            report.units_translated,
            report.units_total,
        )
        return report
