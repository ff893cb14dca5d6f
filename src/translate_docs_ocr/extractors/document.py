"""
Translation of DOCX documents.

Uses python-docx to read the body text directly, without OCR.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docx import Document
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from translate_docs_ocr.extractors.base import Extractor, text_output_path
from translate_docs_ocr.models import FileFormat, FileReport, SourceFile, TextUnit

logger = logging.getLogger(__name__)


def flatten_docx_text(file_path: Path) -> str:
    """
    Flatten a DOCX body to plain text.

    Paragraphs and table rows are emitted in body order, one per line;
    cells within a row are separated by tabs.
    """
    doc = Document(str(file_path))
    lines: list[str] = []

    for element in doc.element.body.iterchildren():
        if element.tag == qn("w:p"):
            lines.append(Paragraph(element, doc).text)
        elif element.tag == qn("w:tbl"):
            for row in Table(element, doc).rows:
                lines.append("\t".join(cell.text for cell in row.cells))

    return "\n".join(lines)


def split_on_periods(text: str) -> list[str]:
    """
    Split text into chunks on every literal '.'.

    Decimal points and abbreviations are split too, and a trailing period
    leaves an empty final chunk.
    """
    return text.split(".")


class DocumentExtractor(Extractor):
    """Translate a DOCX body chunk by chunk into ``<file name>.txt``."""

    format = FileFormat.DOCUMENT

    async def extract(self, source: SourceFile, output_dir: Path) -> FileReport:
        report = FileReport(path=source.path, format=source.format)
        text = flatten_docx_text(source.path)
        out_path = text_output_path(output_dir, source)

        with open(out_path, "w", encoding="utf-8") as output:
            report.add_artifact(out_path)
            for index, chunk in enumerate(split_on_periods(text)):
                unit = TextUnit(source=source.name, text=chunk, chunk_index=index)
                result = await self._translate(unit, report)
                if result.ok:
                    output.write(f"{result.text}.\n")

        return report
