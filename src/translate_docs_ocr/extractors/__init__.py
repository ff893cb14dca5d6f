"""
Format extractors for translate-docs-ocr.

- ImageExtractor for PNG/JPEG images (OCR)
- PDFExtractor for PDFs (rasterize + OCR)
- DocumentExtractor for DOCX files (no OCR needed)
"""

from translate_docs_ocr.extractors.base import Extractor, OCRExtractor
from translate_docs_ocr.extractors.document import DocumentExtractor
from translate_docs_ocr.extractors.image import ImageExtractor
from translate_docs_ocr.extractors.pdf import PDFExtractor

__all__ = [
    "Extractor",
    "OCRExtractor",
    "ImageExtractor",
    "PDFExtractor",
    "DocumentExtractor",
]
