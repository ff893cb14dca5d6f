"""
OCR layer for translate-docs-ocr.

Provides:
- OCREngine interface with Region/Block layout types
- TesseractEngine backed by pytesseract
- Segmenter turning an image into ordered text fragments
"""

from translate_docs_ocr.ocr.base import Block, OCREngine, Region
from translate_docs_ocr.ocr.segmenter import Segmenter, TextFragment
from translate_docs_ocr.ocr.tesseract import TesseractEngine

__all__ = [
    "Block",
    "OCREngine",
    "Region",
    "Segmenter",
    "TextFragment",
    "TesseractEngine",
]
