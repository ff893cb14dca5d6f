"""
translate-docs-ocr: batch OCR and translation of document folders.

This package provides tools for:
- Walking a directory tree and classifying PDF, image and DOCX files
- Region-level OCR of images and rasterized PDF pages with Tesseract
- Period-based chunking of DOCX body text
- Translation of every text unit through a LibreTranslate server
"""

__version__ = "0.1.0"

from translate_docs_ocr.config import Settings, load_config
from translate_docs_ocr.extractors import DocumentExtractor, ImageExtractor, PDFExtractor
from translate_docs_ocr.models import (
    FileFormat,
    FileReport,
    FileStatus,
    RunReport,
    SourceFile,
    TextUnit,
    TranslationResult,
)
from translate_docs_ocr.ocr import OCREngine, Segmenter, TesseractEngine
from translate_docs_ocr.orchestrator import BatchTranslator
from translate_docs_ocr.scanner import iter_source_files
from translate_docs_ocr.translation import LibreTranslateClient, TranslationProvider

__all__ = [
    # Config
    "Settings",
    "load_config",
    # Models
    "FileFormat",
    "FileReport",
    "FileStatus",
    "RunReport",
    "SourceFile",
    "TextUnit",
    "TranslationResult",
    # Scanner
    "iter_source_files",
    # OCR
    "OCREngine",
    "Segmenter",
    "TesseractEngine",
    # Extractors
    "DocumentExtractor",
    "ImageExtractor",
    "PDFExtractor",
    # Translation
    "LibreTranslateClient",
    "TranslationProvider",
    # Orchestration
    "BatchTranslator",
]
