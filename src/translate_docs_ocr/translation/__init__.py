"""
Translation service clients for translate-docs-ocr.
"""

from translate_docs_ocr.translation.base import TranslationError, TranslationProvider
from translate_docs_ocr.translation.libretranslate import LibreTranslateClient

__all__ = ["LibreTranslateClient", "TranslationError", "TranslationProvider"]
