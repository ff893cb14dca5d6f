"""
Base classes for translation providers.

Defines the interface the extractors use to translate text units.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from translate_docs_ocr.models import TranslationResult


class TranslationError(RuntimeError):
    """Raised when a translation is required to succeed but did not."""


class TranslationProvider(ABC):
    """
    Abstract base class for translation providers.

    The language pair is fixed when the provider is created and applies to
    every call made during a run.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging and identification."""
        ...

    @property
    @abstractmethod
    def source_language(self) -> str:
        ...

    @property
    @abstractmethod
    def target_language(self) -> str:
        ...

    @abstractmethod
    async def translate(self, text: str) -> TranslationResult:
        """
        Translate text from the source to the target language.

        Remote and transport failures are returned as a failed
        TranslationResult, never raised.

        Args:
            text: Text to translate, submitted as-is.

        Returns:
            TranslationResult with the translated text or a failure reason.
        """
        ...

    async def translate_or_raise(self, text: str) -> str:
        """Translate text, raising TranslationError on failure."""
        result = await self.translate(text)
        if not result.ok:
            raise TranslationError(result.error)
        return result.text
