"""
Shared fixtures for translate-docs-ocr tests.

Provides a scripted OCR engine, a stateless stub translator and helpers
that build small PDF, DOCX and image files on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import fitz  # PyMuPDF
import pytest
from docx import Document
from PIL import Image

from translate_docs_ocr.models import TranslationResult
from translate_docs_ocr.ocr import Block, OCREngine, Region
from translate_docs_ocr.translation import TranslationProvider


class FakeEngine(OCREngine):
    """
    OCR engine driven by a script instead of Tesseract.

    Each load_image call consumes the next entry of ``scripts``: a list of
    blocks, each block a list of region texts. Once the scripts run out,
    images have no blocks.
    """

    def __init__(self, scripts: list[list[list[str]]] | None = None):
        self.scripts = list(scripts or [])
        self.loaded: list[Any] = []
        self.calls: list[str] = []
        self._blocks: list[Block] = []
        self._texts: dict[Region, str] = {}
        self._region: Region | None = None

    @property
    def name(self) -> str:
        return "fake"

    def load_image(self, image: Any) -> None:
        self.calls.append("load_image")
        self.loaded.append(image)
        script = self.scripts.pop(0) if self.scripts else []

        self._blocks = []
        self._texts = {}
        self._region = None
        top = 0
        for block_texts in script:
            children = []
            for text in block_texts:
                region = Region(left=0, top=top, width=100, height=10)
                self._texts[region] = text
                children.append(region)
                top += 10
            height = 10 * len(children)
            block_region = Region(left=0, top=top - height, width=100, height=height)
            self._blocks.append(Block(region=block_region, children=children))

    def layout_blocks(self) -> list[Block]:
        self.calls.append("layout_blocks")
        return list(self._blocks)

    def set_region(self, region: Region) -> None:
        self.calls.append("set_region")
        self._region = region

    def recognize_text(self) -> str:
        self.calls.append("recognize_text")
        return self._texts[self._region]


class StubTranslator(TranslationProvider):
    """
    Stateless translator returning ``EN[<stripped text>]``.

    Fails for any text whose stripped form is in ``fail_on`` and, like
    LibreTranslate, for blank text unless ``fail_blank`` is False.
    """

    def __init__(self, fail_on: set[str] | None = None, fail_blank: bool = True):
        self.fail_on = fail_on or set()
        self.fail_blank = fail_blank
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return "stub"

    @property
    def source_language(self) -> str:
        return "ru"

    @property
    def target_language(self) -> str:
        return "en"

    async def __aenter__(self) -> StubTranslator:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    async def translate(self, text: str) -> TranslationResult:
        self.calls.append(text)
        if text.strip() in self.fail_on:
            return TranslationResult.failure("rejected by stub")
        if self.fail_blank and not text.strip():
            return TranslationResult.failure("Invalid request: missing q parameter")
        return TranslationResult.success(f"EN[{text.strip()}]")


# ============================================================================
# FILE BUILDERS
# ============================================================================


def make_pdf(path: Path, pages: list[tuple[float, float]]) -> Path:
    """Write a PDF with one page per (width, height) pair, in points."""
    doc = fitz.open()
    for index, (width, height) in enumerate(pages):
        page = doc.new_page(width=width, height=height)
        page.insert_text((36, 36), f"Page {index}")
    doc.save(str(path))
    doc.close()
    return path


def make_docx(path: Path, paragraphs: list[str]) -> Path:
    """Write a DOCX whose body holds the given paragraphs."""
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    doc.save(str(path))
    return path


def make_image(path: Path, size: tuple[int, int] = (64, 48)) -> Path:
    """Write a blank image; the format follows the file extension."""
    Image.new("RGB", size, "white").save(path)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging so later tests see the default logger state."""
    yield
    logger = logging.getLogger("translate_docs_ocr")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
