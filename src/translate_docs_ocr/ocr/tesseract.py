"""
Tesseract-based OCR engine.

Uses pytesseract for layout analysis and recognition on Pillow images.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytesseract
from PIL import Image

from translate_docs_ocr.ocr.base import Block, OCREngine, Region

logger = logging.getLogger(__name__)

# Tesseract page iterator levels as reported by image_to_data
LEVEL_BLOCK = 2
LEVEL_PARAGRAPH = 3


class TesseractEngine(OCREngine):
    """
    OCR engine backed by the Tesseract binary.

    Layout analysis reports blocks with their paragraphs as sub-regions.
    Recognition runs on a crop of the current image bounded by the
    current region.
    """

    def __init__(
        self,
        language: str = "rus",
        tessdata_dir: Path | None = None,
        page_segmentation_mode: int = 3,
        tesseract_cmd: str | None = None,
    ):
        """
        Initialize Tesseract engine.

        Args:
            language: Tesseract language model name (e.g. 'rus', 'eng+rus').
            tessdata_dir: Directory holding the language model data.
            page_segmentation_mode: Tesseract --psm value.
            tesseract_cmd: Path to the tesseract binary, if not on PATH.
        """
        self._language = language
        self._tessdata_dir = tessdata_dir
        self._psm = page_segmentation_mode
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

        self._image: Image.Image | None = None
        self._region: Region | None = None

    @property
    def name(self) -> str:
        return f"tesseract:{self._language}"

    @property
    def config(self) -> str:
        """Extra command line options passed to tesseract."""
        options = [f"--psm {self._psm}"]
        if self._tessdata_dir:
            options.append(f'--tessdata-dir "{self._tessdata_dir}"')
        return " ".join(options)

    def load_image(self, image: Image.Image | Path | str) -> None:
        if isinstance(image, Image.Image):
            self._image = image.convert("RGB") if image.mode not in ("RGB", "L") else image
        else:
            with Image.open(image) as img:
                self._image = img.convert("RGB")
        self._region = None
        logger.debug("Loaded image %sx%s", self._image.width, self._image.height)

    def _current_image(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("No image loaded into the OCR engine")
        return self._image

    def layout_blocks(self) -> list[Block]:
        data: dict[str, list[Any]] = pytesseract.image_to_data(
            self._current_image(),
            lang=self._language,
            config=self.config,
            output_type=pytesseract.Output.DICT,
        )

        blocks: dict[tuple[int, int], Block] = {}
        for i, level in enumerate(data["level"]):
            key = (int(data["page_num"][i]), int(data["block_num"][i]))
            region = Region(
                left=int(data["left"][i]),
                top=int(data["top"][i]),
                width=int(data["width"][i]),
                height=int(data["height"][i]),
            )
            if level == LEVEL_BLOCK:
                blocks[key] = Block(region=region)
            elif level == LEVEL_PARAGRAPH and key in blocks:
                blocks[key].children.append(region)

        # dicts keep insertion order, which is tesseract's reading order
        return list(blocks.values())

    def set_region(self, region: Region) -> None:
        self._region = region

    def recognize_text(self) -> str:
        image = self._current_image()
        if self._region is not None:
            if self._region.is_empty:
                return ""
            image = image.crop(self._region.box)

        return pytesseract.image_to_string(image, lang=self._language, config=self.config)
