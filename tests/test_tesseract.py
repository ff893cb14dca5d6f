"""
Tests for the Tesseract engine, with pytesseract calls mocked out.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import pytesseract
from PIL import Image

from translate_docs_ocr.ocr import Region, TesseractEngine

# image_to_data rows: page, two blocks, paragraphs, a line and a word
LAYOUT = {
    "level": [1, 2, 3, 4, 5, 2, 3, 3],
    "page_num": [1, 1, 1, 1, 1, 1, 1, 1],
    "block_num": [0, 1, 1, 1, 1, 2, 2, 2],
    "par_num": [0, 0, 1, 1, 1, 0, 1, 2],
    "left": [0, 10, 10, 10, 10, 10, 10, 10],
    "top": [0, 10, 10, 10, 10, 100, 100, 150],
    "width": [200, 180, 180, 180, 40, 180, 180, 90],
    "height": [300, 50, 50, 20, 20, 90, 40, 40],
    "text": ["", "", "", "", "Привет", "", "", ""],
}


@pytest.fixture
def image() -> Image.Image:
    return Image.new("RGB", (200, 300), "white")


def test_layout_blocks_groups_paragraphs_under_blocks(
    monkeypatch: pytest.MonkeyPatch, image: Image.Image
) -> None:
    captured: dict[str, Any] = {}

    def fake_image_to_data(img: Image.Image, lang: str, config: str, output_type: str) -> dict:
        captured.update(lang=lang, config=config, output_type=output_type)
        return LAYOUT

    monkeypatch.setattr(pytesseract, "image_to_data", fake_image_to_data)

    engine = TesseractEngine(language="rus", page_segmentation_mode=3)
    engine.load_image(image)
    blocks = engine.layout_blocks()

    assert [b.region for b in blocks] == [Region(10, 10, 180, 50), Region(10, 100, 180, 90)]
    assert blocks[0].children == [Region(10, 10, 180, 50)]
    assert blocks[1].children == [Region(10, 100, 180, 40), Region(10, 150, 90, 40)]
    assert captured["lang"] == "rus"
    assert captured["output_type"] == pytesseract.Output.DICT
    assert "--psm 3" in captured["config"]


def test_recognize_text_crops_to_region(
    monkeypatch: pytest.MonkeyPatch, image: Image.Image
) -> None:
    sizes: list[tuple[int, int]] = []

    def fake_image_to_string(img: Image.Image, lang: str, config: str) -> str:
        sizes.append(img.size)
        return "текст\n"

    monkeypatch.setattr(pytesseract, "image_to_string", fake_image_to_string)

    engine = TesseractEngine()
    engine.load_image(image)
    assert engine.recognize_text() == "текст\n"

    engine.set_region(Region(left=10, top=20, width=30, height=40))
    engine.recognize_text()

    assert sizes == [(200, 300), (30, 40)]


def test_empty_region_skips_recognition(
    monkeypatch: pytest.MonkeyPatch, image: Image.Image
) -> None:
    def fail(*args: Any, **kwargs: Any) -> str:
        raise AssertionError("tesseract should not run")

    monkeypatch.setattr(pytesseract, "image_to_string", fail)

    engine = TesseractEngine()
    engine.load_image(image)
    engine.set_region(Region(left=0, top=0, width=0, height=10))

    assert engine.recognize_text() == ""


def test_loading_an_image_resets_the_region(
    monkeypatch: pytest.MonkeyPatch, image: Image.Image
) -> None:
    sizes: list[tuple[int, int]] = []
    monkeypatch.setattr(
        pytesseract, "image_to_string", lambda img, lang, config: sizes.append(img.size) or ""
    )

    engine = TesseractEngine()
    engine.load_image(image)
    engine.set_region(Region(left=0, top=0, width=5, height=5))
    engine.load_image(image)
    engine.recognize_text()

    assert sizes == [(200, 300)]


def test_load_image_from_path_converts_to_rgb(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "scan.png"
    Image.new("RGBA", (20, 10), (255, 255, 255, 0)).save(path)
    modes: list[str] = []
    monkeypatch.setattr(
        pytesseract, "image_to_string", lambda img, lang, config: modes.append(img.mode) or ""
    )

    engine = TesseractEngine()
    engine.load_image(path)
    engine.recognize_text()

    assert modes == ["RGB"]


def test_recognize_without_image_raises() -> None:
    with pytest.raises(RuntimeError, match="No image loaded"):
        TesseractEngine().recognize_text()


def test_config_includes_tessdata_dir(tmp_path: Path) -> None:
    engine = TesseractEngine(tessdata_dir=tmp_path, page_segmentation_mode=6)

    assert engine.config == f'--psm 6 --tessdata-dir "{tmp_path}"'
    assert engine.name == "tesseract:rus"
