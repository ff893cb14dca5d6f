"""
Region segmentation for raster images.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from translate_docs_ocr.ocr.base import OCREngine, Region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextFragment:
    """Recognized text for one region, with its position in segmentation order."""

    index: int
    region: Region
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


class Segmenter:
    """
    Splits the engine's current image into text fragments.

    Blocks come from the engine's layout analysis in the order it reports
    them; each block is expanded to its sub-regions. No confidence filtering
    is applied, so blank and noisy regions are yielded too.
    """

    def iter_fragments(self, engine: OCREngine) -> Iterator[TextFragment]:
        """
        Lazily recognize text region by region.

        The engine must not be used for anything else until the iterator is
        exhausted: each step moves the engine's recognition region.

        Args:
            engine: OCR engine with an image already loaded.

        Yields:
            TextFragment per region, in segmentation order.
        """
        blocks = engine.layout_blocks()
        logger.debug("Layout analysis found %d blocks", len(blocks))

        index = 0
        for block in blocks:
            for region in block.regions:
                engine.set_region(region)
                text = engine.recognize_text()
                yield TextFragment(index=index, region=region, text=text)
                index += 1
