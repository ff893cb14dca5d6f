"""
Base classes and interfaces for OCR engines.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image


@dataclass(frozen=True)
class Region:
    """A rectangular area of a raster image, in pixels."""

    left: int
    top: int
    width: int
    height: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) box as used by Pillow."""
        return (self.left, self.top, self.left + self.width, self.top + self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass
class Block:
    """A block found by layout analysis, with its nested sub-regions."""

    region: Region
    children: list[Region] = field(default_factory=list)

    @property
    def regions(self) -> list[Region]:
        """Sub-regions to recognize; the block itself when it has none."""
        return self.children or [self.region]


class OCREngine(ABC):
    """
    Abstract base class for OCR engines.

    An engine holds one current image and one current recognition region at
    a time, so an instance must only ever be driven by one caller at once.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name."""
        ...

    @abstractmethod
    def load_image(self, image: Image.Image | Path | str) -> None:
        """Make an image (in memory or on disk) the current image."""
        ...

    @abstractmethod
    def layout_blocks(self) -> list[Block]:
        """
        Run block-level layout analysis on the current image.

        Returns:
            Blocks in the engine's reading order.
        """
        ...

    @abstractmethod
    def set_region(self, region: Region) -> None:
        """Restrict recognition to a region of the current image."""
        ...

    @abstractmethod
    def recognize_text(self) -> str:
        """Recognize UTF-8 text inside the current region."""
        ...
