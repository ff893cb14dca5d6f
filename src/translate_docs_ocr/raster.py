"""
PDF page rasterization using PyMuPDF.
"""

from __future__ import annotations

from dataclasses import dataclass

import fitz  # PyMuPDF
from PIL import Image


@dataclass(frozen=True)
class PageRenderConfig:
    """Size and rotation policy for rendering a PDF page."""

    target_width: int = 2000
    max_height: int = 2000
    landscape_rotation: int = 90


def compute_render_geometry(
    width: float,
    height: float,
    config: PageRenderConfig,
) -> tuple[float, int]:
    """
    Work out zoom and rotation for a page of the given size in points.

    Landscape pages (wider than tall) are rotated first; the rotated page is
    then scaled to the target width, shrinking further if that would exceed
    the maximum height.

    Returns:
        Tuple of (zoom factor, rotation in degrees).
    """
    rotation = config.landscape_rotation if width > height else 0
    if rotation in (90, 270):
        width, height = height, width

    zoom = config.target_width / width
    if height * zoom > config.max_height:
        zoom = config.max_height / height

    return zoom, rotation


def render_page(page: fitz.Page, config: PageRenderConfig) -> Image.Image:
    """Render a PDF page to an RGB Pillow image."""
    zoom, rotation = compute_render_geometry(page.rect.width, page.rect.height, config)
    matrix = fitz.Matrix(zoom, zoom).prerotate(rotation)
    pix = page.get_pixmap(matrix=matrix, alpha=False)
    return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
