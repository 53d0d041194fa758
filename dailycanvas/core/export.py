"""Raster export of a pixel matrix."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage

from dailycanvas.core.painting import DEFAULT_INITIAL_COLOR
from dailycanvas.core.schemas import is_hex_color

logger = logging.getLogger(__name__)

PIXEL_SCALE = 20
_PLACEHOLDER_COLOR = "#CCCCCC"
_PLACEHOLDER_SIZE = 8 * PIXEL_SCALE


def default_filename(size: int) -> str:
    return f"pixel-art-{size}x{size}.png"


def render_image(pixels: Optional[List[List[str]]], scale: int = PIXEL_SCALE) -> QImage:
    """Draw each cell as a ``scale`` x ``scale`` block."""
    scale = max(1, int(scale))
    if not pixels or not pixels[0]:
        logger.error("Pixel data is empty; exporting a placeholder image")
        image = QImage(_PLACEHOLDER_SIZE, _PLACEHOLDER_SIZE, QImage.Format.Format_RGB32)
        image.fill(QColor(_PLACEHOLDER_COLOR))
        return image

    size = len(pixels)
    image = QImage(size, size, QImage.Format.Format_RGB32)
    fallback = QColor(DEFAULT_INITIAL_COLOR)
    for r in range(size):
        row = pixels[r] or []
        for c in range(size):
            value = row[c] if c < len(row) else None
            image.setPixelColor(c, r, QColor(value) if is_hex_color(value) else fallback)
    return image.scaled(
        size * scale,
        size * scale,
        Qt.AspectRatioMode.IgnoreAspectRatio,
        Qt.TransformationMode.FastTransformation,
    )


def export_png(pixels: Optional[List[List[str]]], path: Path, scale: int = PIXEL_SCALE) -> bool:
    image = render_image(pixels, scale)
    ok = image.save(str(path), "PNG")
    if ok:
        logger.info("Exported pixel art to %s", path)
    else:
        logger.warning("Could not export pixel art to %s", path)
    return ok
