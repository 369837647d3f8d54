"""
Raster Export for VecDraw

Renders a Layer into a bitmap and saves it with Pillow. The image
format follows the output file extension.

Canvas framing depends on the layer background:

- visible background: the canvas is (left * 2 + width, top * 2 + height),
  so the content's offset from the origin is mirrored as margin on the
  far side; figures keep their world coordinates.
- no background: the canvas is (width + 2, height + 2) and the content
  is shifted so its bounds start one unit from the origin.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from ..core.figure import GroupFigure
from ..core.geometry import BoundingBox
from ..core.layer import Layer
from ..core.settings import ExportSettings
from ..graphics.surface import drawing_context

logger = logging.getLogger(__name__)

# Formats that cannot store an alpha channel
_OPAQUE_FORMATS = {'JPEG', 'BMP'}

# Largest frame the ICO container can hold
_ICO_MAX_SIZE = 256


@dataclass
class CanvasFrame:
    """Result of framing a layer for raster export."""
    width: int
    height: int
    group: GroupFigure
    bounds: BoundingBox


def normalize_layer(layer: Layer, settings: Optional[ExportSettings] = None) -> CanvasFrame:
    """
    Compute the canvas size and the positioned group for a layer.

    The group is a new GroupFigure sharing the layer's figures; only
    the group's own transform is ever translated, so the layer is
    left untouched.

    Args:
        layer: Layer to frame
        settings: Export settings (margin)

    Returns:
        CanvasFrame with integer canvas size (truncated toward zero)
    """
    if settings is None:
        settings = ExportSettings()

    group = GroupFigure(layer.figures)
    bounds = group.transformed_path().bounds

    if layer.has_background:
        width = int(bounds.left * 2 + bounds.width)
        height = int(bounds.top * 2 + bounds.height)
    else:
        margin = settings.margin
        width = int(bounds.width + 2 * margin)
        height = int(bounds.height + 2 * margin)
        group.transform.translate(margin - bounds.left, margin - bounds.top)

    return CanvasFrame(width=width, height=height, group=group, bounds=bounds)


def image_format_for(filepath: str, settings: Optional[ExportSettings] = None) -> str:
    """
    Pillow format name for an output path.

    Unknown or missing extensions fall back to the default bitmap
    format rather than failing.
    """
    if settings is None:
        settings = ExportSettings()
    extension = os.path.splitext(str(filepath))[1].lower()
    return settings.raster_formats.get(extension, settings.default_raster_format)


def export_raster(filepath: str, layer: Layer,
                  settings: Optional[ExportSettings] = None) -> None:
    """
    Export a layer to a raster image file.

    Args:
        filepath: Output path; its extension selects the format
        layer: Layer to render
        settings: Export settings

    Notes:
        ".emf" maps to Pillow's WMF plugin, which can read metafiles
        but has no save handler, so exporting to ".emf" always raises
        OSError. ".ico" output is a single frame capped at 256x256.

    Raises:
        OSError: If the file cannot be written or the format cannot
                 be encoded. The image and drawing context are
                 released before the error propagates.
    """
    if settings is None:
        settings = ExportSettings()

    frame = normalize_layer(layer, settings)
    image_format = image_format_for(filepath, settings)

    # Encoders reject empty images
    size = (max(1, frame.width), max(1, frame.height))
    logger.debug(f"Raster canvas {frame.width}x{frame.height}, format {image_format}")

    with Image.new('RGBA', size, (0, 0, 0, 0)) as image:
        with drawing_context(image) as surface:
            frame.group.renderer.render(surface, frame.group, layer.fill_style)
        _save_image(image, filepath, image_format)

    logger.info(f"Exported {len(layer.figures)} figures to {filepath}")


def _save_image(image: Image.Image, filepath: str, image_format: str) -> None:
    if image_format == 'ICO':
        # One frame at canvas size; icons are capped at 256x256
        width, height = image.size
        image.save(filepath, format=image_format,
                   sizes=[(min(width, _ICO_MAX_SIZE), min(height, _ICO_MAX_SIZE))])
    elif image_format in _OPAQUE_FORMATS:
        with image.convert('RGB') as opaque:
            opaque.save(filepath, format=image_format)
    else:
        image.save(filepath, format=image_format)
