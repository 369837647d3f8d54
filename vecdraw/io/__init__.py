"""
VecDraw I/O Module

Handles export of layers to raster images and SVG.
"""

from .raster_export import CanvasFrame, normalize_layer, image_format_for, export_raster
from .svg_export import (
    export_svg, figure_to_svg, layer_to_svg_lines, style_attribute, format_number
)

__all__ = [
    'CanvasFrame', 'normalize_layer', 'image_format_for', 'export_raster',
    'export_svg', 'figure_to_svg', 'layer_to_svg_lines', 'style_attribute',
    'format_number',
]
