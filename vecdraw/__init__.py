"""
VecDraw - 2D vector figure model with raster and SVG export.

Build figures from a Geometry, a Transform and a Style, collect them
in a Layer, then export with export_raster() or export_svg().
"""

from .core import (
    Point, BoundingBox, Path, GeometryKind, Geometry,
    Transform, DashStyle, LinearGradient, FillStyle, BorderStyle, Style,
    Figure, GroupFigure, Layer, ExportSettings,
)
from .graphics import Renderer, default_renderer
from .io import export_raster, export_svg, normalize_layer

__version__ = "0.1.0"

__all__ = [
    'Point', 'BoundingBox', 'Path', 'GeometryKind', 'Geometry',
    'Transform', 'DashStyle', 'LinearGradient', 'FillStyle', 'BorderStyle', 'Style',
    'Figure', 'GroupFigure', 'Layer', 'ExportSettings',
    'Renderer', 'default_renderer',
    'export_raster', 'export_svg', 'normalize_layer',
]
