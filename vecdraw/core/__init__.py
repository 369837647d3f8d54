"""
VecDraw Core Module

Contains the core data structures:
- Geometry: local shape definitions and their outlines
- Transform: 2D affine matrices
- Style: fill and border paint
- Figure / GroupFigure: drawable shapes and composites
- Layer: ordered figures plus a background fill
"""

# Import order matters - geometry first, then transform, style, figure, layer
from .colors import Color, to_rgb, known_color_name, color_to_hex
from .geometry import (
    Point, BoundingBox, Path, GeometryKind, Geometry, ELLIPSE_SEGMENTS
)
from .transform import Transform, compose
from .style import DashStyle, LinearGradient, FillStyle, BorderStyle, Style
from .figure import Figure, GroupFigure, Drawable, iter_leaves, members_bounds
from .layer import Layer
from .settings import ExportSettings

__all__ = [
    'Color', 'to_rgb', 'known_color_name', 'color_to_hex',
    'Point', 'BoundingBox', 'Path', 'GeometryKind', 'Geometry', 'ELLIPSE_SEGMENTS',
    'Transform', 'compose',
    'DashStyle', 'LinearGradient', 'FillStyle', 'BorderStyle', 'Style',
    'Figure', 'GroupFigure', 'Drawable', 'iter_leaves', 'members_bounds',
    'Layer',
    'ExportSettings',
]
