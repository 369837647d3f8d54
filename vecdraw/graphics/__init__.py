"""
VecDraw Graphics Module

Contains the rendering components:
- Surface: Pillow image plus drawing context
- Renderer: paints figures and groups
- Dashes: dash pattern expansion for borders
"""

from .surface import Surface, drawing_context
from .dashes import dash_segments
from .renderer import Renderer, default_renderer

__all__ = [
    'Surface',
    'drawing_context',
    'dash_segments',
    'Renderer',
    'default_renderer',
]
