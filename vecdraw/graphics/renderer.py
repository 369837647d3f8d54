"""
Figure Renderer

Paints figures and groups onto a Surface. The renderer holds no state,
so a single instance is shared by every figure.
"""

import logging
from typing import List, Optional, Tuple

from ..core.figure import Drawable, Figure, iter_leaves
from ..core.geometry import GeometryKind, Path
from ..core.style import FillStyle
from ..core.transform import Transform
from .dashes import dash_segments
from .surface import Surface

logger = logging.getLogger(__name__)


class Renderer:
    """
    Draws drawables onto a surface.

    Groups are rendered member by member in list order (painter's
    algorithm). Each leaf is filled first, then stroked.
    """

    def render(self, surface: Surface, drawable: Drawable,
               background: Optional[FillStyle] = None) -> None:
        """
        Render a figure or group.

        Args:
            surface: Target surface
            drawable: Figure or GroupFigure to paint
            background: Canvas fill; when present and visible the
                        surface is cleared to it first
        """
        if background is not None and background.is_visible:
            surface.clear(background.rgba)
        for figure, world in iter_leaves(drawable):
            self.render_figure(surface, figure, world)

    def render_figure(self, surface: Surface, figure: Figure,
                      world: Transform = None) -> None:
        """Paint a single leaf figure with an explicit world transform."""
        if world is None:
            world = figure.transform
        outline = self.outline(figure, world)
        if outline is None:
            logger.debug(f"Nothing to paint for {figure.geometry.name}")
            return
        style = figure.style
        points = outline.point_list()

        if style.draws_fill:
            self._fill(surface, points, style.fill_style)
        if style.draws_border:
            border = style.border_style
            for run in dash_segments(outline.points, outline.closed,
                                     border.dash_style.pattern, border.width):
                surface.stroke_polyline(run, border.rgba, border.width)

    def outline(self, figure: Figure, world: Transform) -> Optional[Path]:
        """World-space outline for a leaf, dispatched on geometry kind."""
        geometry = figure.geometry
        kind = geometry.kind
        if kind in (GeometryKind.RECTANGLE, GeometryKind.SQUARE,
                    GeometryKind.ELLIPSE, GeometryKind.CIRCLE,
                    GeometryKind.POLYGON, GeometryKind.POLYLINE, GeometryKind.PATH):
            return world.apply_path(geometry.local_path())
        elif kind == GeometryKind.GROUP:
            # Synthesized group boxes are never painted
            return None
        else:
            logger.warning(f"Unknown geometry kind {kind!r}, not painted")
            return None

    def _fill(self, surface: Surface, points: List[Tuple[float, float]],
              fill: FillStyle) -> None:
        if fill.gradient is not None:
            end = (*fill.gradient.color, fill.opacity)
            surface.fill_gradient(points, fill.rgba, end, fill.gradient.angle)
        else:
            surface.fill_polygon(points, fill.rgba)


default_renderer = Renderer()
