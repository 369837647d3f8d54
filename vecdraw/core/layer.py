"""
VecDraw Layer System

A layer is an ordered list of figures plus a background fill.
It is the unit handed to the exporters.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .figure import Drawable, members_bounds
from .geometry import BoundingBox
from .style import FillStyle


def _hidden_background() -> FillStyle:
    return FillStyle(color=(255, 255, 255), opacity=255, is_visible=False)


@dataclass(eq=False)
class Layer:
    """
    An ordered collection of figures with a canvas-level fill.

    Figures are painted and exported in list order; later figures
    cover earlier ones.
    """
    name: str = "Layer"
    figures: List[Drawable] = field(default_factory=list)

    # Background; None or invisible means a transparent canvas
    fill_style: Optional[FillStyle] = field(default_factory=_hidden_background)

    @property
    def has_background(self) -> bool:
        return self.fill_style is not None and self.fill_style.is_visible

    def add_figure(self, figure: Drawable) -> None:
        """Add a figure on top of the others."""
        self.figures.append(figure)

    def remove_figure(self, figure: Drawable) -> None:
        """Remove a figure from this layer."""
        if figure in self.figures:
            self.figures.remove(figure)

    def move_figure_up(self, figure: Drawable) -> None:
        """Move figure up in the z-order."""
        if figure not in self.figures:
            return
        idx = self.figures.index(figure)
        if idx < len(self.figures) - 1:
            self.figures[idx], self.figures[idx + 1] = \
                self.figures[idx + 1], self.figures[idx]

    def move_figure_down(self, figure: Drawable) -> None:
        """Move figure down in the z-order."""
        if figure not in self.figures:
            return
        idx = self.figures.index(figure)
        if idx > 0:
            self.figures[idx], self.figures[idx - 1] = \
                self.figures[idx - 1], self.figures[idx]

    def bounds(self) -> BoundingBox:
        """World bounds of all figures; the zero box when empty."""
        return members_bounds(self.figures)
