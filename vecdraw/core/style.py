"""
VecDraw Style Module

Paint attributes for figures and layers. A figure's Style holds two
independent sub-styles; a sub-style of None means that aspect is
neither drawn nor exported, which is not the same as a visible style
with zero opacity.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from .colors import ColorLike, to_rgb


class DashStyle(Enum):
    """Named stroke dash patterns."""
    SOLID = "Solid"
    DASH = "Dash"
    DOT = "Dot"
    DASH_DOT = "DashDot"
    DASH_DOT_DOT = "DashDotDot"

    @property
    def pattern(self) -> Tuple[float, ...]:
        """
        On/off lengths in multiples of the stroke width.

        An empty tuple means a continuous line.
        """
        return _DASH_PATTERNS[self]

    @classmethod
    def names(cls) -> List[str]:
        """Display names in editor order."""
        return [member.value for member in cls]


_DASH_PATTERNS = {
    DashStyle.SOLID: (),
    DashStyle.DASH: (3.0, 1.0),
    DashStyle.DOT: (1.0, 1.0),
    DashStyle.DASH_DOT: (3.0, 1.0, 1.0, 1.0),
    DashStyle.DASH_DOT_DOT: (3.0, 1.0, 1.0, 1.0, 1.0, 1.0),
}


def _check_opacity(opacity: int) -> int:
    opacity = int(opacity)
    if not 0 <= opacity <= 255:
        raise ValueError(f"Opacity must be in 0-255, got {opacity}")
    return opacity


def _check_width(width: float) -> float:
    if width <= 0:
        raise ValueError(f"Border width must be positive, got {width}")
    return width


def _to_dash_style(value) -> DashStyle:
    if isinstance(value, DashStyle):
        return value
    return DashStyle(value)


class _CheckedFields:
    """
    Runs field checks on every assignment, not only in __init__.

    The editor writes style fields directly, so a color string or an
    out-of-range opacity set after construction is normalized or
    rejected the same way as a constructor argument.
    """
    _checks = {}

    def __setattr__(self, name, value):
        check = self._checks.get(name)
        if check is not None:
            value = check(value)
        super().__setattr__(name, value)


@dataclass
class LinearGradient(_CheckedFields):
    """Second stop of a two-color linear gradient fill."""
    color: ColorLike = (0, 0, 0)
    angle: float = 0.0           # Degrees, 0 = left to right

    _checks = {'color': to_rgb}


@dataclass
class FillStyle(_CheckedFields):
    """Interior paint of a figure, or the background of a layer."""
    color: ColorLike = (255, 255, 255)
    opacity: int = 255           # 0 (transparent) - 255 (opaque)
    is_visible: bool = True
    gradient: Optional[LinearGradient] = None

    _checks = {'color': to_rgb, 'opacity': _check_opacity}

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (*self.color, self.opacity)


@dataclass
class BorderStyle(_CheckedFields):
    """Outline paint of a figure."""
    color: ColorLike = (0, 0, 0)
    width: float = 1.0
    dash_style: DashStyle = DashStyle.SOLID
    is_visible: bool = True
    opacity: int = 255

    _checks = {
        'color': to_rgb,
        'width': _check_width,
        'dash_style': _to_dash_style,
        'opacity': _check_opacity,
    }

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (*self.color, self.opacity)


@dataclass
class Style:
    """Fill and border of a figure; either may be absent."""
    fill_style: Optional[FillStyle] = field(default_factory=FillStyle)
    border_style: Optional[BorderStyle] = field(default_factory=BorderStyle)

    @property
    def draws_fill(self) -> bool:
        return self.fill_style is not None and self.fill_style.is_visible

    @property
    def draws_border(self) -> bool:
        return self.border_style is not None and self.border_style.is_visible

    def copy(self) -> 'Style':
        """Deep copy; no sub-style or gradient is shared with the clone."""
        fill = None
        if self.fill_style is not None:
            gradient = self.fill_style.gradient
            if gradient is not None:
                gradient = replace(gradient)
            fill = replace(self.fill_style, gradient=gradient)
        border = None
        if self.border_style is not None:
            border = replace(self.border_style)
        return Style(fill, border)
