"""
VecDraw Color Helpers

Colors are plain RGB tuples. Names and hex strings are resolved
through Pillow's ImageColor tables.
"""

from typing import Dict, Tuple, Union

from PIL import ImageColor

Color = Tuple[int, int, int]
ColorLike = Union[Color, str]


def to_rgb(value: ColorLike) -> Color:
    """
    Normalize a color value to an (r, g, b) tuple.

    Args:
        value: RGB(A) tuple or any color string Pillow understands
               ("red", "#ff0000", "rgb(255,0,0)")

    Returns:
        (r, g, b) tuple of ints in 0-255

    Raises:
        ValueError: If the string is not a known color
    """
    if isinstance(value, str):
        rgb = ImageColor.getrgb(value)
    else:
        rgb = tuple(value)
    if len(rgb) < 3:
        raise ValueError(f"Color needs at least 3 components: {value!r}")
    return tuple(max(0, min(255, int(c))) for c in rgb[:3])


def _build_named_colors() -> Dict[str, Color]:
    named = {}
    for name, spec in ImageColor.colormap.items():
        named[name] = ImageColor.getrgb(spec)[:3]
    return named


_NAMED_COLORS = _build_named_colors()


def known_color_name(color: ColorLike) -> str:
    """
    Find the nearest named color.

    Distance is squared euclidean in RGB space. On ties the first
    name in table order wins, so the result is stable between runs.
    """
    r, g, b = to_rgb(color)
    best_name = ""
    best_dist = None
    for name, (nr, ng, nb) in _NAMED_COLORS.items():
        dist = (nr - r) ** 2 + (ng - g) ** 2 + (nb - b) ** 2
        if best_dist is None or dist < best_dist:
            best_name = name
            best_dist = dist
            if dist == 0:
                break
    return best_name.lower()


def color_to_hex(color: ColorLike) -> str:
    """Exact lower-case hex form of a color, e.g. 'ff0000'."""
    r, g, b = to_rgb(color)
    return f"{r:02x}{g:02x}{b:02x}"
