"""
SVG Export for VecDraw

Writes a Layer as a flat SVG document, one element per figure.

Known limitations, kept on purpose for output compatibility:

- The document is always 1000x1000 units, whatever the content bounds.
- Ellipses and circles are written from their untransformed box and
  carry no transform attribute, so their figure transform is lost.
- Kinds without an SVG mapping (free paths, groups) are skipped.
"""

import logging
from typing import List, Optional

from ..core.colors import known_color_name
from ..core.figure import Figure
from ..core.geometry import GeometryKind
from ..core.layer import Layer
from ..core.settings import ExportSettings
from ..core.style import Style

logger = logging.getLogger(__name__)

SVG_HEADER = [
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>',
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"',
    ' "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">',
]
SVG_FOOTER = '</svg>'


def format_number(value: float) -> str:
    """Compact decimal form: 10, 0.5, -3.25."""
    text = f"{float(value):.6f}".rstrip('0').rstrip('.')
    if text in ('-0', ''):
        return '0'
    return text


def style_attribute(style: Style) -> str:
    """
    Build the style attribute for a figure.

    Fill comes first ('fill:<name>;' or 'fill:none;'), followed by the
    stroke clause when the border is drawn; the trailing separator is
    trimmed.
    """
    if style.draws_fill:
        fill = f"fill:{known_color_name(style.fill_style.color)};"
    else:
        fill = "fill:none;"

    stroke = ""
    if style.draws_border:
        border = style.border_style
        stroke = (f"stroke:{known_color_name(border.color)};"
                  f"stroke-width:{format_number(border.width)};")
    return f'style="{(fill + stroke).rstrip(";")}"'


def transform_attribute(figure: Figure) -> str:
    """The figure's raw matrix as an SVG transform attribute."""
    values = ",".join(format_number(v) for v in figure.transform.elements)
    return f'transform="matrix({values})"'


def figure_to_svg(figure: Figure) -> Optional[str]:
    """
    Serialize one figure.

    Returns:
        The element markup, or None for kinds that have no SVG mapping
    """
    style = style_attribute(figure.style)
    transform = transform_attribute(figure)
    geometry = figure.geometry
    kind = geometry.kind

    # Box kinds use the untransformed outline
    rect = geometry.bounds
    rx = rect.width / 2
    ry = rect.height / 2

    if kind in (GeometryKind.RECTANGLE, GeometryKind.SQUARE):
        return (f'<rect x="{format_number(rect.left)}" y="{format_number(rect.top)}" '
                f'width="{format_number(rect.width)}" height="{format_number(rect.height)}" '
                f'{transform} {style}/>')
    elif kind == GeometryKind.ELLIPSE:
        cx = rect.left + rx
        cy = rect.top + ry
        return (f'<ellipse cx="{format_number(cx)}" cy="{format_number(cy)}" '
                f'rx="{format_number(rx)}" ry="{format_number(ry)}" {style}/>')
    elif kind == GeometryKind.CIRCLE:
        r = rx
        cx = rect.left + rx
        cy = rect.top + rx
        return (f'<circle cx="{format_number(cx)}" cy="{format_number(cy)}" '
                f'r="{format_number(r)}" {style}/>')
    elif kind in (GeometryKind.POLYGON, GeometryKind.POLYLINE):
        # Transform is baked into the coordinates
        points = figure.transform.apply_points(geometry.points)
        coords = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)
        return f'<{geometry.name.lower()} points="{coords}" {style}/>'
    else:
        logger.debug(f"No SVG element for {geometry.name}, skipped")
        return None


def layer_to_svg_lines(layer: Layer, settings: Optional[ExportSettings] = None) -> List[str]:
    """All output lines of the SVG document, without line terminators."""
    if settings is None:
        settings = ExportSettings()
    width, height = settings.svg_canvas_size

    lines = list(SVG_HEADER)
    lines.append(f'<svg width="{width}" height="{height}"  '
                 f'xmlns="http://www.w3.org/2000/svg" version="1.1">')
    for figure in layer.figures:
        element = figure_to_svg(figure)
        if element is not None:
            lines.append(element)
    lines.append(SVG_FOOTER)
    return lines


def export_svg(filepath: str, layer: Layer,
               settings: Optional[ExportSettings] = None) -> None:
    """
    Export a layer to an SVG file.

    Raises:
        OSError: If the file cannot be written
    """
    if settings is None:
        settings = ExportSettings()
    lines = layer_to_svg_lines(layer, settings)
    with open(filepath, 'w', encoding=settings.svg_encoding, newline='\n') as f:
        for line in lines:
            f.write(line + '\n')
    logger.info(f"Exported {len(lines) - len(SVG_HEADER) - 2} SVG elements to {filepath}")
