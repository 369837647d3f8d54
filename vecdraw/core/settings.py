"""
VecDraw Export Settings

Knobs shared by the exporters. The defaults reproduce the documented
export behavior exactly; change them only for special cases.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


def _default_raster_formats() -> Dict[str, str]:
    # Extension -> Pillow format name
    return {
        '.png': 'PNG',
        '.jpg': 'JPEG',
        '.emf': 'WMF',    # Read-only in Pillow; saving raises OSError
        '.gif': 'GIF',
        '.ico': 'ICO',
        '.tif': 'TIFF',
    }


@dataclass
class ExportSettings:
    """Parameters for raster and SVG export."""
    # Raster
    margin: int = 1                      # Canvas margin without a background
    default_raster_format: str = 'BMP'   # For unknown or missing extensions
    raster_formats: Dict[str, str] = field(default_factory=_default_raster_formats)

    # SVG
    svg_canvas_size: Tuple[int, int] = (1000, 1000)
    svg_encoding: str = 'utf-8'
