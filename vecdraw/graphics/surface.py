"""
Drawing Surface

Wraps a Pillow image and its ImageDraw context. The context is only
handed out through drawing_context(), which releases it on every exit
path.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]


class Surface:
    """
    Paint target for the Renderer.

    Drawing blends in RGBA mode, so semi-transparent fills and strokes
    composite over what is already on the image.
    """

    def __init__(self, image: Image.Image):
        self._image = image
        self._draw: Optional[ImageDraw.ImageDraw] = ImageDraw.Draw(image, 'RGBA')

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def is_released(self) -> bool:
        return self._draw is None

    def _context(self) -> ImageDraw.ImageDraw:
        if self._draw is None:
            raise RuntimeError("Drawing context has been released")
        return self._draw

    def clear(self, rgba: RGBA) -> None:
        """Replace every pixel with a color; no blending."""
        self._context()
        self._image.paste(rgba, (0, 0) + self._image.size)

    def fill_polygon(self, points: Sequence[Tuple[float, float]], rgba: RGBA) -> None:
        if len(points) < 2:
            return
        self._context().polygon(list(points), fill=rgba)

    def stroke_polyline(self, points: Sequence[Tuple[float, float]],
                        rgba: RGBA, width: float) -> None:
        if len(points) < 2:
            return
        self._context().line(list(points), fill=rgba,
                             width=max(1, int(round(width))), joint='curve')

    def fill_gradient(self, points: Sequence[Tuple[float, float]],
                      start: RGBA, end: RGBA, angle: float) -> None:
        """
        Fill a polygon with a two-stop linear gradient.

        The gradient runs across the polygon's bounding box in the
        direction given by angle (degrees, 0 = left to right).
        """
        self._context()
        if len(points) < 3:
            return
        pts = np.asarray(points, dtype=float)
        left = int(np.floor(pts[:, 0].min()))
        top = int(np.floor(pts[:, 1].min()))
        right = int(np.ceil(pts[:, 0].max())) + 1
        bottom = int(np.ceil(pts[:, 1].max())) + 1
        width = right - left
        height = bottom - top
        if width <= 0 or height <= 0:
            return

        theta = np.radians(angle)
        ux, uy = np.cos(theta), np.sin(theta)
        ys, xs = np.mgrid[0:height, 0:width]
        proj = xs * ux + ys * uy
        span = proj.max() - proj.min()
        t = (proj - proj.min()) / span if span > 0 else np.zeros_like(proj)

        start_arr = np.array(start, dtype=float)
        end_arr = np.array(end, dtype=float)
        pixels = start_arr + (end_arr - start_arr) * t[..., None]
        tile = Image.fromarray(np.clip(np.rint(pixels), 0, 255).astype(np.uint8), 'RGBA')

        mask = Image.new('L', (width, height), 0)
        local = [(x - left, y - top) for x, y in points]
        ImageDraw.Draw(mask).polygon(local, fill=255)

        # Composite the gradient tile through the polygon mask
        region = self._image.crop((left, top, right, bottom))
        blended = Image.alpha_composite(region, tile)
        region.paste(blended, (0, 0), mask)
        self._image.paste(region, (left, top))

    def release(self) -> None:
        """Drop the drawing context. Safe to call more than once."""
        self._draw = None


@contextmanager
def drawing_context(image: Image.Image) -> Iterator[Surface]:
    """
    Acquire a Surface over an image for the duration of a block.

    The surface is released whether the block completes or raises.
    """
    surface = Surface(image)
    logger.debug(f"Acquired drawing context {image.size[0]}x{image.size[1]}")
    try:
        yield surface
    finally:
        surface.release()
        logger.debug("Released drawing context")
