"""
Dash Pattern Expansion

Pillow draws only continuous lines, so dashed borders are expanded
into the list of visible runs before stroking.
"""

import math
from typing import List, Sequence, Tuple

import numpy as np


def dash_segments(points, closed: bool, pattern: Sequence[float],
                  width: float) -> List[List[Tuple[float, float]]]:
    """
    Split an outline into visible dash runs.

    Args:
        points: (N, 2) outline vertices
        closed: Whether the outline returns to its first point
        pattern: On/off lengths in multiples of the stroke width,
                 starting with "on". Empty means solid.
        width: Stroke width; scales the pattern

    Returns:
        List of polylines, each a list of (x, y) tuples
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    vertices = [(float(x), float(y)) for x, y in pts]
    if closed and len(vertices) > 1:
        vertices.append(vertices[0])
    if len(vertices) < 2:
        return []
    if not pattern:
        return [vertices]

    lengths = [max(p * width, 1e-6) for p in pattern]
    runs: List[List[Tuple[float, float]]] = []
    index = 0
    remaining = lengths[0]
    current: List[Tuple[float, float]] = [vertices[0]]

    for (x1, y1), (x2, y2) in zip(vertices, vertices[1:]):
        seg_len = math.hypot(x2 - x1, y2 - y1)
        if seg_len < 1e-12:
            continue
        pos = 0.0
        while seg_len - pos > remaining:
            pos += remaining
            t = pos / seg_len
            cut = (x1 + (x2 - x1) * t, y1 + (y2 - y1) * t)
            if index % 2 == 0:
                current.append(cut)
                runs.append(current)
                current = []
            else:
                current = [cut]
            index = (index + 1) % len(lengths)
            remaining = lengths[index]
        remaining -= seg_len - pos
        if index % 2 == 0:
            current.append((x2, y2))

    if index % 2 == 0 and len(current) > 1:
        runs.append(current)
    return runs
