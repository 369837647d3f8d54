"""
VecDraw Core Geometry Module

Defines the local-coordinate shape definitions: Point, BoundingBox,
Path and Geometry. Geometry never knows about transforms; a figure's
transform is applied to the local path afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple
import math

import numpy as np


# Number of vertices used to flatten ellipses and circles.
# A multiple of 4 so the extreme points land exactly on the box edges.
ELLIPSE_SEGMENTS = 64


@dataclass
class Point:
    """A 2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points) -> 'BoundingBox':
        """Bounds of a point set; the empty set gives the zero box."""
        arr = np.asarray(points, dtype=float).reshape(-1, 2)
        if len(arr) == 0:
            return cls(0.0, 0.0, 0.0, 0.0)
        mins = arr.min(axis=0)
        maxs = arr.max(axis=0)
        return cls(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))

    @classmethod
    def from_rect(cls, left: float, top: float,
                  width: float, height: float) -> 'BoundingBox':
        return cls(left, top, left + width, top + height)

    @property
    def left(self) -> float:
        return self.min_x

    @property
    def top(self) -> float:
        return self.min_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point(
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2
        )

    def corners(self) -> List[Tuple[float, float]]:
        """Corners in drawing order, starting top-left."""
        return [
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
            (self.max_x, self.max_y),
            (self.min_x, self.max_y),
        ]

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y)
        )

    def contains(self, point: Point) -> bool:
        """Check if point is inside bounding box."""
        return (self.min_x <= point.x <= self.max_x and
                self.min_y <= point.y <= self.max_y)


class Path:
    """
    An outline as an ordered point array.

    Closed paths imply a segment from the last point back to the first;
    the closing point is not repeated in the array.
    """

    __slots__ = ('_points', 'closed')

    def __init__(self, points=(), closed: bool = True):
        arr = np.array(points, dtype=float).reshape(-1, 2)
        arr.setflags(write=False)
        self._points = arr
        self.closed = closed

    @property
    def points(self) -> np.ndarray:
        """Read-only (N, 2) array of vertices."""
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (self.closed == other.closed and
                self._points.shape == other._points.shape and
                bool(np.allclose(self._points, other._points)))

    def __repr__(self) -> str:
        return f"Path({len(self)} points, closed={self.closed})"

    @property
    def bounds(self) -> BoundingBox:
        return BoundingBox.from_points(self._points)

    def point_list(self) -> List[Tuple[float, float]]:
        """Vertices as plain (x, y) tuples."""
        return [(float(x), float(y)) for x, y in self._points]

    def transformed(self, matrix: np.ndarray) -> 'Path':
        """Return a new path with a 3x3 affine matrix applied to every point."""
        if len(self._points) == 0:
            return Path((), self.closed)
        homogeneous = np.hstack([self._points, np.ones((len(self._points), 1))])
        result = homogeneous @ matrix.T
        return Path(result[:, :2], self.closed)


class GeometryKind(Enum):
    """Shape kinds; the value is the display name."""
    RECTANGLE = "Rectangle"
    SQUARE = "Square"
    ELLIPSE = "Ellipse"
    CIRCLE = "Circle"
    POLYGON = "Polygon"
    POLYLINE = "Polyline"
    PATH = "Path"
    GROUP = "Group"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def is_box(self) -> bool:
        """Kinds defined by a local box rather than a point list."""
        return self in _BOX_KINDS


_BOX_KINDS = frozenset({
    GeometryKind.RECTANGLE, GeometryKind.SQUARE,
    GeometryKind.ELLIPSE, GeometryKind.CIRCLE, GeometryKind.GROUP,
})


def _ellipse_points(cx: float, cy: float, rx: float, ry: float) -> np.ndarray:
    angles = np.linspace(0.0, 2 * math.pi, ELLIPSE_SEGMENTS, endpoint=False)
    pts = np.column_stack([cx + rx * np.cos(angles), cy + ry * np.sin(angles)])
    # Snap the quarter points so bounds are exact
    quarter = ELLIPSE_SEGMENTS // 4
    pts[quarter, 0] = cx
    pts[3 * quarter, 0] = cx
    pts[0, 1] = cy
    pts[2 * quarter, 1] = cy
    return pts


@dataclass(frozen=True)
class Geometry:
    """
    Local-coordinate shape definition.

    Box kinds (rectangle, square, ellipse, circle) use ``box`` as
    (left, top, width, height). Point kinds (polygon, polyline, path)
    use ``points``. Build instances through the factory classmethods.
    """
    kind: GeometryKind
    box: Tuple[float, float, float, float] = (-0.5, -0.5, 1.0, 1.0)
    points: Tuple[Tuple[float, float], ...] = field(default_factory=tuple)
    closed: bool = True

    # -- factories --------------------------------------------------------

    @classmethod
    def rectangle(cls, x: float = -0.5, y: float = -0.5,
                  width: float = 1.0, height: float = 1.0) -> 'Geometry':
        return cls(GeometryKind.RECTANGLE, box=(x, y, width, height))

    @classmethod
    def square(cls, x: float = -0.5, y: float = -0.5,
               size: float = 1.0) -> 'Geometry':
        return cls(GeometryKind.SQUARE, box=(x, y, size, size))

    @classmethod
    def ellipse(cls, x: float = -0.5, y: float = -0.5,
                width: float = 1.0, height: float = 1.0) -> 'Geometry':
        return cls(GeometryKind.ELLIPSE, box=(x, y, width, height))

    @classmethod
    def circle(cls, x: float = -0.5, y: float = -0.5,
               diameter: float = 1.0) -> 'Geometry':
        return cls(GeometryKind.CIRCLE, box=(x, y, diameter, diameter))

    @classmethod
    def polygon(cls, points: Iterable[Sequence[float]]) -> 'Geometry':
        return cls(GeometryKind.POLYGON, points=_as_point_tuple(points), closed=True)

    @classmethod
    def polyline(cls, points: Iterable[Sequence[float]]) -> 'Geometry':
        return cls(GeometryKind.POLYLINE, points=_as_point_tuple(points), closed=False)

    @classmethod
    def path(cls, points: Iterable[Sequence[float]], closed: bool = False) -> 'Geometry':
        """Free outline that is painted but has no SVG element of its own."""
        return cls(GeometryKind.PATH, points=_as_point_tuple(points), closed=closed)

    @classmethod
    def bounding(cls, bounds: BoundingBox) -> 'Geometry':
        """Synthesized box geometry, used by groups."""
        return cls(GeometryKind.GROUP,
                   box=(bounds.left, bounds.top, bounds.width, bounds.height))

    # -- derived ----------------------------------------------------------

    @property
    def name(self) -> str:
        return self.kind.display_name

    def local_path(self) -> Path:
        """Untransformed outline of this geometry."""
        x, y, w, h = self.box
        if self.kind in (GeometryKind.RECTANGLE, GeometryKind.SQUARE,
                         GeometryKind.GROUP):
            return Path(BoundingBox.from_rect(x, y, w, h).corners(), closed=True)
        elif self.kind == GeometryKind.ELLIPSE:
            return Path(_ellipse_points(x + w / 2, y + h / 2, w / 2, h / 2), closed=True)
        elif self.kind == GeometryKind.CIRCLE:
            r = min(w, h) / 2
            return Path(_ellipse_points(x + r, y + r, r, r), closed=True)
        elif self.kind == GeometryKind.POLYGON:
            return Path(self.points, closed=True)
        elif self.kind == GeometryKind.POLYLINE:
            return Path(self.points, closed=False)
        else:
            return Path(self.points, closed=self.closed)

    @property
    def bounds(self) -> BoundingBox:
        return self.local_path().bounds


def _as_point_tuple(points: Optional[Iterable[Sequence[float]]]) -> Tuple[Tuple[float, float], ...]:
    if points is None:
        return ()
    return tuple((float(x), float(y)) for x, y in points)
