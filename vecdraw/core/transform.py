"""
VecDraw Transform Module

A 2x3 affine matrix attached to every figure. Element order follows
the SVG ``matrix(a, b, c, d, e, f)`` convention:

    x' = m11 * x + m21 * y + dx
    y' = m12 * x + m22 * y + dy

Operations compose in place. By default a new operation is prepended,
i.e. applied in the figure's local space before the existing matrix;
pass ``append=True`` to apply it after the existing matrix instead.
"""

from typing import Tuple
import math

import numpy as np

from .geometry import Path


class Transform:
    """Mutable 2D affine transform."""

    __slots__ = ('m11', 'm12', 'm21', 'm22', 'dx', 'dy')

    def __init__(self, m11: float = 1.0, m12: float = 0.0,
                 m21: float = 0.0, m22: float = 1.0,
                 dx: float = 0.0, dy: float = 0.0):
        self.m11 = float(m11)
        self.m12 = float(m12)
        self.m21 = float(m21)
        self.m22 = float(m22)
        self.dx = float(dx)
        self.dy = float(dy)

    @classmethod
    def from_array(cls, matrix: np.ndarray) -> 'Transform':
        """Build from a 3x3 (column vector) matrix."""
        return cls(matrix[0, 0], matrix[1, 0], matrix[0, 1],
                   matrix[1, 1], matrix[0, 2], matrix[1, 2])

    @classmethod
    def translation(cls, dx: float, dy: float) -> 'Transform':
        return cls(dx=dx, dy=dy)

    @classmethod
    def scaling(cls, sx: float, sy: float) -> 'Transform':
        return cls(m11=sx, m22=sy)

    @property
    def elements(self) -> Tuple[float, float, float, float, float, float]:
        return (self.m11, self.m12, self.m21, self.m22, self.dx, self.dy)

    @property
    def is_identity(self) -> bool:
        return self.elements == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def as_array(self) -> np.ndarray:
        return np.array([
            [self.m11, self.m21, self.dx],
            [self.m12, self.m22, self.dy],
            [0.0, 0.0, 1.0],
        ])

    def _set_array(self, matrix: np.ndarray) -> None:
        self.m11 = float(matrix[0, 0])
        self.m12 = float(matrix[1, 0])
        self.m21 = float(matrix[0, 1])
        self.m22 = float(matrix[1, 1])
        self.dx = float(matrix[0, 2])
        self.dy = float(matrix[1, 2])

    def copy(self) -> 'Transform':
        return Transform(*self.elements)

    def reset(self) -> None:
        """Back to identity."""
        self.m11, self.m12, self.m21, self.m22, self.dx, self.dy = (
            1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self.elements == other.elements

    __hash__ = None

    def __repr__(self) -> str:
        return "Transform({}, {}, {}, {}, {}, {})".format(*self.elements)

    # -- composition ------------------------------------------------------

    def multiply(self, other: 'Transform', append: bool = False) -> 'Transform':
        """Compose another transform into this one in place."""
        if append:
            result = other.as_array() @ self.as_array()
        else:
            result = self.as_array() @ other.as_array()
        self._set_array(result)
        return self

    def translate(self, dx: float, dy: float, append: bool = False) -> 'Transform':
        return self.multiply(Transform.translation(dx, dy), append)

    def scale(self, sx: float, sy: float, append: bool = False) -> 'Transform':
        return self.multiply(Transform.scaling(sx, sy), append)

    def rotate(self, degrees: float, append: bool = False) -> 'Transform':
        """Rotate clockwise on screen (y axis points down)."""
        angle = math.radians(degrees)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return self.multiply(Transform(cos_a, sin_a, -sin_a, cos_a), append)

    # -- application ------------------------------------------------------

    def apply_points(self, points) -> np.ndarray:
        """Transform an (N, 2) point array, keeping order."""
        arr = np.asarray(points, dtype=float).reshape(-1, 2)
        if len(arr) == 0:
            return arr.copy()
        xs = arr[:, 0]
        ys = arr[:, 1]
        return np.column_stack([
            self.m11 * xs + self.m21 * ys + self.dx,
            self.m12 * xs + self.m22 * ys + self.dy,
        ])

    def apply_path(self, path: Path) -> Path:
        return Path(self.apply_points(path.points), path.closed)


def compose(outer: Transform, inner: Transform) -> Transform:
    """Transform equivalent to applying ``inner`` first, then ``outer``."""
    return Transform.from_array(outer.as_array() @ inner.as_array())
