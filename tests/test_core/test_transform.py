"""
Tests for affine transforms.
"""

import unittest

import numpy as np

from vecdraw.core.geometry import Geometry, Path
from vecdraw.core.transform import Transform, compose


class TestTransform(unittest.TestCase):
    """Test Transform composition and application."""

    def test_identity(self):
        """Test default transform is identity."""
        transform = Transform()
        self.assertTrue(transform.is_identity)
        self.assertEqual(transform.elements, (1, 0, 0, 1, 0, 0))

    def test_translate_scale_prepend(self):
        """Test prepended operations apply in local space first."""
        transform = Transform.translation(10, 0)
        transform.scale(2, 2)
        # Scale first, then translate
        result = transform.apply_points([(1, 1)])
        self.assertTrue(np.allclose(result, [(12, 2)]))

    def test_translate_scale_append(self):
        """Test appended operations apply after the existing matrix."""
        transform = Transform.translation(10, 0)
        transform.scale(2, 2, append=True)
        result = transform.apply_points([(1, 1)])
        self.assertTrue(np.allclose(result, [(22, 2)]))

    def test_rotate(self):
        """Test 90 degree rotation maps x axis onto y axis."""
        transform = Transform()
        transform.rotate(90)
        result = transform.apply_points([(1, 0)])
        self.assertTrue(np.allclose(result, [(0, 1)]))

    def test_element_order(self):
        """Test elements follow matrix(a, b, c, d, e, f) semantics."""
        transform = Transform(1, 2, 3, 4, 5, 6)
        x, y = transform.apply_points([(1, 1)])[0]
        self.assertEqual((x, y), (1 + 3 + 5, 2 + 4 + 6))

    def test_apply_preserves_order(self):
        """Test transformed points keep their order."""
        points = [(0, 0), (1, 0), (1, 1), (0, 1)]
        result = Transform.translation(5, 5).apply_points(points)
        self.assertEqual([tuple(p) for p in result], [(5, 5), (6, 5), (6, 6), (5, 6)])

    def test_apply_path(self):
        """Test path application keeps closed flag and bounds move."""
        path = Geometry.polyline([(0, 0), (2, 1)]).local_path()
        moved = Transform.scaling(3, 3).apply_path(path)
        self.assertFalse(moved.closed)
        self.assertEqual(moved.point_list(), [(0, 0), (6, 3)])

    def test_singular_matrix_collapses(self):
        """Test a singular matrix is allowed and flattens the shape."""
        transform = Transform(0, 0, 0, 0, 3, 4)
        path = transform.apply_path(Geometry.rectangle(0, 0, 10, 10).local_path())
        bounds = path.bounds
        self.assertEqual((bounds.width, bounds.height), (0, 0))
        self.assertEqual((bounds.left, bounds.top), (3, 4))

    def test_empty_points(self):
        """Test applying to no points gives no points."""
        self.assertEqual(len(Transform().apply_points([])), 0)
        self.assertEqual(len(Transform().apply_path(Path())), 0)

    def test_compose(self):
        """Test compose applies inner first, then outer."""
        outer = Transform.translation(1, 0)
        inner = Transform.scaling(2, 2)
        result = compose(outer, inner).apply_points([(1, 1)])
        self.assertTrue(np.allclose(result, [(3, 2)]))

    def test_copy_is_independent(self):
        """Test copies do not share state."""
        original = Transform()
        clone = original.copy()
        clone.translate(5, 5)
        self.assertTrue(original.is_identity)
        self.assertNotEqual(original, clone)

    def test_reset(self):
        """Test reset returns to identity."""
        transform = Transform(2, 0, 0, 2, 4, 4)
        transform.reset()
        self.assertTrue(transform.is_identity)

    def test_matches_path_transformed(self):
        """Test point application agrees with the matrix form."""
        transform = Transform()
        transform.rotate(30)
        transform.translate(4, -2, append=True)
        path = Geometry.ellipse(0, 0, 5, 3).local_path()
        self.assertEqual(transform.apply_path(path), path.transformed(transform.as_array()))


if __name__ == '__main__':
    unittest.main()
