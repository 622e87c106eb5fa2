#!/usr/bin/env python3
"""Test suite for the implicit ellipsoid shape"""

import unittest
import numpy as np
from pyellipsoid.core.constants import RE_WGS84, RP_WGS84
from pyellipsoid.core.data_structures import XYZ
from pyellipsoid.core.exceptions import DomainError, ShapeError
from pyellipsoid.coordinate.shape import Shape


class TestShapeConstruction(unittest.TestCase):

    def test_from_squared_scales(self):
        shape = Shape(1.0, 4.0, 9.0)
        np.testing.assert_array_equal(shape.mu_sqs, [1.0, 4.0, 9.0])
        self.assertEqual(shape.radii, (1.0, 2.0, 3.0))

    def test_from_radii(self):
        shape = Shape.from_radii(2.0, 3.0, 4.0)
        np.testing.assert_array_equal(shape.mu_sqs, [4.0, 9.0, 16.0])

    def test_from_axes(self):
        shape = Shape.from_axes(RE_WGS84, RP_WGS84)
        self.assertAlmostEqual(shape.radii[0], RE_WGS84, places=6)
        self.assertAlmostEqual(shape.radii[1], RE_WGS84, places=6)
        self.assertAlmostEqual(shape.radii[2], RP_WGS84, places=6)

    def test_invalid_coefficients(self):
        for coeffs in [(0.0, 1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, np.nan), (np.inf, 1.0, 1.0)]:
            with self.assertRaises(ShapeError, msg=f"{coeffs}"):
                Shape(*coeffs)

    def test_invalid_radii(self):
        with self.assertRaises(ShapeError):
            Shape.from_radii(1.0, 0.0, 1.0)
        with self.assertRaises(ShapeError):
            Shape.from_axes(-6378137.0, 6356752.0)

    def test_shape_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Shape(-1.0, 1.0, 1.0)

    def test_immutable(self):
        shape = Shape(1.0, 1.0, 1.0)
        with self.assertRaises(AttributeError):
            shape._mu_sqs = np.ones(3)
        with self.assertRaises(ValueError):
            shape.mu_sqs[0] = 2.0

    def test_symmetry_flags(self):
        self.assertTrue(Shape(1.0, 1.0, 1.0).is_sphere)
        self.assertTrue(Shape(1.0, 1.0, 1.0).is_axisymmetric)
        self.assertFalse(Shape(1.0, 1.0, 0.9).is_sphere)
        self.assertTrue(Shape(1.0, 1.0, 0.9).is_axisymmetric)
        self.assertFalse(Shape(1.0, 0.95, 0.9).is_axisymmetric)

    def test_equality_and_hash(self):
        self.assertEqual(Shape.from_radii(1.0, 2.0, 3.0), Shape(1.0, 4.0, 9.0))
        self.assertNotEqual(Shape(1.0, 1.0, 1.0), Shape(1.0, 1.0, 2.0))
        self.assertEqual(len({Shape(1.0, 1.0, 1.0), Shape(1.0, 1.0, 1.0)}), 1)

    def test_repr(self):
        self.assertEqual(repr(Shape.from_radii(1.0, 2.0, 3.0)),
                         "Shape(radii=(1.000000, 2.000000, 3.000000))")


class TestShapeGeometry(unittest.TestCase):

    def setUp(self):
        self.shape = Shape.from_radii(3.0, 2.0, 1.0)

    def test_surface_value(self):
        self.assertEqual(self.shape.surface_value([0.0, 0.0, 0.0]), -1.0)
        self.assertAlmostEqual(self.shape.surface_value([3.0, 0.0, 0.0]), 0.0, places=15)
        self.assertAlmostEqual(self.shape.surface_value([0.0, 0.0, 2.0]), 3.0, places=15)
        values = self.shape.surface_value(np.array([[3.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 0.5]]))
        np.testing.assert_allclose(values, [0.0, 0.0, -0.75], atol=1e-15)

    def test_gradient_at(self):
        grad = self.shape.gradient_at([3.0, 2.0, 1.0])
        self.assertIsInstance(grad, XYZ)
        np.testing.assert_allclose(grad, [2.0 / 3.0, 1.0, 2.0])

    def test_gradient_at_batch(self):
        grads = self.shape.gradient_at(np.array([[3.0, 0.0, 0.0], [0.0, 0.0, -1.0]]))
        self.assertEqual(grads.shape, (2, 3))
        np.testing.assert_allclose(grads, [[2.0 / 3.0, 0.0, 0.0], [0.0, 0.0, -2.0]])

    def test_gradient_points_outward(self):
        """Gradient on the surface has positive component along the position"""
        dirs = np.array([[1.0, 1.0, 1.0], [-1.0, 0.5, -2.0], [0.0, -1.0, 3.0]])
        rho = self.shape.radius_toward(dirs)
        pts = rho[:, np.newaxis] * dirs / np.linalg.norm(dirs, axis=1)[:, np.newaxis]
        grads = self.shape.gradient_at(pts)
        self.assertTrue(np.all(np.sum(grads * pts, axis=1) > 0.0))

    def test_radius_toward_axes(self):
        self.assertAlmostEqual(self.shape.radius_toward([1.0, 0.0, 0.0]), 3.0, places=14)
        self.assertAlmostEqual(self.shape.radius_toward([0.0, -5.0, 0.0]), 2.0, places=14)
        self.assertAlmostEqual(self.shape.radius_toward([0.0, 0.0, 0.1]), 1.0, places=14)

    def test_radius_toward_lands_on_surface(self):
        direction = np.array([0.3, -0.7, 0.2])
        rho = self.shape.radius_toward(direction)
        point = rho * direction / np.linalg.norm(direction)
        self.assertAlmostEqual(self.shape.surface_value(point), 0.0, places=14)

    def test_radius_toward_sphere(self):
        sphere = Shape.from_radii(5.0, 5.0, 5.0)
        rho = sphere.radius_toward(np.array([[1.0, 2.0, 3.0], [-4.0, 0.0, 1.0]]))
        np.testing.assert_allclose(rho, [5.0, 5.0], rtol=1e-15)

    def test_radius_toward_zero_direction(self):
        with self.assertRaises(DomainError):
            self.shape.radius_toward([0.0, 0.0, 0.0])
        with self.assertRaises(DomainError):
            self.shape.radius_toward(np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]]))

    def test_normalized(self):
        norm = self.shape.normalized(2.0)
        np.testing.assert_allclose(norm.radii, [1.5, 1.0, 0.5])
        with self.assertRaises(ShapeError):
            self.shape.normalized(0.0)


if __name__ == '__main__':
    unittest.main()
