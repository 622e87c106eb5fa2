#!/usr/bin/env python3
"""Test suite for vector helpers"""

import unittest
import numpy as np
from pyellipsoid.core.exceptions import DomainError
from pyellipsoid.geometry.vector import as_points, direction_for, magnitude, unit


class TestAsPoints(unittest.TestCase):

    def test_single_and_batch(self):
        self.assertEqual(as_points([1, 2, 3]).shape, (3,))
        self.assertEqual(as_points(np.zeros((5, 3))).shape, (5, 3))
        self.assertEqual(as_points([1, 2, 3]).dtype, np.float64)

    def test_wrong_trailing_dimension(self):
        with self.assertRaises(DomainError):
            as_points([1.0, 2.0])
        with self.assertRaises(DomainError):
            as_points(np.zeros((3, 2)))
        with self.assertRaises(DomainError):
            as_points(1.0)

    def test_non_finite(self):
        with self.assertRaises(DomainError):
            as_points([np.nan, 0.0, 0.0])
        with self.assertRaises(DomainError):
            as_points([[0.0, 0.0, 0.0], [np.inf, 0.0, 0.0]])

    def test_domain_error_is_value_error(self):
        with self.assertRaises(ValueError):
            as_points([1.0])


class TestVectorOps(unittest.TestCase):

    def test_magnitude(self):
        self.assertAlmostEqual(float(magnitude(np.array([3.0, 4.0, 0.0]))), 5.0)
        np.testing.assert_allclose(
            magnitude(np.array([[1.0, 0.0, 0.0], [0.0, 2.0, 0.0], [1.0, 2.0, 2.0]])),
            [1.0, 2.0, 3.0])

    def test_unit(self):
        np.testing.assert_allclose(unit(np.array([0.0, 0.0, -7.0])), [0.0, 0.0, -1.0])
        units = unit(np.array([[2.0, 0.0, 0.0], [1.0, 1.0, 1.0]]))
        np.testing.assert_allclose(magnitude(units), [1.0, 1.0])

    def test_unit_zero_vector(self):
        with self.assertRaises(DomainError):
            unit(np.zeros(3))
        with self.assertRaises(DomainError):
            unit(np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]]))

    def test_direction_for(self):
        np.testing.assert_allclose(direction_for(0.0, 0.0), [1.0, 0.0, 0.0], atol=1e-15)
        np.testing.assert_allclose(direction_for(np.pi / 2, 0.0), [0.0, 1.0, 0.0], atol=1e-15)
        np.testing.assert_allclose(direction_for(1.0, np.pi / 2), [0.0, 0.0, 1.0], atol=1e-15)

    def test_direction_for_batch(self):
        lon = np.linspace(-np.pi, np.pi, 7)
        par = np.linspace(-1.5, 1.5, 7)
        dirs = direction_for(lon, par)
        self.assertEqual(dirs.shape, (7, 3))
        np.testing.assert_allclose(magnitude(dirs), np.ones(7), rtol=1e-15)


if __name__ == '__main__':
    unittest.main()
