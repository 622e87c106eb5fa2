#!/usr/bin/env python3
"""Test suite for angle wrapping"""

import unittest
import numpy as np
from pyellipsoid.geometry.wrap import angle_difference, wrap_to_pi


class TestWrapToPi(unittest.TestCase):

    def test_values_in_range_unchanged(self):
        for angle in [0.0, 0.5, -0.5, 3.0, -3.0]:
            self.assertAlmostEqual(wrap_to_pi(angle), angle, places=14)

    def test_pi_maps_to_minus_pi(self):
        """The interval is half open, so +pi is reported as -pi"""
        self.assertEqual(wrap_to_pi(np.pi), -np.pi)
        self.assertEqual(wrap_to_pi(-np.pi), -np.pi)

    def test_large_angles(self):
        self.assertAlmostEqual(wrap_to_pi(2 * np.pi + 0.1), 0.1, places=12)
        self.assertAlmostEqual(wrap_to_pi(-2 * np.pi - 0.1), -0.1, places=12)
        self.assertAlmostEqual(wrap_to_pi(10 * np.pi + 1.0), 1.0, places=12)

    def test_array(self):
        angles = np.array([0.0, np.pi, 1.5 * np.pi, -1.5 * np.pi])
        wrapped = wrap_to_pi(angles)
        np.testing.assert_allclose(wrapped, [0.0, -np.pi, -0.5 * np.pi, 0.5 * np.pi], atol=1e-12)
        self.assertTrue(np.all(wrapped >= -np.pi))
        self.assertTrue(np.all(wrapped < np.pi))


class TestAngleDifference(unittest.TestCase):

    def test_scalar(self):
        diff = angle_difference(0.1, 2 * np.pi - 0.1)
        self.assertIsInstance(diff, float)
        self.assertAlmostEqual(diff, 0.2, places=12)

    def test_across_antimeridian(self):
        self.assertAlmostEqual(angle_difference(-np.pi + 0.01, np.pi - 0.01), 0.02, places=12)
        self.assertAlmostEqual(angle_difference(np.pi - 0.01, -np.pi + 0.01), -0.02, places=12)

    def test_array(self):
        diff = angle_difference(np.array([0.0, -np.pi]), np.array([0.0, np.pi]))
        np.testing.assert_allclose(diff, [0.0, 0.0], atol=1e-15)


if __name__ == '__main__':
    unittest.main()
