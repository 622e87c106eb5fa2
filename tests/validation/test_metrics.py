#!/usr/bin/env python3
"""Test suite for residual and excess tables"""

import unittest
import numpy as np
import pandas as pd
from pyellipsoid.coordinate.ellipsoid import EarthModel
from pyellipsoid.core.constants import ALT_VALID_MAX, ALT_VALID_MIN, HALF_PI
from pyellipsoid.sim.sampling import SampleSpec, bulk_samples_lpa, meridian_plane_samples
from pyellipsoid.validation.metrics import (
    excess_bounds, excess_table, foot_point_errors, round_trip_residuals
)


class TestValidationTables(unittest.TestCase):

    def setUp(self):
        self.model = EarthModel.wgs84()
        radius = self.model.ellipsoid.radius
        rad_spec = SampleSpec(5, (radius + ALT_VALID_MIN, radius + ALT_VALID_MAX))
        par_spec = SampleSpec(7, (0.0, HALF_PI))
        self.xyzs = meridian_plane_samples(rad_spec, par_spec)

    def test_round_trip_residuals(self):
        residuals = round_trip_residuals(bulk_samples_lpa(4, 4, 4), self.model)
        self.assertIsInstance(residuals, pd.DataFrame)
        self.assertEqual(len(residuals), 7 * 9 * 7)
        self.assertEqual(list(residuals.columns),
                         ['lon', 'par', 'alt', 'd_lon', 'd_par', 'd_alt', 'd_xyz'])
        self.assertLess(residuals['d_par'].abs().max(), 1e-9)
        self.assertLess(residuals['d_alt'].abs().max(), 1e-3)
        self.assertLess(residuals['d_xyz'].max(), 1e-3)

        off_pole = residuals['par'].abs() < HALF_PI - 1e-6
        self.assertLess(residuals.loc[off_pole, 'd_lon'].abs().max(), 1e-9)

    def test_excess_table(self):
        table = excess_table(self.xyzs, self.model)
        self.assertEqual(len(table), 35)
        self.assertEqual(list(table.columns), ['lon', 'par', 'alt', 'excess', 'r_eps', 'd_eta_per_r'])

        # the foot point is the nearest surface point
        self.assertGreater(table['excess'].min(), -1e-6)

        # no excess at the equator or the pole, some in between
        at_axes = np.isclose(table['par'], 0.0, atol=1e-9) | np.isclose(table['par'], HALF_PI, atol=1e-9)
        self.assertLess(table.loc[at_axes, 'excess'].abs().max(), 1e-6)
        self.assertGreater(table.loc[~at_axes, 'excess'].max(), 1e-3)

    def test_excess_bounds(self):
        table = excess_table(self.xyzs, self.model)
        min_excess, max_excess = excess_bounds(table)
        self.assertLessEqual(min_excess, max_excess)
        self.assertEqual(max_excess, table['excess'].max())
        with self.assertRaises(ValueError):
            excess_bounds(table.iloc[0:0])

    def test_foot_point_errors(self):
        errors = foot_point_errors(self.xyzs, self.model)
        self.assertEqual(len(errors), 35)
        self.assertEqual(list(errors.columns), ['lon', 'par', 'alt', 'dx', 'dy', 'dz', 'd_mag'])
        self.assertLess(errors['d_mag'].max(), 1e-6)
        self.assertLess(errors['alt'].abs().max(), 1.2e5)


if __name__ == '__main__':
    unittest.main()
