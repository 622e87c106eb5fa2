# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Residual and excess diagnostics over batches of points.

Every function returns a pandas DataFrame with one row per input point so
results can be filtered, described or written out by the caller.
"""

import logging
from typing import Tuple

import numpy as np
import pandas as pd

from ..coordinate.excess import foot_point_via_excess, radial_point
from ..coordinate.transforms import (
    batch_points,
    lpa_from_foot_point,
    lpas_for_xyzs,
    shape_of,
    xyzs_for_lpas,
)
from ..geometry.vector import magnitude
from ..geometry.wrap import angle_difference
from .reference import exact_foot_point

logger = logging.getLogger(__name__)


def round_trip_residuals(lpas, model) -> pd.DataFrame:
    """
    Residuals of LPA -> XYZ -> LPA -> XYZ for each row of lpas.

    Parameters
    ----------
    lpas : array_like
        Rows of [lon, par, alt], shape (N, 3)
    model : EarthModel, Ellipsoid or Shape
        Reference body

    Returns
    -------
    pd.DataFrame
        Columns ``lon``, ``par``, ``alt`` (inputs), ``d_lon`` (wrapped),
        ``d_par``, ``d_alt`` (recovered minus input) and ``d_xyz`` (distance
        between the forward points of the input and of the recovered LPA)
    """
    lpa_arr = batch_points(lpas, "LPA batch")
    xyzs = xyzs_for_lpas(lpa_arr, model)
    lpas_back = lpas_for_xyzs(xyzs, model)
    xyzs_back = xyzs_for_lpas(lpas_back, model)

    residuals = pd.DataFrame({
        'lon': lpa_arr[:, 0],
        'par': lpa_arr[:, 1],
        'alt': lpa_arr[:, 2],
        'd_lon': angle_difference(lpas_back[:, 0], lpa_arr[:, 0]),
        'd_par': lpas_back[:, 1] - lpa_arr[:, 1],
        'd_alt': lpas_back[:, 2] - lpa_arr[:, 2],
        'd_xyz': magnitude(xyzs_back - xyzs),
    })
    logger.info(f"Round trip over {len(residuals)} points: "
                f"max |d_alt| = {residuals['d_alt'].abs().max():.3e} m, "
                f"max d_xyz = {residuals['d_xyz'].max():.3e} m")
    return residuals


def excess_table(xyzs, model) -> pd.DataFrame:
    """
    Ellipsoidal excess at each point.

    The excess is the radial distance to the surface minus the normal
    distance to the foot point, ``|x - r| - |x - p|``.

    Parameters
    ----------
    xyzs : array_like
        Points, shape (N, 3)
    model : EarthModel, Ellipsoid or Shape
        Reference body

    Returns
    -------
    pd.DataFrame
        Columns ``lon``, ``par``, ``alt``, ``excess`` (m), ``r_eps``
        (gradient magnitude ratio |g(r)|/|g(p)| - 1) and ``d_eta_per_r``
        (excess relative to the radial distance |r|)
    """
    shape = shape_of(model)
    xyz_arr = batch_points(xyzs, "XYZ batch")
    lpas = lpas_for_xyzs(xyz_arr, shape)

    foot_lpas = lpas.copy()
    foot_lpas[:, 2] = 0.0
    p_vecs = xyzs_for_lpas(foot_lpas, shape)
    r_vecs = radial_point(xyz_arr, shape)

    excess = magnitude(xyz_arr - r_vecs) - magnitude(xyz_arr - p_vecs)
    gr_mag = magnitude(shape._gradient(r_vecs))
    gp_mag = magnitude(shape._gradient(p_vecs))

    return pd.DataFrame({
        'lon': lpas[:, 0],
        'par': lpas[:, 1],
        'alt': lpas[:, 2],
        'excess': excess,
        'r_eps': gr_mag / gp_mag - 1.0,
        'd_eta_per_r': excess / magnitude(r_vecs),
    })


def foot_point_errors(xyzs, model) -> pd.DataFrame:
    """
    Difference between the series foot point and the exact foot point.

    Parameters
    ----------
    xyzs : array_like
        Points, shape (N, 3)
    model : EarthModel, Ellipsoid or Shape
        Reference body

    Returns
    -------
    pd.DataFrame
        Columns ``lon``, ``par``, ``alt`` (exact solution), ``dx``, ``dy``,
        ``dz`` (series minus exact, m) and ``d_mag``
    """
    shape = shape_of(model)
    xyz_arr = batch_points(xyzs, "XYZ batch")
    p_series, _ = foot_point_via_excess(xyz_arr, shape)

    p_exact = np.empty_like(xyz_arr)
    lpa_exact = np.empty_like(xyz_arr)
    for idx, xyz in enumerate(xyz_arr):
        p_vec, c_root = exact_foot_point(xyz, shape)
        p_exact[idx] = p_vec
        lpa_exact[idx] = lpa_from_foot_point(xyz, p_vec, c_root, shape)

    p_dif = p_series - p_exact
    errors = pd.DataFrame({
        'lon': lpa_exact[:, 0],
        'par': lpa_exact[:, 1],
        'alt': lpa_exact[:, 2],
        'dx': p_dif[:, 0],
        'dy': p_dif[:, 1],
        'dz': p_dif[:, 2],
        'd_mag': magnitude(p_dif),
    })
    logger.info(f"Series foot point error over {len(errors)} points: "
                f"max {errors['d_mag'].max():.3e} m")
    return errors


def excess_bounds(table: pd.DataFrame) -> Tuple[float, float]:
    """Minimum and maximum of the ``excess`` column of an excess table"""
    if table.empty:
        raise ValueError("Excess table is empty")
    min_excess = float(table['excess'].min())
    max_excess = float(table['excess'].max())
    logger.info(f"minExcess: {min_excess:.6f} m, maxExcess: {max_excess:.6f} m")
    return min_excess, max_excess
