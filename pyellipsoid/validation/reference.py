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
Exact (iterative) foot point solver used as a reference.

The foot point p of x satisfies x_i = p_i * (1 + c / mu_sq_i) for a single
Lagrange multiplier c, so p lies on the surface exactly when

    g(c) = sum(x_i**2 * mu_sq_i / (mu_sq_i + c)**2) - 1 = 0

g decreases monotonically for c > -min(mu_sq_i), so the root is bracketed
and found with Brent's method. This is slower than the series in
``pyellipsoid.coordinate.excess`` but exact to rounding.
"""

import logging
from typing import Tuple

import numpy as np
from scipy.optimize import brentq

from ..core.data_structures import LPA
from ..core.exceptions import DomainError
from ..coordinate.shape import Shape
from ..coordinate.transforms import lpa_from_foot_point, shape_of, single_point
from ..geometry.vector import magnitude

logger = logging.getLogger(__name__)

# halvings of the gap to the singular multiplier tried when bracketing
MAX_BRACKET_STEPS = 60


def _multiplier_residual(c: float, xsq: np.ndarray, mu_sqs: np.ndarray) -> float:
    return float(np.sum(xsq * mu_sqs / np.square(mu_sqs + c)) - 1.0)


def exact_foot_point(xyz, shape: Shape) -> Tuple[np.ndarray, float]:
    """
    Exact foot point of a single point on the shape.

    Parameters
    ----------
    xyz : array_like
        Point [x, y, z] in meters
    shape : Shape
        Ellipsoid surface

    Returns
    -------
    p : np.ndarray
        Foot point on the surface, shape (3,)
    c : float
        Lagrange multiplier with ``x_i = p_i * (1 + c / mu_sq_i)``

    Raises
    ------
    DomainError
        If the point is the shape center or the root cannot be bracketed
    """
    pts = single_point(xyz, "XYZ")
    x_mag = magnitude(pts)
    if x_mag == 0.0:
        raise DomainError("Point coincides with the shape center")

    mu_sqs = shape.mu_sqs
    xsq = np.square(pts)
    value0 = _multiplier_residual(0.0, xsq, mu_sqs)

    if value0 == 0.0:
        c_root = 0.0
    elif value0 > 0.0:
        # outside: every term is below 1/4 at c_hi
        c_hi = 2.0 * x_mag * float(np.sqrt(np.max(mu_sqs)))
        c_root = brentq(_multiplier_residual, 0.0, c_hi, args=(xsq, mu_sqs))
    else:
        # inside: g rises without bound toward the nearest singular c
        c_bound = -float(np.min(mu_sqs[xsq > 0.0]))
        c_lo = None
        for step in range(1, MAX_BRACKET_STEPS + 1):
            candidate = c_bound * (1.0 - 0.5 ** step)
            if _multiplier_residual(candidate, xsq, mu_sqs) > 0.0:
                c_lo = candidate
                break
        if c_lo is None:
            logger.debug(f"Could not bracket foot point multiplier for {pts.tolist()}")
            raise DomainError("Unable to bracket the exact foot point; point is too deep inside the shape")
        c_root = brentq(_multiplier_residual, c_lo, 0.0, args=(xsq, mu_sqs))

    p_vec = pts * mu_sqs / (mu_sqs + c_root)
    return p_vec, float(c_root)


def exact_lpa_for_xyz(xyz, model) -> LPA:
    """
    Convert Cartesian coordinates to geodetic coordinates with the exact solver.

    Uses the same longitude, parallel and altitude definitions as
    ``lpa_for_xyz``, so the two can be compared directly.

    Parameters
    ----------
    xyz : XYZ or array_like
        Cartesian coordinates [x, y, z] in meters
    model : EarthModel, Ellipsoid or Shape
        Reference body

    Returns
    -------
    LPA
        Geodetic coordinates
    """
    shape = shape_of(model)
    pts = single_point(xyz, "XYZ")
    p_vec, c_root = exact_foot_point(pts, shape)
    return LPA.from_array(lpa_from_foot_point(pts, p_vec, c_root, shape))
