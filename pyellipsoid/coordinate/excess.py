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
Foot point estimation through the ellipsoidal excess.

For a point x off the surface, the foot point p is the surface point whose
outward normal passes through x. Writing x = p + h * unit(grad F(p)) gives,
per axis,

    x_i = p_i * (1 + c / mu_sq_i),    c = 2 * h / |grad F(p)|

so the whole problem reduces to one scalar, c. The radial point r (where
the ray from the center through x meets the surface) is a cheap first
guess; the difference between the radial and the normal geometry is the
ellipsoidal excess.

Parametrizing c = 2 * (zeta + eta0) / |grad F(r)|, with eta0 the signed
radial distance |x| - |r|, turns the surface condition on p into

    sum_i w_i / (1 + s_i * zeta)**2 = 1

Expanding to second order in zeta gives the quadratic
A * zeta**2 - 2 * B * zeta + C = 0 whose small root is evaluated through a
fixed-order series instead of a square root. There are no iterations and
the operation count does not depend on the input.

All functions accept a single point of shape (3,) or a batch of shape
(N, 3) and work on the last axis.
"""

import logging
from typing import Tuple

import numpy as np

from ..core.exceptions import DomainError
from ..geometry.vector import as_points, magnitude
from .shape import Shape

logger = logging.getLogger(__name__)


def radial_point(xyz, shape: Shape) -> np.ndarray:
    """Point where the ray from the center through xyz meets the surface

    Parameters
    ----------
    xyz : array_like
        Point(s), shape (3,) or (N, 3)
    shape : Shape
        Ellipsoid surface

    Returns
    -------
    np.ndarray
        Radial surface point(s), same shape as ``xyz``

    Raises
    ------
    DomainError
        If any point is the center of the shape
    """
    pts = as_points(xyz)
    rho = np.asarray(shape.radius_toward(pts))
    return np.asarray(rho / magnitude(pts))[..., np.newaxis] * pts


def zeta_coefficients(xyz, eta0, gr_mag, shape: Shape) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Coefficients (A, B, C) of the quadratic in the altitude correction zeta

    Parameters
    ----------
    xyz : array_like
        Point(s), shape (3,) or (N, 3)
    eta0 : float or array_like
        Signed radial distance of each point from the surface (m)
    gr_mag : float or array_like
        Gradient magnitude at the radial point(s)
    shape : Shape
        Ellipsoid surface

    Returns
    -------
    tuple of np.ndarray
        (A, B, C), each a scalar array or of shape (N,)

    Raises
    ------
    DomainError
        If any per-axis denominator ``f + eta0`` vanishes
    """
    pts = as_points(xyz)
    mu_sqs = shape.mu_sqs
    fgk = 0.5 * np.asarray(gr_mag, dtype=float)[..., np.newaxis] * mu_sqs
    denom = fgk + np.asarray(eta0, dtype=float)[..., np.newaxis]
    if np.any(denom == 0.0):
        logger.debug("Degenerate excess denominator (point too close to the center)")
        raise DomainError("Degenerate excess denominator; point lies too close to the shape center")
    s1k = 1.0 / denom
    n1k = s1k * fgk * pts
    n_per_mu_sq = np.square(n1k) / mu_sqs

    co_a = 3.0 * np.sum(n_per_mu_sq * s1k * s1k, axis=-1)
    co_b = np.sum(n_per_mu_sq * s1k, axis=-1)
    co_c = np.sum(n_per_mu_sq, axis=-1) - 1.0
    return co_a, co_b, co_c


def zeta_series_root(co_a, co_b, co_c) -> np.ndarray:
    """Second order series for the small root of A*z**2 - 2*B*z + C = 0

    The exact root is ``(B/A) * (1 - sqrt(1 - A*C/B**2))``; expanding the
    square root gives ``(C/B) * (1/2 + (1/8) * (A*C/B**2))``.

    Raises
    ------
    DomainError
        If B is zero or any term is not finite
    """
    co_a = np.asarray(co_a, dtype=float)
    co_b = np.asarray(co_b, dtype=float)
    co_c = np.asarray(co_c, dtype=float)
    if np.any(co_b == 0.0) or not np.all(np.isfinite(co_b)):
        logger.debug("Degenerate excess quadratic (B coefficient is zero or not finite)")
        raise DomainError("Degenerate excess quadratic; B coefficient is zero or not finite")

    x_arg = (co_a * co_c) / np.square(co_b)
    frac_cb = co_c / co_b
    zeta = frac_cb * (0.5 + 0.125 * x_arg)
    if not np.all(np.isfinite(zeta)):
        raise DomainError("Excess series produced a non-finite correction")
    return zeta


def foot_point_via_excess(xyz, shape: Shape) -> Tuple[np.ndarray, np.ndarray]:
    """Estimate the foot point of xyz on the shape

    Parameters
    ----------
    xyz : array_like
        Point(s), shape (3,) or (N, 3)
    shape : Shape
        Ellipsoid surface

    Returns
    -------
    p : np.ndarray
        Foot point(s) on the surface, same shape as ``xyz``
    correction : np.ndarray
        Normal offset multiplier c per point, such that
        ``x_i = p_i * (1 + c / mu_sq_i)``

    Raises
    ------
    DomainError
        If the point is the shape center, the gradient vanishes or the
        correction is degenerate
    """
    pts = as_points(xyz)
    mu_sqs = shape.mu_sqs

    # radial point on ellipsoid
    x_mag = magnitude(pts)
    if np.any(x_mag == 0.0):
        logger.debug("Foot point requested for the shape center")
        raise DomainError("Point coincides with the shape center")
    rho = np.asarray(shape.radius_toward(pts))
    r_vec = np.asarray(rho / x_mag)[..., np.newaxis] * pts

    # gradient at radial point
    gr_mag = magnitude(shape._gradient(r_vec))
    if np.any(gr_mag <= 0.0) or not np.all(np.isfinite(gr_mag)):
        raise DomainError("Surface gradient vanishes at the radial point")

    # signed radial pseudo-altitude
    eta0 = x_mag - rho

    co_a, co_b, co_c = zeta_coefficients(pts, eta0, gr_mag, shape)
    zeta = zeta_series_root(co_a, co_b, co_c)

    correction = 2.0 * (zeta + eta0) / gr_mag
    scale = 1.0 + np.asarray(correction)[..., np.newaxis] / mu_sqs
    if np.any(scale == 0.0):
        raise DomainError("Foot point correction is degenerate")
    p_vec = pts / scale
    return p_vec, correction
