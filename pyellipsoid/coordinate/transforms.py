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

"""Coordinate transformation between Cartesian XYZ and geodetic LPA"""

import numpy as np

from ..core.constants import HALF_PI
from ..core.data_structures import LPA, XYZ
from ..core.exceptions import DomainError
from ..geometry.vector import as_points, direction_for, magnitude, unit
from ..geometry.wrap import wrap_to_pi
from .excess import foot_point_via_excess
from .shape import Shape


def shape_of(model) -> Shape:
    """Shape used by a model (EarthModel, Ellipsoid or Shape)"""
    if isinstance(model, Shape):
        return model
    shape = getattr(model, 'shape', None)
    if not isinstance(shape, Shape):
        raise TypeError(f"Expected an EarthModel, Ellipsoid or Shape, got {type(model).__name__}")
    return shape


def single_point(values, kind: str) -> np.ndarray:
    arr = as_points(values)
    if arr.ndim != 1:
        raise DomainError(f"{kind} must be a single coordinate triple; use the batch functions for arrays")
    return arr


def batch_points(values, kind: str) -> np.ndarray:
    arr = as_points(values)
    if arr.ndim != 2:
        raise DomainError(f"{kind} must be an array of shape (N, 3), got {arr.shape}")
    return arr


def _xyz_from_lpa(lpas: np.ndarray, shape: Shape) -> np.ndarray:
    lon, par, alt = lpas[..., 0], lpas[..., 1], lpas[..., 2]
    if np.any(np.abs(par) > HALF_PI):
        raise DomainError("Parallel must lie in [-pi/2, pi/2]")

    # radial point on ellipsoid in the (lon, par) direction
    xyz_dir = direction_for(lon, par)
    rho = np.asarray(shape.radius_toward(xyz_dir))
    r_vec = rho[..., np.newaxis] * xyz_dir

    # offset along the true outward normal (not the radial direction)
    up_dir = unit(shape._gradient(r_vec))
    return r_vec + np.asarray(alt)[..., np.newaxis] * up_dir


def lpa_from_foot_point(xyzs: np.ndarray, p_vec: np.ndarray, correction, shape: Shape) -> np.ndarray:
    """Longitude, parallel and altitude of xyzs given their foot points

    Parameters
    ----------
    xyzs : np.ndarray
        Point(s), shape (3,) or (N, 3)
    p_vec : np.ndarray
        Foot point(s) on the shape, same shape as ``xyzs``
    correction : float or np.ndarray
        Normal offset multiplier c with ``x_i = p_i * (1 + c / mu_sq_i)``
    shape : Shape
        Ellipsoid surface

    Returns
    -------
    np.ndarray
        [lon, par, alt] with the last axis of size 3
    """
    if shape.is_axisymmetric:
        lon = np.arctan2(xyzs[..., 1], xyzs[..., 0])
    else:
        lon = np.arctan2(p_vec[..., 1], p_vec[..., 0])
    lon = wrap_to_pi(lon)

    par = np.arctan2(p_vec[..., 2], np.hypot(p_vec[..., 0], p_vec[..., 1]))

    # x - p = (c/2) * grad F(p), so the signed normal distance is exact in c
    alt = 0.5 * correction * magnitude(shape._gradient(p_vec))
    return np.stack([lon, par, alt], axis=-1)


def _lpa_from_xyz(xyzs: np.ndarray, shape: Shape) -> np.ndarray:
    p_vec, correction = foot_point_via_excess(xyzs, shape)
    return lpa_from_foot_point(xyzs, p_vec, correction, shape)


def xyz_for_lpa(lpa, model) -> XYZ:
    """Convert geodetic coordinates to Cartesian coordinates

    The (lon, par) pair selects a direction from the center; the point
    where that direction meets the ellipsoid is offset by ``alt`` along
    the outward surface normal. The conversion is closed form.

    Parameters
    ----------
    lpa : LPA or array_like
        Geodetic coordinates [lon, par, alt] where:
        - lon: longitude in radians
        - par: parallel in radians (-π/2 to π/2)
        - alt: altitude along the ellipsoid normal in meters
    model : EarthModel, Ellipsoid or Shape
        Reference body

    Returns
    -------
    XYZ
        Cartesian coordinates in meters

    Raises
    ------
    DomainError
        If the coordinates are not finite or the parallel is out of range

    Examples
    --------
    >>> model = EarthModel.wgs84()
    >>> xyz = xyz_for_lpa(LPA(np.radians(139.7), np.radians(35.7), 40.0), model)
    """
    lpa_arr = single_point(lpa, "LPA")
    return XYZ.from_array(_xyz_from_lpa(lpa_arr, shape_of(model)))


def lpa_for_xyz(xyz, model) -> LPA:
    """Convert Cartesian coordinates to geodetic coordinates

    Longitude follows from atan2; parallel and altitude follow from the
    foot point estimated by the ellipsoidal excess series (no iteration).

    Parameters
    ----------
    xyz : XYZ or array_like
        Cartesian coordinates [x, y, z] in meters
    model : EarthModel, Ellipsoid or Shape
        Reference body

    Returns
    -------
    LPA
        Geodetic coordinates where:
        - lon: longitude in radians [-π, π)
        - par: parallel in radians [-π/2, π/2]
        - alt: signed altitude along the ellipsoid normal in meters

    Raises
    ------
    DomainError
        If the point is the ellipsoid center or the correction is degenerate

    Notes
    -----
    The series has a small input-dependent bias that grows with
    eccentricity and |alt|; it stays far below a millimeter for an
    Earth-sized body within ±100 km of the surface.
    """
    xyz_arr = single_point(xyz, "XYZ")
    return LPA.from_array(_lpa_from_xyz(xyz_arr, shape_of(model)))


def xyzs_for_lpas(lpas, model) -> np.ndarray:
    """Convert an (N, 3) array of [lon, par, alt] rows to (N, 3) Cartesian rows

    A domain error in any row fails the whole batch.
    """
    lpa_arr = batch_points(lpas, "LPA batch")
    return _xyz_from_lpa(lpa_arr, shape_of(model))


def lpas_for_xyzs(xyzs, model) -> np.ndarray:
    """Convert an (N, 3) array of Cartesian rows to (N, 3) [lon, par, alt] rows

    A domain error in any row fails the whole batch.
    """
    xyz_arr = batch_points(xyzs, "XYZ batch")
    return _lpa_from_xyz(xyz_arr, shape_of(model))
