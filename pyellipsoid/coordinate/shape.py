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

"""Implicit quadratic description of an ellipsoid surface"""

import logging
from typing import Tuple

import numpy as np

from ..core.data_structures import XYZ
from ..core.exceptions import DomainError, ShapeError
from ..geometry.vector import as_points, magnitude

logger = logging.getLogger(__name__)


class Shape:
    """Ellipsoid surface defined by three squared axis scales

    The surface is the zero set of the implicit function

        F(x) = sum(x_i**2 / mu_sq_i) - 1

    which is negative inside the body, zero on the surface and positive
    outside. A shape is immutable once constructed.

    Parameters
    ----------
    mu_sq_x, mu_sq_y, mu_sq_z : float
        Squared axis scales (m^2); each must be finite and strictly positive

    Raises
    ------
    ShapeError
        If any coefficient is non-positive or not finite

    Examples
    --------
    >>> shape = Shape.from_axes(6378137.0, 6356752.314245)
    >>> round(shape.radius_toward([1.0, 0.0, 0.0]), 3)
    6378137.0
    """

    __slots__ = ('_mu_sqs',)

    def __init__(self, mu_sq_x: float, mu_sq_y: float, mu_sq_z: float):
        mu_sqs = np.array([mu_sq_x, mu_sq_y, mu_sq_z], dtype=float)
        if not np.all(np.isfinite(mu_sqs)) or np.any(mu_sqs <= 0.0):
            raise ShapeError(f"Shape coefficients must be finite and positive, got {mu_sqs.tolist()}")
        mu_sqs.setflags(write=False)
        object.__setattr__(self, '_mu_sqs', mu_sqs)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_radii(cls, rad_x: float, rad_y: float, rad_z: float) -> "Shape":
        """Create a (possibly triaxial) shape from its three semi-axis radii"""
        radii = np.array([rad_x, rad_y, rad_z], dtype=float)
        if not np.all(np.isfinite(radii)) or np.any(radii <= 0.0):
            raise ShapeError(f"Radii must be finite and positive, got {radii.tolist()}")
        return cls(*np.square(radii))

    @classmethod
    def from_axes(cls, rad_equatorial: float, rad_polar: float) -> "Shape":
        """Create an oblate (or prolate) body of revolution about the z axis"""
        return cls.from_radii(rad_equatorial, rad_equatorial, rad_polar)

    @property
    def mu_sqs(self) -> np.ndarray:
        """Squared axis scales (read-only array of shape (3,))"""
        return self._mu_sqs

    @property
    def radii(self) -> Tuple[float, float, float]:
        """Semi-axis radii (m)"""
        rad = np.sqrt(self._mu_sqs)
        return float(rad[0]), float(rad[1]), float(rad[2])

    @property
    def is_sphere(self) -> bool:
        """True when all three axis scales are equal"""
        return bool(self._mu_sqs[0] == self._mu_sqs[1] == self._mu_sqs[2])

    @property
    def is_axisymmetric(self) -> bool:
        """True when the shape is a body of revolution about the z axis"""
        return bool(self._mu_sqs[0] == self._mu_sqs[1])

    def surface_value(self, xyz):
        """Evaluate the implicit surface function F at xyz

        Returns a float for a single point or an array for a batch.
        """
        pts = as_points(xyz)
        value = np.sum(np.square(pts) / self._mu_sqs, axis=-1) - 1.0
        return float(value) if np.ndim(value) == 0 else value

    def gradient_at(self, xyz):
        """Gradient of the implicit surface function at an arbitrary point

        The gradient is ``2 * x_i / mu_sq_i`` per axis. Its direction is the
        outward normal of the scaled copy of the surface through the point;
        its magnitude varies with position on a non-spherical shape.

        Parameters
        ----------
        xyz : array_like
            Point of shape (3,) or a batch of shape (N, 3)

        Returns
        -------
        XYZ or np.ndarray
            ``XYZ`` for a single point, array of shape (N, 3) for a batch
        """
        pts = as_points(xyz)
        grad = self._gradient(pts)
        if grad.ndim == 1:
            return XYZ.from_array(grad)
        return grad

    def radius_toward(self, direction):
        """Distance from the center to the surface along a direction

        Returns the scalar ``t`` such that ``t * unit(direction)`` lies on
        the surface.

        Parameters
        ----------
        direction : array_like
            Direction of shape (3,) or a batch of shape (N, 3); need not be
            normalized

        Returns
        -------
        float or np.ndarray
            Radius (m) for a single direction, array of shape (N,) for a batch

        Raises
        ------
        DomainError
            If any direction is the zero vector
        """
        dirs = as_points(direction)
        rho = self._radius(dirs)
        return float(rho) if np.ndim(rho) == 0 else rho

    def normalized(self, scale: float) -> "Shape":
        """Copy of this shape with all lengths divided by scale"""
        if not np.isfinite(scale) or scale <= 0.0:
            raise ShapeError(f"Normalization scale must be finite and positive, got {scale}")
        return Shape(*(self._mu_sqs / (scale * scale)))

    def _gradient(self, pts: np.ndarray) -> np.ndarray:
        return 2.0 * pts / self._mu_sqs

    def _radius(self, dirs: np.ndarray) -> np.ndarray:
        mag = magnitude(dirs)
        if np.any(mag == 0.0):
            logger.debug("radius_toward called with a zero direction")
            raise DomainError("Direction vector must be non-zero")
        unit_dirs = dirs / mag[..., np.newaxis]
        return 1.0 / np.sqrt(np.sum(np.square(unit_dirs) / self._mu_sqs, axis=-1))

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        return bool(np.array_equal(self._mu_sqs, other._mu_sqs))

    def __hash__(self):
        return hash(tuple(self._mu_sqs.tolist()))

    def __repr__(self):
        rad = ", ".join(f"{r:.6f}" for r in self.radii)
        return f"Shape(radii=({rad}))"
