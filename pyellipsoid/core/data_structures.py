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

"""Core coordinate value types"""

from typing import NamedTuple

import numpy as np


class XYZ(NamedTuple):
    """Geocentric Cartesian coordinates.

    Attributes
    ----------
    x : float
        Component along the first body axis (m)
    y : float
        Component along the second body axis (m)
    z : float
        Component along the polar axis (m)

    Notes
    -----
    Being a tuple, an ``XYZ`` converts directly with ``np.asarray``.
    """
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, values) -> "XYZ":
        """Build from any 3-element sequence or array"""
        vals = np.asarray(values, dtype=float).reshape(3)
        return cls(float(vals[0]), float(vals[1]), float(vals[2]))

    def to_array(self) -> np.ndarray:
        """Return components as a numpy array of shape (3,)"""
        return np.array(self, dtype=float)


class LPA(NamedTuple):
    """Geodetic coordinates: longitude, parallel and altitude.

    Attributes
    ----------
    lon : float
        Longitude in radians, canonical range [-π, π)
    par : float
        Parallel (latitude) in radians, range [-π/2, π/2]
    alt : float
        Signed altitude in meters along the outward ellipsoid normal
    """
    lon: float
    par: float
    alt: float

    @classmethod
    def from_array(cls, values) -> "LPA":
        """Build from any 3-element sequence or array"""
        vals = np.asarray(values, dtype=float).reshape(3)
        return cls(float(vals[0]), float(vals[1]), float(vals[2]))

    def to_array(self) -> np.ndarray:
        """Return components as a numpy array of shape (3,)"""
        return np.array(self, dtype=float)

    @property
    def lon_deg(self) -> float:
        """Longitude in degrees"""
        return float(np.degrees(self.lon))

    @property
    def par_deg(self) -> float:
        """Parallel in degrees"""
        return float(np.degrees(self.par))


__all__ = ['XYZ', 'LPA']
