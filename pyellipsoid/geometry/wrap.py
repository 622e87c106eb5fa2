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
Angle wrapping utilities.

Longitudes are canonicalized to the half open interval [-π, π), so the
antimeridian is always reported as -π.
"""

import numpy as np
from numba import njit

TWO_PI = 2 * np.pi


@njit(cache=True)
def wrap_to_pi(angle):
    """
    Wrap angles to the half open range [-π, π).

    Parameters
    ----------
    angle : float or ndarray
        Angle(s) in radians; arrays must be at least one dimensional

    Returns
    -------
    float or ndarray
        Wrapped angle(s) in radians [-π, π)
    """
    return np.mod(angle + np.pi, TWO_PI) - np.pi


def angle_difference(ang1, ang2):
    """Signed smallest difference ang1 - ang2, wrapped to [-π, π)"""
    diff = np.subtract(ang1, ang2, dtype=float)
    if np.ndim(diff) == 0:
        return float(wrap_to_pi(float(diff)))
    return wrap_to_pi(np.ascontiguousarray(diff))
