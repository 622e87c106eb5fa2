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

"""Ellipsoid geometry and coordinate transformations

This module provides:
- Shape: implicit quadratic ellipsoid surface (gradient, radius along a ray)
- Ellipsoid / EarthModel: immutable containers that configure the transforms
- Forward transform (LPA -> XYZ), closed form
- Inverse transform (XYZ -> LPA), non-iterative via the ellipsoidal excess
- Batch versions of both transforms for (N, 3) arrays
"""

from .ellipsoid import EarthModel, Ellipsoid
from .excess import foot_point_via_excess, radial_point, zeta_coefficients, zeta_series_root
from .shape import Shape
from .transforms import lpa_for_xyz, lpas_for_xyzs, xyz_for_lpa, xyzs_for_lpas

__all__ = [
    'Shape', 'Ellipsoid', 'EarthModel',
    'xyz_for_lpa', 'lpa_for_xyz', 'xyzs_for_lpas', 'lpas_for_xyzs',
    'radial_point', 'zeta_coefficients', 'zeta_series_root', 'foot_point_via_excess',
]
