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
Structured sample grids for exercising the transforms.

The grids span the domain of validity: every longitude in [-π, π), every
parallel in [-π/2, π/2] and altitudes within ±100 km, with the boundary
and key values always included.
"""

from dataclasses import dataclass, field
from typing import Sequence, Tuple

import numpy as np

from ..core.constants import ALT_VALID_MAX, ALT_VALID_MIN, HALF_PI, PI, RANGE_LON, RANGE_PAR
from ..geometry.vector import direction_for


@dataclass(frozen=True)
class SampleSpec:
    """Uniform sampling of a closed range.

    Attributes
    ----------
    num_samps : int
        Number of samples; both range end points are included when > 1
    range : tuple of float
        Closed interval (first, last)
    delta : float
        Spacing between samples (0 for a single sample)
    """
    num_samps: int
    range: Tuple[float, float]
    delta: float = field(init=False)

    def __post_init__(self):
        if self.num_samps < 0:
            raise ValueError(f"Number of samples must be non-negative, got {self.num_samps}")
        object.__setattr__(self, 'delta', self.delta_for(self.num_samps, self.range))

    @staticmethod
    def delta_for(num_samps: int, range_: Tuple[float, float]) -> float:
        """Increment producing num_samps samples spanning the closed range"""
        if num_samps > 1:
            return (range_[1] - range_[0]) / float(num_samps - 1)
        return 0.0

    def size(self) -> int:
        return self.num_samps

    def first(self) -> float:
        return self.range[0]

    def last(self) -> float:
        return self.range[1]

    def value_at_index(self, ndx: int) -> float:
        """Sample value at ndx (not range checked)"""
        return self.first() + float(ndx) * self.delta


def samples_according_to(spec: SampleSpec) -> np.ndarray:
    """All sample values of a spec, in increasing index order"""
    return spec.first() + np.arange(spec.size(), dtype=float) * spec.delta


def meridian_plane_samples(rad_spec: SampleSpec, par_spec: SampleSpec,
                           lon_val: float = 0.25 * PI) -> np.ndarray:
    """
    Points in one meridian plane, distributed circularly (not geodetically).

    Parameters
    ----------
    rad_spec : SampleSpec
        Radial distances from the center (m)
    par_spec : SampleSpec
        Parallel angles (rad)
    lon_val : float
        Longitude of the plane (rad)

    Returns
    -------
    np.ndarray
        Points of shape (par_spec.size() * rad_spec.size(), 3), ordered
        parallel-major
    """
    par_vals = samples_according_to(par_spec)
    rad_vals = samples_according_to(rad_spec)
    xyz_dirs = direction_for(lon_val, par_vals)
    xyzs = rad_vals[np.newaxis, :, np.newaxis] * xyz_dirs[:, np.newaxis, :]
    return xyzs.reshape(-1, 3)


def bulk_samples_lon(num_bulk: int = 8) -> np.ndarray:
    """Longitudes: both range ends and zero, then num_bulk uniform samples"""
    lon_spec = SampleSpec(num_bulk, RANGE_LON)
    key_vals = [lon_spec.first(), 0.0, lon_spec.last()]
    return np.concatenate([key_vals, samples_according_to(lon_spec)])


def bulk_samples_par(num_bulk: int = 8) -> np.ndarray:
    """Parallels: poles, ±45° and the equator, then num_bulk uniform samples"""
    par_spec = SampleSpec(num_bulk, RANGE_PAR)
    key_vals = [-HALF_PI, -0.5 * HALF_PI, 0.0, 0.5 * HALF_PI, HALF_PI]
    return np.concatenate([key_vals, samples_according_to(par_spec)])


def bulk_samples_alt(num_bulk: int = 8) -> np.ndarray:
    """Altitudes: envelope ends and zero, then num_bulk steps from the bottom"""
    key_vals = [ALT_VALID_MIN, 0.0, ALT_VALID_MAX]
    if num_bulk < 1:
        return np.array(key_vals)
    alt_delta = (ALT_VALID_MAX - ALT_VALID_MIN) / float(num_bulk)
    bulk = ALT_VALID_MIN + np.arange(num_bulk, dtype=float) * alt_delta
    return np.concatenate([key_vals, bulk])


def combo_samples_lpa(lon_samps: Sequence[float], par_samps: Sequence[float],
                      alt_samps: Sequence[float]) -> np.ndarray:
    """Every (lon, par, alt) combination as rows of shape (N, 3), lon-major"""
    lon_grid, par_grid, alt_grid = np.meshgrid(
        np.asarray(lon_samps, dtype=float),
        np.asarray(par_samps, dtype=float),
        np.asarray(alt_samps, dtype=float),
        indexing='ij',
    )
    return np.stack([lon_grid.ravel(), par_grid.ravel(), alt_grid.ravel()], axis=-1)


def bulk_samples_lpa(lon_bulk: int = 8, par_bulk: int = 8, alt_bulk: int = 8) -> np.ndarray:
    """LPA grid spanning the domain of validity"""
    return combo_samples_lpa(
        bulk_samples_lon(lon_bulk),
        bulk_samples_par(par_bulk),
        bulk_samples_alt(alt_bulk),
    )
