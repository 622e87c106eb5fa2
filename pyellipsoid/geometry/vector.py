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

"""Vector helpers operating on the last axis of (..., 3) arrays"""

import numpy as np

from ..core.exceptions import DomainError


def as_points(values) -> np.ndarray:
    """Coerce a point or a stack of points to a float array of shape (..., 3)

    Raises
    ------
    DomainError
        If the trailing dimension is not 3 or any component is not finite
    """
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise DomainError(f"Expected coordinates with trailing dimension 3, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise DomainError("Coordinates must be finite")
    return arr


def magnitude(vec: np.ndarray) -> np.ndarray:
    """Euclidean length along the last axis"""
    return np.sqrt(np.sum(np.square(vec), axis=-1))


def unit(vec: np.ndarray) -> np.ndarray:
    """Unit vector(s) in the direction of vec

    Raises
    ------
    DomainError
        If any vector has zero magnitude
    """
    mag = magnitude(vec)
    if np.any(mag == 0.0):
        raise DomainError("Cannot normalize a zero-magnitude vector")
    return vec / mag[..., np.newaxis]


def direction_for(lon, par) -> np.ndarray:
    """Unit direction for a (longitude, parallel) pair on the unit sphere"""
    cos_par = np.cos(par)
    return np.stack([
        cos_par * np.cos(lon),
        cos_par * np.sin(lon),
        np.sin(par),
    ], axis=-1)
