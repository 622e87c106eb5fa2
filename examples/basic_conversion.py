#!/usr/bin/env python3
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
Basic LPA <-> XYZ Conversion Example

This example demonstrates:
1. Building an earth model from reference ellipsoid radii
2. Converting geodetic coordinates to Cartesian and back
3. Batch conversion of many points at once
4. Handling domain errors
"""

import numpy as np

from pyellipsoid import LPA, DomainError, EarthModel, Ellipsoid, Shape
from pyellipsoid.core.constants import RE_WGS84, RP_WGS84
from pyellipsoid.logger import setup_logger


def single_points(model):
    """Convert a few well known places"""
    places = {
        'Equator / prime meridian': LPA(0.0, 0.0, 0.0),
        'North pole': LPA(0.0, 0.5 * np.pi, 0.0),
        'Mount Fuji': LPA(np.radians(138.7274), np.radians(35.3606), 3776.0),
        'Below Tokyo': LPA(np.radians(139.6503), np.radians(35.6762), -5000.0),
    }
    for name, lpa in places.items():
        xyz = model.xyz_for_lpa(lpa)
        back = model.lpa_for_xyz(xyz)
        print(f"{name:26s} XYZ = [{xyz.x:15.3f}, {xyz.y:15.3f}, {xyz.z:15.3f}] m")
        print(f"{'':26s} LPA = [{back.lon_deg:12.8f}°, {back.par_deg:12.8f}°, {back.alt:12.6f} m]")


def batch_points(model, num_points=100000):
    """Round trip a random cloud of points"""
    rng = np.random.default_rng(0)
    lpas = np.column_stack([
        rng.uniform(-np.pi, np.pi, num_points),
        rng.uniform(-0.49 * np.pi, 0.49 * np.pi, num_points),
        rng.uniform(-100.0e3, 100.0e3, num_points),
    ])
    xyzs = model.xyzs_for_lpas(lpas)
    back = model.lpas_for_xyzs(xyzs)
    max_alt_err = np.max(np.abs(back[:, 2] - lpas[:, 2]))
    print(f"\nBatch of {num_points} points: max altitude error {max_alt_err:.3e} m")


def domain_errors(model):
    """The center of the ellipsoid has no geodetic coordinates"""
    try:
        model.lpa_for_xyz([0.0, 0.0, 0.0])
    except DomainError as err:
        print(f"\nDomainError as expected: {err}")


def main():
    logger = setup_logger(level="INFO")
    model = EarthModel(Ellipsoid(Shape.from_axes(RE_WGS84, RP_WGS84)))
    logger.info(f"Using {model}")

    single_points(model)
    batch_points(model)
    domain_errors(model)


if __name__ == "__main__":
    main()
