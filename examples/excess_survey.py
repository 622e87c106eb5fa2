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
Ellipsoidal Excess Survey Example

This example demonstrates:
1. Sampling a meridian plane within ±100 km of the WGS84 surface
2. Tabulating the ellipsoidal excess (radial minus normal distance)
3. Comparing the series foot point against the exact solver
4. Plotting excess and series error against parallel

Requires the 'viz' extra (matplotlib).
"""

import argparse

import matplotlib.pyplot as plt
import numpy as np

from pyellipsoid import EarthModel
from pyellipsoid.core.constants import ALT_VALID_MAX, ALT_VALID_MIN
from pyellipsoid.logger import setup_logger_from_config
from pyellipsoid.sim import SampleSpec, meridian_plane_samples
from pyellipsoid.validation import excess_bounds, excess_table, foot_point_errors


def survey(num_rad=33, num_par=33):
    """Excess and series error tables over one meridian plane"""
    model = EarthModel.wgs84()
    radius = model.ellipsoid.radius
    rad_spec = SampleSpec(num_rad, (radius + ALT_VALID_MIN, radius + ALT_VALID_MAX))
    par_spec = SampleSpec(num_par, (0.0, 0.5 * np.pi))
    xyzs = meridian_plane_samples(rad_spec, par_spec)

    excess = excess_table(xyzs, model)
    errors = foot_point_errors(xyzs, model)
    excess_bounds(excess)
    return excess, errors


def plot(excess, errors, output=None):
    """Excess and series foot point error versus parallel"""
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    scatter = ax1.scatter(np.degrees(excess['par']), excess['excess'],
                          c=excess['alt'] / 1000.0, s=8, cmap='viridis')
    ax1.set_ylabel('Excess [m]')
    ax1.set_title('Ellipsoidal excess (radial - normal distance)')
    fig.colorbar(scatter, ax=ax1, label='Altitude [km]')
    ax1.grid(True, alpha=0.3)

    ax2.semilogy(np.degrees(errors['par']), errors['d_mag'].clip(lower=1e-15), '.', markersize=4)
    ax2.set_xlabel('Parallel [deg]')
    ax2.set_ylabel('|p_series - p_exact| [m]')
    ax2.set_title('Series foot point error')
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    if output:
        plt.savefig(output, dpi=150)
        print(f"Saved figure to {output}")
    else:
        plt.show()


def main():
    parser = argparse.ArgumentParser(description='Survey the ellipsoidal excess over a meridian plane')
    parser.add_argument('--num-rad', type=int, default=33, help='radial samples')
    parser.add_argument('--num-par', type=int, default=33, help='parallel samples')
    parser.add_argument('--output', type=str, default=None, help='save figure instead of showing it')
    args = parser.parse_args()

    setup_logger_from_config({'default_level': 'INFO'})
    excess, errors = survey(args.num_rad, args.num_par)
    print(excess.describe())
    print(f"\nMax series foot point error: {errors['d_mag'].max():.3e} m")
    plot(excess, errors, args.output)


if __name__ == "__main__":
    main()
