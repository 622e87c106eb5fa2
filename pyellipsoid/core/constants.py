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

"""Reference Body Constants and Sampling Parameters"""

import numpy as np

# Angular constants
PI = np.pi
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi

# WGS84 ellipsoid
RE_WGS84 = 6378137.0                    # equatorial radius (m)
FE_WGS84 = 1.0 / 298.257223563          # flattening
RP_WGS84 = RE_WGS84 * (1.0 - FE_WGS84)  # polar radius (m)

# GRS80 ellipsoid
RE_GRS80 = 6378137.0                    # equatorial radius (m)
FE_GRS80 = 1.0 / 298.257222101          # flattening
RP_GRS80 = RE_GRS80 * (1.0 - FE_GRS80)  # polar radius (m)

# Sampling ranges
END_FRAC = 1.0 - np.finfo(float).eps    # "just inside" an open interval end
RANGE_LON = (-PI, END_FRAC * PI)        # approximates half open [-pi, pi)
RANGE_PAR = (-HALF_PI, HALF_PI)         # closed [-pi/2, pi/2]

# Altitude envelope over which the series inverse is validated (m)
ALT_VALID_MIN = -100.0e3
ALT_VALID_MAX = 100.0e3
