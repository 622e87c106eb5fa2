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
pyellipsoid - Geocentric/Geodetic Conversion on a General Ellipsoid

Exact forward conversion from longitude/parallel/altitude (LPA) to
geocentric Cartesian (XYZ) coordinates, and a fast non-iterative inverse
that finds the ellipsoid-normal foot point through a series correction of
the ellipsoidal excess.
"""

__version__ = "1.0.0"
__author__ = "pyellipsoid Development Team"
__title__ = "pyellipsoid"
__description__ = "Geocentric/geodetic coordinate conversion on a general ellipsoid"

from .core import *
from .coordinate import *
from .geometry import angle_difference, wrap_to_pi
