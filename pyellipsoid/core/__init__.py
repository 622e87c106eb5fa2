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

"""Core Module.

This module provides the fundamental pieces shared by the rest of pyellipsoid:

- **Constants**: reference ellipsoid radii (WGS84, GRS80), angular constants,
  sampling ranges and the validated altitude envelope
- **Data Structures**: the immutable ``XYZ`` and ``LPA`` coordinate triples
- **Exceptions**: ``ShapeError`` for invalid shape parameters and
  ``DomainError`` for transform inputs outside the valid domain

Example Usage:
    >>> from pyellipsoid.core import LPA, XYZ
    >>> lpa = LPA(lon=0.0, par=0.0, alt=0.0)
    >>> xyz = XYZ.from_array([6378137.0, 0.0, 0.0])
"""

from .constants import *
from .data_structures import *
from .exceptions import DomainError, ShapeError
