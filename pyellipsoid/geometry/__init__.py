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
Geometry utilities.

Small vector and angle helpers used by the shape and transform code. All
vector functions work on the last axis, so a single point of shape (3,)
and a batch of shape (N, 3) go through the same code.

Functions
---------
as_points : function
    Validate and coerce input coordinates to a float array
magnitude, unit : function
    Vector length and normalization (``unit`` rejects zero vectors)
direction_for : function
    Unit direction for a longitude/parallel pair
wrap_to_pi, angle_difference : function
    Angle canonicalization
"""

from .vector import as_points, direction_for, magnitude, unit
from .wrap import angle_difference, wrap_to_pi

__all__ = [
    'as_points', 'direction_for', 'magnitude', 'unit',
    'angle_difference', 'wrap_to_pi',
]
