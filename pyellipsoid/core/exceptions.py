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

"""Exceptions raised by shape construction and coordinate transforms"""


class ShapeError(ValueError):
    """Invalid ellipsoid shape parameters (non-positive or non-finite)"""


class DomainError(ValueError):
    """Input lies outside the geometrically valid domain of a transform

    Raised instead of returning NaN/Inf, e.g. for a zero direction vector
    or a point at the center of the ellipsoid.
    """
