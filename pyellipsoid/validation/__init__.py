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

"""Validation of the series inverse against an exact solver

- reference: exact iterative foot point (scipy Brent root finding)
- metrics: round trip residuals, ellipsoidal excess and foot point error
  tables (pandas DataFrames)
"""

from .metrics import excess_bounds, excess_table, foot_point_errors, round_trip_residuals
from .reference import exact_foot_point, exact_lpa_for_xyz

__all__ = [
    'exact_foot_point', 'exact_lpa_for_xyz',
    'round_trip_residuals', 'excess_table', 'foot_point_errors', 'excess_bounds',
]
