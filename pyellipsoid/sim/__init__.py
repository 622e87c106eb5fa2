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

"""Sampling grids used to validate the transforms"""

from .sampling import (
    SampleSpec,
    bulk_samples_alt,
    bulk_samples_lon,
    bulk_samples_lpa,
    bulk_samples_par,
    combo_samples_lpa,
    meridian_plane_samples,
    samples_according_to,
)

__all__ = [
    'SampleSpec', 'samples_according_to', 'meridian_plane_samples',
    'bulk_samples_lon', 'bulk_samples_par', 'bulk_samples_alt',
    'combo_samples_lpa', 'bulk_samples_lpa',
]
