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

"""Coordinate transformation utilities

This module provides:
- Scalar geodetic <-> ECEF conversion (forward, reverse)
- Array conversion (llh2ecef, ecef2llh) backed by Numba-compiled loops
- Local ENU frames (ecef2enu, enu2ecef, CoordinateTransformer)
- Radii of curvature and related geodetic helpers
"""

# Object-oriented local frame
from .coordinate_transformer import CoordinateTransformer

# Scalar conversion
from .ecef import ECEFCoordinate, GeodeticCoordinate, forward, reverse

# Geodetic utilities
from .geodetic import geodetic_height_bound, radius_of_curvature, wrap_longitude

# Array conversion
from .transforms import ecef2enu, ecef2llh, enu2ecef, llh2ecef, rotation_matrix_enu
