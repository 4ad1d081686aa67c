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

"""Reference Ellipsoid Constants and Unit Conversions"""

import numpy as np

# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
INVF_WGS84 = 298.257223563     # inverse flattening
FE_WGS84 = 1.0 / INVF_WGS84    # earth flattening
RP_WGS84 = RE_WGS84 * (1.0 - FE_WGS84)      # polar radius (semi-minor axis) (m)
E2_WGS84 = FE_WGS84 * (2.0 - FE_WGS84)      # WGS84 eccentricity squared

# Earth Parameters (GRS80)
RE_GRS80 = 6378137.0           # semimajor axis (m)
INVF_GRS80 = 298.257222101     # inverse flattening

# IUGG mean earth radius, used for the spherical model
RE_MEAN = 6371008.8            # mean radius (m)

# Name -> (semimajor axis, inverse flattening); inverse flattening <= 0 is a sphere
KNOWN_ELLIPSOIDS = {
    "WGS84": (RE_WGS84, INVF_WGS84),
    "GRS80": (RE_GRS80, INVF_GRS80),
    "SPHERE": (RE_MEAN, 0.0),
}

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians

# Double precision machine epsilon
EPS = float(np.finfo(np.float64).eps)
