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
PyECEF - Geodetic <-> Earth-Centered Earth-Fixed coordinate conversion

Closed-form conversion between latitude/longitude/height on an ellipsoid of
revolution and ECEF Cartesian coordinates, accurate to round-off for all
finite inputs.
"""

__version__ = "1.0.0"
__author__ = "PyECEF Development Team"
__title__ = "pyecef"
__description__ = "Geodetic to ECEF coordinate conversion"

from .core import *
from .coordinate import *
