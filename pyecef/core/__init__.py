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

"""Core ellipsoid definitions.

- **Constants**: reference ellipsoid parameters (WGS84, GRS80, mean sphere)
  and unit conversions
- **Ellipsoid model**: immutable EllipsoidModel with derived eccentricities,
  plus process-wide WGS84, GRS80 and SPHERE instances

Example Usage:
    >>> from pyecef.core import WGS84, build_ellipsoid_model
    >>> clarke = build_ellipsoid_model(6378206.4, 294.9786982)
    >>> print(f"{WGS84.b:.3f}")
    6356752.314
"""

from .constants import *
from .ellipsoid import GRS80, SPHERE, WGS84, EllipsoidModel, build_ellipsoid_model
