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

"""Geodetic computations and utilities"""

from typing import Union

import numpy as np

from ..core.constants import D2R
from ..core.ellipsoid import WGS84, EllipsoidModel
from .kernels import wrap_to_180

ArrayLike = Union[float, np.ndarray]


def radius_of_curvature(lat: ArrayLike, model: EllipsoidModel = WGS84) -> tuple[ArrayLike, ArrayLike]:
    """
    Compute radii of curvature at given latitude

    Parameters:
    -----------
    lat : float or np.ndarray
        Latitude (deg)
    model : EllipsoidModel
        Reference ellipsoid (default WGS84)

    Returns:
    --------
    M : float or np.ndarray
        Meridional radius of curvature (m)
    N : float or np.ndarray
        Prime vertical radius of curvature (m)
    """
    sin_lat = np.sin(np.asarray(lat, dtype=float) * D2R)
    w2 = 1.0 - model.e2 * sin_lat**2

    # Prime vertical radius
    N = model.a / np.sqrt(w2)

    # Meridional radius
    M = model.a * model.e2m / w2**1.5

    return M, N


def geodetic_height_bound(lat: ArrayLike, model: EllipsoidModel = WGS84) -> ArrayLike:
    """
    Lowest height that reverse() can return at a given latitude

    This is -N * (1 - e2), the distance along the normal from the surface
    down to the equatorial plane. Points below it are closer to the
    opposite hemisphere.

    Parameters:
    -----------
    lat : float or np.ndarray
        Latitude (deg)
    model : EllipsoidModel
        Reference ellipsoid (default WGS84)

    Returns:
    --------
    h_min : float or np.ndarray
        Lower bound on the height (m)
    """
    _, N = radius_of_curvature(lat, model)
    return -N * model.e2m


def wrap_longitude(lon: ArrayLike) -> ArrayLike:
    """
    Reduce longitudes to the (-180, 180] range

    Parameters:
    -----------
    lon : float or np.ndarray
        Longitude (deg)

    Returns:
    --------
    lon : float or np.ndarray
        Wrapped longitude (deg), same shape as the input
    """
    arr = np.asarray(lon, dtype=float)
    wrapped = wrap_to_180(np.ascontiguousarray(arr.reshape(-1))).reshape(arr.shape)
    return float(wrapped) if arr.ndim == 0 else wrapped
