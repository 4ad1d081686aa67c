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

"""Earth centered, earth fixed coordinates

Convert between geodetic coordinates latitude = lat, longitude = lon,
height = h (measured along the normal from the surface of the ellipsoid)
and earth centered, earth fixed (ECEF) coordinates x, y, z. The origin of
ECEF coordinates is at the center of the ellipsoid, the z axis goes through
the north pole (lat = 90) and the x axis through lat = 0, lon = 0.

The errors of the reverse conversion are close to round-off: for points
within 5000 km of the surface of the WGS84 ellipsoid (inside or outside)
they are a few nanometers.
"""

from typing import NamedTuple

from ..core.ellipsoid import EllipsoidModel
from .kernels import forward_kernel, reverse_kernel


class GeodeticCoordinate(NamedTuple):
    """Geodetic position: latitude (deg), longitude (deg), height (m)"""
    lat: float
    lon: float
    h: float


class ECEFCoordinate(NamedTuple):
    """Earth centered, earth fixed position (m)"""
    x: float
    y: float
    z: float


def forward(model: EllipsoidModel, lat: float, lon: float, h: float) -> ECEFCoordinate:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    model : EllipsoidModel
        Reference ellipsoid
    lat : float
        Latitude in degrees, [-90, 90]
    lon : float
        Longitude in degrees, any value
    h : float
        Height above the ellipsoid in meters

    Returns
    -------
    ECEFCoordinate
        (x, y, z) in meters

    Notes
    -----
    cos(lat) is exactly zero at the poles so the result does not depend on
    the longitude there. Non-finite lat or lon give NaN coordinates.

    Examples
    --------
    >>> from pyecef.core import WGS84
    >>> x, y, z = forward(WGS84, 0.0, 90.0, 0.0)
    >>> (x, y, z)
    (0.0, 6378137.0, 0.0)
    """
    return ECEFCoordinate(*forward_kernel(model.a, model.e2, model.e2m,
                                          float(lat), float(lon), float(h)))


def reverse(model: EllipsoidModel, x: float, y: float, z: float) -> GeodeticCoordinate:
    """Convert ECEF coordinates to geodetic coordinates

    In general there are several solutions; the one minimizing |h| is
    returned. If several solutions with different latitudes remain (only
    possible when z = 0), the one with lat > 0 is returned. If several
    solutions with different longitudes remain (only possible when
    x = y = 0), lon = 0 is returned. The height always satisfies
    h >= -a * (1 - e2) / sqrt(1 - e2 * sin(lat)**2).

    Parameters
    ----------
    model : EllipsoidModel
        Reference ellipsoid
    x, y, z : float
        ECEF coordinates in meters

    Returns
    -------
    GeodeticCoordinate
        (lat, lon, h) with lat in [-90, 90] deg, lon in (-180, 180] deg and
        h in meters. Any non-finite input component gives NaN for all three.

    Examples
    --------
    >>> from pyecef.core import WGS84
    >>> reverse(WGS84, 0.0, 0.0, 0.0)
    GeodeticCoordinate(lat=90.0, lon=0.0, h=-6356752.314245179)
    """
    return GeodeticCoordinate(*reverse_kernel(model.a, model.b, model.e2, model.e2m,
                                              model.e4, model.maxrad,
                                              float(x), float(y), float(z)))

