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
Numba-compiled kernels for geodetic <-> ECEF conversion.

The kernels take the ellipsoid parameters as plain floats so that they can
be compiled once and shared by the scalar API (pyecef.coordinate.ecef) and
the array API (pyecef.coordinate.transforms).

The reverse conversion follows

    H. Vermeille, Direct transformation from geocentric coordinates to
    geodetic coordinates, J. Geodesy 76, 451-454 (2002).

with several changes so that it returns accurate results for all finite
inputs: the cubic is solved in a form that avoids cancellation, points on
the rotation axis, in the equatorial plane and at the center are classified
before the cubic is attempted, and points so distant that the ellipsoid is
indistinguishable from a point are handled with scaled components.

Kernels are compiled without fastmath: the round-off analysis of the cubic
depends on IEEE evaluation order and NaN propagation. error_model="numpy"
makes division by zero produce inf/nan instead of raising.
"""

import math

import numpy as np
from numba import njit


@njit(cache=True, error_model="numpy")
def sincosd(deg):
    """
    Sine and cosine of an angle in degrees.

    The argument is reduced exactly to [-45, 45] degrees before the
    trigonometric call, so multiples of 90 degrees give exact zeros
    and exact unit values.

    Parameters
    ----------
    deg : float
        Angle in degrees

    Returns
    -------
    s, c : float
        Sine and cosine
    """
    r = deg - 360.0 * math.floor(deg / 360.0 + 0.5)
    qf = math.floor(r / 90.0 + 0.5)
    r -= 90.0 * qf
    q = int(qf - 4.0 * math.floor(qf / 4.0))
    rad = math.radians(r)
    s = math.sin(rad)
    c = math.cos(rad)
    # Adding 0.0 turns -0.0 into +0.0
    if q == 0:
        return s + 0.0, c + 0.0
    elif q == 1:
        return c + 0.0, 0.0 - s
    elif q == 2:
        return 0.0 - s, 0.0 - c
    return 0.0 - c, s + 0.0


@njit(cache=True, error_model="numpy")
def _cbrt(t):
    """Real cube root with a single Newton polish"""
    if t == 0.0 or not math.isfinite(t):
        return t
    y = math.copysign(math.pow(abs(t), 1.0 / 3.0), t)
    return y - (y * y * y - t) / (3.0 * y * y)


@njit(cache=True, error_model="numpy")
def _longitude(x, y):
    """Longitude in (-180, 180] of an off-axis point"""
    lon = math.degrees(math.atan2(y, x))
    return 180.0 if lon == -180.0 else lon


@njit(cache=True, error_model="numpy")
def _focal_solve(a, e2, e2m, e4, p):
    # Equatorial plane, inside the focal region (p < e4): the nearest
    # points are a symmetric pair; return the northern one.
    zz = math.sqrt((e4 - p) / e2m)
    xx = math.sqrt(p)
    H = math.hypot(zz, xx)
    return math.degrees(math.atan2(zz, xx)), -a * e2m * H / e2


@njit(cache=True, error_model="numpy")
def _meridian_solve(a, e2, e2m, e4, R, z):
    """Latitude and height of a point with R != 0 and z != 0"""
    ra = R / a
    za = z / a
    p = ra * ra
    q = e2m * za * za
    r = (p + q - e4) / 6.0
    if e4 * q == 0.0 and r <= 0.0:
        # z is so small that e4 * q underflowed
        lat, h = _focal_solve(a, e2, e2m, e4, p)
        return (-lat if z < 0.0 else lat), h

    # S = r^3 * s; multiplying through by r avoids division by r = 0
    S = e4 * p * q / 4.0
    r2 = r * r
    r3 = r * r2
    disc = S * (2.0 * r3 + S)
    u = r
    if disc >= 0.0:
        T3 = S + r3
        # Sign on the sqrt maximizes |T3|; u does not depend on the choice
        T3 += -math.sqrt(disc) if T3 < 0.0 else math.sqrt(disc)
        T = _cbrt(T3)
        if T != 0.0:
            u += T + r2 / T
    else:
        # Three real roots; take the one that avoids cancellation. disc < 0 implies r < 0.
        ang = math.atan2(math.sqrt(-disc), -(S + r3))
        u += 2.0 * r * math.cos(ang / 3.0)

    v = math.sqrt(u * u + e4 * q)
    # u + v, rearranged when u < 0
    uv = e4 * q / (v - u) if u < 0.0 else u + v
    w = max(0.0, e2 * (uv - q) / (2.0 * v))
    k = uv / (math.sqrt(uv + w * w) + w)
    k2 = k + e2
    lat = math.degrees(math.atan2(z / k, R / k2))
    h = (1.0 - e2m / k) * math.hypot(k * R / k2, z)
    return lat, h


@njit(cache=True, error_model="numpy")
def forward_kernel(a, e2, e2m, lat, lon, h):
    """
    Geodetic (deg, deg, m) to ECEF (m).

    Parameters
    ----------
    a, e2, e2m : float
        Equatorial radius, eccentricity squared and 1 - e2
    lat, lon : float
        Latitude and longitude (deg)
    h : float
        Height above the ellipsoid (m)

    Returns
    -------
    x, y, z : float
        ECEF coordinates (m)
    """
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return np.nan, np.nan, np.nan
    sphi, cphi = sincosd(lat)
    slam, clam = sincosd(lon)
    n = a / math.sqrt(1.0 - e2 * sphi * sphi)
    z = (e2m * n + h) * sphi
    rho = (n + h) * cphi
    return rho * clam, rho * slam, z


@njit(cache=True, error_model="numpy")
def reverse_kernel(a, b, e2, e2m, e4, maxrad, x, y, z):
    """
    ECEF (m) to geodetic (deg, deg, m).

    Among the possible solutions the one minimizing |h| is returned; ties
    go to lat > 0 and then to lon = 0.

    Parameters
    ----------
    a, b : float
        Equatorial and polar semi-axes (m)
    e2, e2m, e4 : float
        Eccentricity squared, 1 - e2 and e2 squared
    maxrad : float
        Radius beyond which the ellipsoid is treated as a point (m)
    x, y, z : float
        ECEF coordinates (m)

    Returns
    -------
    lat, lon, h : float
        Latitude (deg), longitude (deg) and height (m)
    """
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return np.nan, np.nan, np.nan

    R = math.hypot(x, y)
    if math.hypot(R, z) > maxrad:
        # Halve the components so that R and the distance cannot overflow
        R2 = math.hypot(x / 2.0, y / 2.0)
        z2 = z / 2.0
        lon = _longitude(x, y) if R2 != 0.0 else 0.0
        return math.degrees(math.atan2(z2, R2)), lon, 2.0 * math.hypot(R2, z2)

    if R == 0.0:
        if z == 0.0:
            # Center: both poles are nearest, take the north one
            return 90.0, 0.0, -b
        return math.copysign(90.0, z), 0.0, abs(z) - b

    lon = _longitude(x, y)
    if e4 == 0.0:
        return math.degrees(math.atan2(z, R)), lon, math.hypot(R, z) - a

    if z == 0.0:
        ra = R / a
        p = ra * ra
        if p >= e4:
            return 0.0, lon, R - a
        lat, h = _focal_solve(a, e2, e2m, e4, p)
        return lat, lon, h

    lat, h = _meridian_solve(a, e2, e2m, e4, R, z)
    return lat, lon, h


@njit(cache=True, error_model="numpy")
def forward_batch(a, e2, e2m, llh):
    """Apply forward_kernel to each row of an (N, 3) array"""
    n = llh.shape[0]
    out = np.empty((n, 3))
    for i in range(n):
        x, y, z = forward_kernel(a, e2, e2m, llh[i, 0], llh[i, 1], llh[i, 2])
        out[i, 0] = x
        out[i, 1] = y
        out[i, 2] = z
    return out


@njit(cache=True, error_model="numpy")
def reverse_batch(a, b, e2, e2m, e4, maxrad, xyz):
    """Apply reverse_kernel to each row of an (N, 3) array"""
    n = xyz.shape[0]
    out = np.empty((n, 3))
    for i in range(n):
        lat, lon, h = reverse_kernel(a, b, e2, e2m, e4, maxrad, xyz[i, 0], xyz[i, 1], xyz[i, 2])
        out[i, 0] = lat
        out[i, 1] = lon
        out[i, 2] = h
    return out


@njit(cache=True)
def wrap_to_180(v1):
    """
    Wrap angles in degrees to the (-180, 180] range.

    Parameters
    ----------
    v1 : ndarray
        Angles in degrees

    Returns
    -------
    v2 : ndarray
        Wrapped angles in degrees
    """
    return -(np.mod(180.0 - v1, 360.0) - 180.0) + 0.0
