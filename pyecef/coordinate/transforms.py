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

"""Coordinate transformation utilities for arrays of points"""

import logging

import numpy as np

from ..core.ellipsoid import WGS84, EllipsoidModel
from .kernels import forward_batch, reverse_batch, sincosd

logger = logging.getLogger(__name__)


def _as_rows(values: np.ndarray, name: str) -> np.ndarray:
    """Validate a (3,) or (N, 3) input and return it as a contiguous (N, 3) float array"""
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape[-1:] != (3,) or arr.ndim > 2:
        raise ValueError(f"{name} must have shape (3,) or (N, 3), got {arr.shape}")
    return np.ascontiguousarray(arr.reshape(-1, 3))


def llh2ecef(llh: np.ndarray, model: EllipsoidModel = WGS84) -> np.ndarray:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    llh : np.ndarray
        Geodetic coordinates [lat, lon, height], shape (3,) or (N, 3):
        - lat, lon: in degrees
        - height: height above the ellipsoid in meters
    model : EllipsoidModel
        Reference ellipsoid (default WGS84)

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters, same shape as the input

    Raises
    ------
    ValueError
        If the input does not have 3 components per point

    Notes
    -----
    Each row gives exactly the same result as pyecef.coordinate.forward.

    Examples
    --------
    >>> import numpy as np
    >>> llh = np.array([35.3606, 138.7274, 3776.0])  # Mount Fuji
    >>> ecef = llh2ecef(llh)
    >>> ecef.shape
    (3,)
    """
    shape = np.shape(llh)
    rows = _as_rows(llh, "llh")
    logger.debug(f"Converting {rows.shape[0]} geodetic points to ECEF")
    return forward_batch(model.a, model.e2, model.e2m, rows).reshape(shape)


def ecef2llh(xyz: np.ndarray, model: EllipsoidModel = WGS84) -> np.ndarray:
    """Convert ECEF coordinates to geodetic coordinates

    Parameters
    ----------
    xyz : np.ndarray
        ECEF coordinates [x, y, z] in meters, shape (3,) or (N, 3)
    model : EllipsoidModel
        Reference ellipsoid (default WGS84)

    Returns
    -------
    np.ndarray
        Geodetic coordinates [lat, lon, height], same shape as the input:
        - lat: latitude in degrees [-90, 90]
        - lon: longitude in degrees (-180, 180]
        - height: height above the ellipsoid in meters

    Raises
    ------
    ValueError
        If the input does not have 3 components per point

    Notes
    -----
    Closed-form (non-iterative) solution; each row gives exactly the same
    result as pyecef.coordinate.reverse, including its tie-break rules.

    Examples
    --------
    >>> import numpy as np
    >>> ecef = np.array([-3955178.4, 3473691.7, 3674804.2])
    >>> llh = ecef2llh(ecef)
    >>> bool(llh[1] > 0)
    True
    """
    shape = np.shape(xyz)
    rows = _as_rows(xyz, "xyz")
    logger.debug(f"Converting {rows.shape[0]} ECEF points to geodetic")
    out = reverse_batch(model.a, model.b, model.e2, model.e2m, model.e4, model.maxrad, rows)
    return out.reshape(shape)


def rotation_matrix_enu(lat: float, lon: float) -> np.ndarray:
    """Rotation matrix from ECEF to the local ENU frame

    Parameters
    ----------
    lat, lon : float
        Geodetic latitude and longitude of the frame origin (deg)

    Returns
    -------
    np.ndarray
        3x3 orthonormal matrix R such that enu = R @ (xyz - origin_xyz)
    """
    sin_lat, cos_lat = sincosd(float(lat))
    sin_lon, cos_lon = sincosd(float(lon))

    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    ])


def ecef2enu(xyz: np.ndarray, org_llh: np.ndarray, model: EllipsoidModel = WGS84) -> np.ndarray:
    """Convert ECEF to local ENU coordinates

    Parameters
    ----------
    xyz : np.ndarray
        ECEF coordinates [x, y, z] in meters, shape (3,) or (N, 3)
    org_llh : np.ndarray
        Origin geodetic coordinates [lat (deg), lon (deg), height (m)]
    model : EllipsoidModel
        Reference ellipsoid (default WGS84)

    Returns
    -------
    np.ndarray
        Local ENU coordinates [e, n, u] in meters, same shape as xyz
    """
    shape = np.shape(xyz)
    rows = _as_rows(xyz, "xyz")
    org_xyz = llh2ecef(np.asarray(org_llh, dtype=float), model)
    R = rotation_matrix_enu(org_llh[0], org_llh[1])
    return ((rows - org_xyz) @ R.T).reshape(shape)


def enu2ecef(enu: np.ndarray, org_llh: np.ndarray, model: EllipsoidModel = WGS84) -> np.ndarray:
    """Convert local ENU to ECEF coordinates

    Parameters
    ----------
    enu : np.ndarray
        Local ENU coordinates [e, n, u] in meters, shape (3,) or (N, 3)
    org_llh : np.ndarray
        Origin geodetic coordinates [lat (deg), lon (deg), height (m)]
    model : EllipsoidModel
        Reference ellipsoid (default WGS84)

    Returns
    -------
    np.ndarray
        ECEF coordinates [x, y, z] in meters, same shape as enu
    """
    shape = np.shape(enu)
    rows = _as_rows(enu, "enu")
    org_xyz = llh2ecef(np.asarray(org_llh, dtype=float), model)
    R = rotation_matrix_enu(org_llh[0], org_llh[1])
    return (rows @ R + org_xyz).reshape(shape)
