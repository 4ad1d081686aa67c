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
Accuracy assessment for the geodetic <-> ECEF conversion.

Two independent checks are provided:

- round trip: geodetic -> ECEF -> geodetic on random points, with the
  differences expressed as distances in meters
- reference solution: a brute-force nearest-point search on the meridian
  ellipse (scipy) to compare against the closed-form inversion
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from ..core.constants import D2R, R2D
from ..core.ellipsoid import WGS84, EllipsoidModel
from ..coordinate.ecef import GeodeticCoordinate
from ..coordinate.geodetic import radius_of_curvature, wrap_longitude
from ..coordinate.transforms import ecef2llh, llh2ecef

logger = logging.getLogger(__name__)

ERROR_COLUMNS = ["dlat_m", "dlon_m", "dh_m", "dpos_m"]


def sample_geodetic_points(n: int, max_height: float = 5.0e6,
                           seed: Optional[int] = None) -> np.ndarray:
    """
    Draw random geodetic points

    Directions are uniform on the sphere and heights uniform in
    [-max_height, max_height].

    Parameters
    ----------
    n : int
        Number of points
    max_height : float
        Largest absolute height (m)
    seed : int, optional
        Seed for numpy's default_rng

    Returns
    -------
    np.ndarray
        (n, 3) array of [lat (deg), lon (deg), h (m)]
    """
    rng = np.random.default_rng(seed)
    lat = np.arcsin(rng.uniform(-1.0, 1.0, n)) * R2D
    lon = rng.uniform(-180.0, 180.0, n)
    h = rng.uniform(-max_height, max_height, n)
    return np.column_stack([lat, lon, h])


def round_trip_errors(llh: np.ndarray, model: EllipsoidModel = WGS84) -> pd.DataFrame:
    """
    Round-trip geodetic points through ECEF and measure the differences

    Parameters
    ----------
    llh : np.ndarray
        (N, 3) array of [lat (deg), lon (deg), h (m)]
    model : EllipsoidModel
        Reference ellipsoid (default WGS84)

    Returns
    -------
    pd.DataFrame
        One row per point with the input columns lat, lon, h and the
        absolute errors in meters:
        - dlat_m: latitude error along the meridian
        - dlon_m: longitude error along the parallel
        - dh_m: height error
        - dpos_m: ECEF distance between the input point and the forward
          image of the recovered coordinates
    """
    llh = np.atleast_2d(np.asarray(llh, dtype=float))
    xyz = llh2ecef(llh, model)
    back = ecef2llh(xyz, model)

    lat, lon, h = llh[:, 0], llh[:, 1], llh[:, 2]
    M, N = radius_of_curvature(lat, model)
    dlat = (back[:, 0] - lat) * D2R * (M + h)
    dlon = wrap_longitude(back[:, 1] - lon) * D2R * (N + h) * np.cos(lat * D2R)
    dpos = np.linalg.norm(llh2ecef(back, model) - xyz, axis=1)

    df = pd.DataFrame({
        "lat": lat,
        "lon": lon,
        "h": h,
        "dlat_m": np.abs(dlat),
        "dlon_m": np.abs(dlon),
        "dh_m": np.abs(back[:, 2] - h),
        "dpos_m": dpos,
    })
    logger.info(f"Round trip of {len(df)} points: max position error {df['dpos_m'].max():.3e} m")
    return df


def summarize_errors(df: pd.DataFrame) -> pd.DataFrame:
    """
    Max and RMS of each error column

    Parameters
    ----------
    df : pd.DataFrame
        Output of round_trip_errors

    Returns
    -------
    pd.DataFrame
        Index ["max", "rms"], one column per error
    """
    errors = df[ERROR_COLUMNS]
    return pd.DataFrame({
        "max": errors.max(),
        "rms": np.sqrt((errors ** 2).mean()),
    }).T


def reference_reverse(model: EllipsoidModel, x: float, y: float, z: float,
                      xatol: float = 1e-14) -> GeodeticCoordinate:
    """
    Nearest-point inversion by direct minimization

    Minimizes the distance from the point to the meridian ellipse over the
    parametric latitude with scipy's bounded scalar minimizer. It is slow
    and only accurate to about 1e-8 rad in latitude, but it shares no
    algebra with the closed form, which makes it a useful cross-check away
    from the axis, the equatorial plane and the region near the center
    where several local minima exist.

    Parameters
    ----------
    model : EllipsoidModel
        Reference ellipsoid
    x, y, z : float
        ECEF coordinates (m)
    xatol : float
        Absolute tolerance on the parametric latitude (rad)

    Returns
    -------
    GeodeticCoordinate
        (lat, lon, h) in degrees, degrees and meters
    """
    from scipy.optimize import minimize_scalar

    R = np.hypot(x, y)
    a, b = model.a, model.b

    def distance(beta):
        return np.hypot(R - a * np.cos(beta), z - b * np.sin(beta))

    bounds = (0.0, np.pi / 2) if z >= 0 else (-np.pi / 2, 0.0)
    result = minimize_scalar(distance, bounds=bounds, method="bounded",
                             options={"xatol": xatol})
    beta = result.x

    lat = np.arctan2(a * np.sin(beta), b * np.cos(beta)) * R2D
    inside = (R / a) ** 2 + (z / b) ** 2 < 1.0
    h = -result.fun if inside else result.fun
    lon = np.arctan2(y, x) * R2D
    return GeodeticCoordinate(float(lat), float(lon), float(h))


def plot_errors(df: pd.DataFrame, ax=None, column: str = "dpos_m"):
    """
    Scatter an error column (in nanometers) against latitude

    Parameters
    ----------
    df : pd.DataFrame
        Output of round_trip_errors
    ax : matplotlib.axes.Axes, optional
        Axes to draw on; a new figure is created if None
    column : str
        Error column to plot

    Returns
    -------
    matplotlib.axes.Axes
        The axes that were drawn on
    """
    import matplotlib.pyplot as plt

    if column not in ERROR_COLUMNS:
        raise ValueError(f"Unknown error column {column!r}; expected one of {ERROR_COLUMNS}")
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))

    ax.scatter(df["lat"], df[column] * 1e9, s=4, alpha=0.6)
    ax.set_xlabel("Latitude [deg]")
    ax.set_ylabel(f"{column} [nm]")
    ax.set_xlim(-90, 90)
    ax.grid(True, alpha=0.3)
    return ax
