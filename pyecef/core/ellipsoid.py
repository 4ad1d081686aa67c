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

"""Ellipsoid of revolution model"""

import logging
import math
from dataclasses import dataclass, field

from .constants import EPS, KNOWN_ELLIPSOIDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EllipsoidModel:
    """Shape parameters of an oblate (or spherical) ellipsoid of revolution.

    Only ``a`` and ``invf`` are supplied; every other field is derived once
    in ``__post_init__`` and the instance is immutable afterwards, so a
    single model can be shared freely between threads.

    Attributes
    ----------
    a : float
        Equatorial radius (m)
    invf : float
        Inverse flattening. Values <= 0 (or +inf) describe a sphere.
    f : float
        Flattening, 0 for a sphere
    e2 : float
        First eccentricity squared, f * (2 - f)
    e4 : float
        e2 squared
    e2m : float
        1 - e2
    b : float
        Polar semi-minor axis a * (1 - f) (m)
    maxrad : float
        Distance from the center beyond which the ellipsoid is treated as a
        point when inverting ECEF coordinates (m)

    Raises
    ------
    ValueError
        If ``a`` is not a finite positive number, ``invf`` is NaN, or
        ``0 < invf <= 1`` (flattening of 1 or more).

    Examples
    --------
    >>> model = EllipsoidModel(6378137.0, 298.257223563)
    >>> print(f"b = {model.b:.4f} m")
    b = 6356752.3142 m
    """
    a: float
    invf: float
    f: float = field(init=False)
    e2: float = field(init=False)
    e4: float = field(init=False)
    e2m: float = field(init=False)
    b: float = field(init=False)
    maxrad: float = field(init=False)

    def __post_init__(self):
        a = float(self.a)
        invf = float(self.invf)
        if not (math.isfinite(a) and a > 0):
            raise ValueError(f"Equatorial radius must be finite and positive, got {self.a!r}")
        if math.isnan(invf):
            raise ValueError("Inverse flattening must not be NaN")
        if 0 < invf <= 1:
            raise ValueError(f"Inverse flattening {invf} gives flattening >= 1")

        f = 1.0 / invf if invf > 0 else 0.0
        e2 = f * (2.0 - f)

        object.__setattr__(self, "a", a)
        object.__setattr__(self, "invf", invf)
        object.__setattr__(self, "f", f)
        object.__setattr__(self, "e2", e2)
        object.__setattr__(self, "e4", e2 * e2)
        object.__setattr__(self, "e2m", 1.0 - e2)
        object.__setattr__(self, "b", a * (1.0 - f))
        # Beyond this radius a is below half an ulp of the distance
        object.__setattr__(self, "maxrad", 2.0 * a / EPS)

    @property
    def is_sphere(self) -> bool:
        """True when the model has zero flattening"""
        return self.f == 0

    @classmethod
    def from_name(cls, name: str) -> "EllipsoidModel":
        """Build one of the reference ellipsoids listed in KNOWN_ELLIPSOIDS

        Parameters
        ----------
        name : str
            Ellipsoid name, case-insensitive (e.g. "WGS84", "grs80")

        Returns
        -------
        EllipsoidModel
            The corresponding model

        Raises
        ------
        KeyError
            If the name is unknown
        """
        key = name.upper()
        if key not in KNOWN_ELLIPSOIDS:
            raise KeyError(f"Unknown ellipsoid {name!r}; known: {', '.join(sorted(KNOWN_ELLIPSOIDS))}")
        a, invf = KNOWN_ELLIPSOIDS[key]
        return build_ellipsoid_model(a, invf)


def build_ellipsoid_model(a: float, invf: float) -> EllipsoidModel:
    """Construct an ellipsoid model from equatorial radius and inverse flattening

    Parameters
    ----------
    a : float
        Equatorial radius (m)
    invf : float
        Inverse flattening; <= 0 means a sphere

    Returns
    -------
    EllipsoidModel
        Immutable model with derived parameters
    """
    model = EllipsoidModel(a, invf)
    logger.debug(f"Built ellipsoid model a={model.a} invf={model.invf} e2={model.e2:.15g}")
    return model


WGS84 = build_ellipsoid_model(*KNOWN_ELLIPSOIDS["WGS84"])
GRS80 = build_ellipsoid_model(*KNOWN_ELLIPSOIDS["GRS80"])
SPHERE = build_ellipsoid_model(*KNOWN_ELLIPSOIDS["SPHERE"])
