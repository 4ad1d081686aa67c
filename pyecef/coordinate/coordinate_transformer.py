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

"""Local east-north-up frame pinned to a reference point"""

import logging
from typing import Optional

import numpy as np

from ..core.ellipsoid import WGS84, EllipsoidModel
from .transforms import ecef2llh, llh2ecef, rotation_matrix_enu

logger = logging.getLogger(__name__)


class CoordinateTransformer:
    """Handles coordinate transformations between ECEF, geodetic and local ENU frames

    The local frame has its origin at a reference point, the up axis along
    the ellipsoid normal there, and the north axis toward the pole. All
    geodetic angles are in degrees.
    """

    def __init__(self, reference_llh: Optional[np.ndarray] = None,
                 model: EllipsoidModel = WGS84):
        """Initialize coordinate transformer

        Parameters:
        -----------
        reference_llh : np.ndarray, optional
            Reference position [lat (deg), lon (deg), h (m)] for the local frame
        model : EllipsoidModel
            Reference ellipsoid (default WGS84)
        """
        self.model = model
        self._reference_ecef: Optional[np.ndarray] = None
        self._reference_llh: Optional[np.ndarray] = None
        self._rotation_ecef_to_enu: Optional[np.ndarray] = None

        if reference_llh is not None:
            self.set_reference_llh(reference_llh)

    def set_reference_llh(self, reference_llh: np.ndarray):
        """Set reference position from geodetic coordinates

        Parameters:
        -----------
        reference_llh : np.ndarray
            Reference position [lat (deg), lon (deg), h (m)]
        """
        self._reference_llh = np.array(reference_llh, dtype=float)
        self._reference_ecef = llh2ecef(self._reference_llh, self.model)
        self._rotation_ecef_to_enu = rotation_matrix_enu(self._reference_llh[0],
                                                         self._reference_llh[1])
        logger.debug(f"Local frame reference set to {self._reference_llh}")

    def set_reference_ecef(self, reference_ecef: np.ndarray):
        """Set reference position from ECEF coordinates

        Parameters:
        -----------
        reference_ecef : np.ndarray
            Reference position [x, y, z] in meters
        """
        self.set_reference_llh(ecef2llh(np.asarray(reference_ecef, dtype=float), self.model))

    @property
    def reference_ecef(self) -> Optional[np.ndarray]:
        """Get reference position in ECEF coordinates"""
        return self._reference_ecef.copy() if self._reference_ecef is not None else None

    @property
    def reference_llh(self) -> Optional[np.ndarray]:
        """Get reference position in geodetic coordinates"""
        return self._reference_llh.copy() if self._reference_llh is not None else None

    @property
    def has_reference(self) -> bool:
        """Check if reference position is set"""
        return self._reference_ecef is not None

    def _require_reference(self):
        if not self.has_reference:
            raise ValueError("Reference position not set")

    def ecef_to_enu(self, position_ecef: np.ndarray) -> np.ndarray:
        """Convert ECEF position(s) to local ENU coordinates

        Parameters:
        -----------
        position_ecef : np.ndarray
            ECEF coordinates [x, y, z] in meters, shape (3,) or (N, 3)

        Returns:
        --------
        np.ndarray
            Local ENU coordinates [e, n, u] in meters

        Raises:
        -------
        ValueError
            If reference position is not set
        """
        self._require_reference()
        return (np.asarray(position_ecef, dtype=float) - self._reference_ecef) @ self._rotation_ecef_to_enu.T

    def enu_to_ecef(self, position_enu: np.ndarray) -> np.ndarray:
        """Convert local ENU coordinates to ECEF

        Parameters:
        -----------
        position_enu : np.ndarray
            Local ENU coordinates [e, n, u] in meters, shape (3,) or (N, 3)

        Returns:
        --------
        np.ndarray
            ECEF coordinates [x, y, z] in meters

        Raises:
        -------
        ValueError
            If reference position is not set
        """
        self._require_reference()
        return np.asarray(position_enu, dtype=float) @ self._rotation_ecef_to_enu + self._reference_ecef

    def llh_to_enu(self, position_llh: np.ndarray) -> np.ndarray:
        """Convert geodetic position(s) to local ENU coordinates"""
        self._require_reference()
        return self.ecef_to_enu(llh2ecef(position_llh, self.model))

    def enu_to_llh(self, position_enu: np.ndarray) -> np.ndarray:
        """Convert local ENU coordinates to geodetic position(s)"""
        self._require_reference()
        return ecef2llh(self.enu_to_ecef(position_enu), self.model)

    def ecef_vector_to_enu(self, vector_ecef: np.ndarray) -> np.ndarray:
        """Convert vector from ECEF to ENU frame

        Parameters:
        -----------
        vector_ecef : np.ndarray
            Vector in ECEF frame (e.g., velocity, baseline)

        Returns:
        --------
        np.ndarray
            Vector in ENU frame

        Raises:
        -------
        ValueError
            If reference position is not set
        """
        self._require_reference()
        return self._rotation_ecef_to_enu @ vector_ecef

    def enu_vector_to_ecef(self, vector_enu: np.ndarray) -> np.ndarray:
        """Convert vector from ENU to ECEF frame"""
        self._require_reference()
        return self._rotation_ecef_to_enu.T @ vector_enu
