#!/usr/bin/env python3
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
Basic geodetic <-> ECEF conversion using PyECEF

This example demonstrates:
1. Converting single points with forward() and reverse()
2. Points where the inversion is degenerate (poles, center, equator)
3. Converting arrays of points with llh2ecef() and ecef2llh()
4. Using a different reference ellipsoid
"""

import numpy as np
from pyecef.core.ellipsoid import GRS80, WGS84, EllipsoidModel
from pyecef.coordinate.ecef import forward, reverse
from pyecef.coordinate.transforms import ecef2llh, llh2ecef
from pyecef.logger import setup_logger


def main():
    """Main function to demonstrate the conversions"""
    setup_logger(level="DEBUG")

    print("PyECEF Basic Conversion Example")
    print("=" * 50)

    # Single point round trip
    print("\n1. Single point")
    lat, lon, h = 35.6762, 139.6503, 40.0
    x, y, z = forward(WGS84, lat, lon, h)
    print(f"  Geodetic: lat={lat:.6f} deg, lon={lon:.6f} deg, h={h:.3f} m")
    print(f"  ECEF:     x={x:.4f} m, y={y:.4f} m, z={z:.4f} m")
    back = reverse(WGS84, x, y, z)
    print(f"  Back:     lat={back.lat:.12f} deg, lon={back.lon:.12f} deg, h={back.h:.9f} m")

    # Degenerate configurations
    print("\n2. Special points")
    special = {
        "North pole surface": (0.0, 0.0, WGS84.b),
        "South pole, 1 km up": (0.0, 0.0, -WGS84.b - 1000.0),
        "Earth center": (0.0, 0.0, 0.0),
        "Equator, date line": (-WGS84.a, 0.0, 0.0),
        "Near center, equator": (1000.0, 0.0, 0.0),
        "Very far away": (1e300, 1e300, 1e300),
    }
    for name, xyz in special.items():
        llh = reverse(WGS84, *xyz)
        print(f"  {name:22s}: lat={llh.lat:11.6f}, lon={llh.lon:11.6f}, h={llh.h:.6e}")

    # Batches of points
    print("\n3. Arrays of points")
    llh = np.array([
        [35.0, 139.0, 10.0],
        [-33.8688, 151.2093, 58.0],
        [51.4779, -0.0015, 46.0],
        [-90.0, 0.0, 2835.0],
    ])
    xyz = llh2ecef(llh)
    back = ecef2llh(xyz)
    for row_in, row_xyz, row_out in zip(llh, xyz, back):
        print(f"  {row_in} -> [{row_xyz[0]:14.3f} {row_xyz[1]:14.3f} {row_xyz[2]:14.3f}]"
              f" -> dh={row_out[2] - row_in[2]:.2e} m")

    # Other ellipsoids
    print("\n4. Ellipsoid models")
    point = (45.0, 10.0, 0.0)
    for name, model in [("WGS84", WGS84), ("GRS80", GRS80),
                        ("custom a=1e6 invf=3", EllipsoidModel(1.0e6, 3.0))]:
        xyz = forward(model, *point)
        print(f"  {name:20s}: z={xyz.z:.6f} m, b={model.b:.6f} m")


if __name__ == "__main__":
    main()
