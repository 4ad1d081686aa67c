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

"""Local east-north-up frame using the modern PyECEF API

This example demonstrates:
1. Pinning a local frame to a reference position
2. Converting a short trajectory between geodetic and ENU coordinates
3. Rotating velocity vectors between ECEF and ENU
"""

import numpy as np
import matplotlib.pyplot as plt
from pyecef.coordinate.coordinate_transformer import CoordinateTransformer


def main():
    """Main function to demonstrate local frame conversions"""

    print("PyECEF Local Frame Example")
    print("=" * 50)

    transformer = CoordinateTransformer(np.array([35.6812, 139.7671, 40.0]))
    ref = transformer.reference_ecef
    print(f"\nReference ECEF: [{ref[0]:.3f}, {ref[1]:.3f}, {ref[2]:.3f}] m")

    # Circular trajectory of radius 500 m, climbing 50 m
    t = np.linspace(0.0, 2.0 * np.pi, 73)
    enu = np.column_stack([500.0 * np.cos(t), 500.0 * np.sin(t), 50.0 * t / (2.0 * np.pi)])
    llh = transformer.enu_to_llh(enu)
    enu_back = transformer.llh_to_enu(llh)
    print(f"Trajectory points: {len(enu)}")
    print(f"Max ENU round-trip error: {np.abs(enu_back - enu).max():.3e} m")

    velocity_ecef = np.array([10.0, -5.0, 2.0])
    velocity_enu = transformer.ecef_vector_to_enu(velocity_ecef)
    print(f"Velocity ENU: [{velocity_enu[0]:.3f}, {velocity_enu[1]:.3f}, {velocity_enu[2]:.3f}] m/s")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
    ax1.plot(enu[:, 0], enu[:, 1], 'b.-')
    ax1.set_xlabel('East [m]')
    ax1.set_ylabel('North [m]')
    ax1.set_aspect('equal')
    ax1.grid(True, alpha=0.3)
    ax1.set_title('Local frame')

    ax2.plot(llh[:, 1], llh[:, 0], 'r.-')
    ax2.set_xlabel('Longitude [deg]')
    ax2.set_ylabel('Latitude [deg]')
    ax2.grid(True, alpha=0.3)
    ax2.set_title('Geodetic')

    plt.tight_layout()
    plt.savefig('local_frame.png', dpi=150)
    print("\nSaved figure to local_frame.png")


if __name__ == "__main__":
    main()
