#!/usr/bin/env python3
"""
Accuracy report for the geodetic <-> ECEF conversion

This example demonstrates:
1. Sampling random geodetic points
2. Measuring round-trip errors in meters
3. Cross-checking the closed form against a numerical minimization
4. Plotting the error distribution
"""

import argparse
import logging

import matplotlib.pyplot as plt
from pyecef.core.ellipsoid import EllipsoidModel
from pyecef.coordinate.ecef import forward, reverse
from pyecef.logger import setup_logger
from pyecef.validation import (
    plot_errors, reference_reverse, round_trip_errors, sample_geodetic_points, summarize_errors
)


def main():
    parser = argparse.ArgumentParser(description="ECEF conversion accuracy report")
    parser.add_argument("-n", "--num-points", type=int, default=100000, help="Number of random points")
    parser.add_argument("--max-height", type=float, default=5.0e6, help="Largest absolute height (m)")
    parser.add_argument("--ellipsoid", default="WGS84", help="Reference ellipsoid name")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--plot", default=None, help="Save the error plot to this file")
    args = parser.parse_args()

    setup_logger(level="INFO")
    logger = logging.getLogger("pyecef.examples.accuracy_report")

    model = EllipsoidModel.from_name(args.ellipsoid)
    llh = sample_geodetic_points(args.num_points, args.max_height, args.seed)

    df = round_trip_errors(llh, model)
    print("\nRound-trip errors [m]")
    print(summarize_errors(df).to_string(float_format=lambda v: f"{v:.3e}"))

    print("\nClosed form vs numerical minimization")
    for lat, lon, h in [(10.0, 20.0, 0.0), (45.0, -120.0, 8848.0), (-60.0, 75.0, -2.0e5)]:
        xyz = forward(model, lat, lon, h)
        closed = reverse(model, *xyz)
        ref = reference_reverse(model, *xyz)
        logger.info(f"lat {lat:6.1f} h {h:10.1f}: dlat={closed.lat - ref.lat:.2e} deg, dh={closed.h - ref.h:.2e} m")

    if args.plot:
        ax = plot_errors(df)
        ax.set_title(f"{args.ellipsoid}: {args.num_points} points")
        plt.savefig(args.plot, dpi=150)
        print(f"\nSaved plot to {args.plot}")


if __name__ == "__main__":
    main()
