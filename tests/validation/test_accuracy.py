import unittest

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from pyecef.coordinate.ecef import forward, reverse
from pyecef.core.ellipsoid import GRS80, WGS84
from pyecef.validation.accuracy import (
    ERROR_COLUMNS, plot_errors, reference_reverse, round_trip_errors,
    sample_geodetic_points, summarize_errors
)


class TestAccuracy(unittest.TestCase):

    def setUp(self):
        self.llh = sample_geodetic_points(500, max_height=1.0e6, seed=42)

    def test_sample_points(self):
        self.assertEqual(self.llh.shape, (500, 3))
        self.assertTrue(np.all(np.abs(self.llh[:, 0]) <= 90.0))
        self.assertTrue(np.all(np.abs(self.llh[:, 1]) <= 180.0))
        self.assertTrue(np.all(np.abs(self.llh[:, 2]) <= 1.0e6))
        np.testing.assert_array_equal(self.llh, sample_geodetic_points(500, max_height=1.0e6, seed=42))

    def test_round_trip_errors(self):
        df = round_trip_errors(self.llh)
        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(len(df), 500)
        for column in ["lat", "lon", "h"] + ERROR_COLUMNS:
            self.assertIn(column, df.columns)
        self.assertLess(df["dpos_m"].max(), 1e-7)
        self.assertLess(df["dh_m"].max(), 1e-7)
        self.assertLess(df["dlat_m"].max(), 1e-7)

    def test_round_trip_other_model(self):
        df = round_trip_errors(self.llh[:50], GRS80)
        self.assertLess(df["dpos_m"].max(), 1e-7)

    def test_summary(self):
        summary = summarize_errors(round_trip_errors(self.llh))
        self.assertEqual(list(summary.index), ["max", "rms"])
        self.assertEqual(list(summary.columns), ERROR_COLUMNS)
        self.assertTrue(np.all(summary.loc["rms"] <= summary.loc["max"] + 1e-18))

    def test_reference_reverse_agrees(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            lat = rng.uniform(5.0, 85.0) * rng.choice([-1.0, 1.0])
            lon = rng.uniform(-180.0, 180.0)
            h = rng.uniform(-1.0e6, 1.0e6)
            xyz = forward(WGS84, lat, lon, h)

            expected = reverse(WGS84, *xyz)
            ref = reference_reverse(WGS84, *xyz)
            self.assertAlmostEqual(ref.lat, expected.lat, delta=1e-5)
            self.assertAlmostEqual(ref.lon, expected.lon, delta=1e-12)
            self.assertAlmostEqual(ref.h, expected.h, delta=1e-4)

    def test_plot_errors(self):
        df = round_trip_errors(self.llh[:100])
        ax = plot_errors(df)
        self.assertEqual(ax.get_xlabel(), "Latitude [deg]")
        self.assertEqual(ax.get_ylabel(), "dpos_m [nm]")
        plt.close(ax.figure)

        fig, ax = plt.subplots()
        self.assertIs(plot_errors(df, ax=ax, column="dh_m"), ax)
        plt.close(fig)

        with self.assertRaises(ValueError):
            plot_errors(df, column="lat")


if __name__ == '__main__':
    unittest.main()
