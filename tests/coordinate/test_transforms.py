import unittest

import numpy as np
from pyecef.coordinate.ecef import forward, reverse
from pyecef.coordinate.transforms import (
    ecef2enu, ecef2llh, enu2ecef, llh2ecef, rotation_matrix_enu
)
from pyecef.core.ellipsoid import GRS80, WGS84


class TestCoordinateTransforms(unittest.TestCase):

    def setUp(self):
        # Test points
        self.tokyo_llh = np.array([35.6762, 139.6503, 40.0])  # Tokyo Tower
        self.newyork_llh = np.array([40.7128, -74.0060, 10.0])  # New York
        self.equator_llh = np.array([0.0, 0.0, 0.0])  # Equator, prime meridian
        self.pole_llh = np.array([90.0, 0.0, 0.0])  # North pole

    def test_llh2ecef_ecef2llh_round_trip(self):
        test_points = np.array([
            self.tokyo_llh,
            self.newyork_llh,
            self.equator_llh,
            self.pole_llh,
            [-35.0, 150.0, 100.0]  # Southern hemisphere
        ])

        xyz = llh2ecef(test_points)
        llh_recovered = ecef2llh(xyz)

        np.testing.assert_allclose(llh_recovered[:, :2], test_points[:, :2], rtol=0, atol=1e-11)
        np.testing.assert_allclose(llh_recovered[:, 2], test_points[:, 2], rtol=0, atol=1e-8)

    def test_single_point_shape(self):
        xyz = llh2ecef(self.tokyo_llh)
        self.assertEqual(xyz.shape, (3,))
        self.assertEqual(ecef2llh(xyz).shape, (3,))

    def test_batch_matches_scalar(self):
        rng = np.random.default_rng(0)
        xyz = np.vstack([
            rng.uniform(-1.0e7, 1.0e7, (200, 3)),
            [[0.0, 0.0, 0.0], [0.0, 0.0, -1.0e6], [1000.0, 0.0, 0.0],
             [np.nan, 0.0, 0.0], [1e30, 1e30, 1e30]],
        ])
        batch = ecef2llh(xyz)
        scalar = np.array([reverse(WGS84, *p) for p in xyz])
        np.testing.assert_array_equal(batch, scalar)

        llh = batch[:200]
        np.testing.assert_array_equal(llh2ecef(llh), np.array([forward(WGS84, *p) for p in llh]))

    def test_model_argument(self):
        llh = np.array([45.0, 10.0, 0.0])
        np.testing.assert_array_equal(llh2ecef(llh, GRS80), forward(GRS80, *llh))
        self.assertFalse(np.array_equal(llh2ecef(llh, GRS80), llh2ecef(llh, WGS84)))

    def test_bad_shape_raises(self):
        for bad in [np.zeros(2), np.zeros((4, 2)), np.zeros((2, 3, 3)), 1.0]:
            with self.assertRaises(ValueError):
                ecef2llh(bad)
            with self.assertRaises(ValueError):
                llh2ecef(bad)

    def test_empty_batch(self):
        self.assertEqual(ecef2llh(np.zeros((0, 3))).shape, (0, 3))

    def test_llh2ecef_known_values(self):
        xyz = llh2ecef(self.equator_llh)
        np.testing.assert_allclose(xyz, [WGS84.a, 0.0, 0.0], atol=1e-9)

        xyz = llh2ecef(self.pole_llh)
        np.testing.assert_allclose(xyz, [0.0, 0.0, WGS84.b], atol=1e-8)

    def test_ecef2llh_known_values(self):
        llh = ecef2llh(np.array([WGS84.a, 0.0, 0.0]))
        np.testing.assert_allclose(llh, [0.0, 0.0, 0.0], atol=1e-9)

        llh = ecef2llh(np.array([0.0, WGS84.a, 0.0]))
        np.testing.assert_allclose(llh, [0.0, 90.0, 0.0], atol=1e-9)

    def test_ecef2enu_enu2ecef_round_trip(self):
        origin = self.tokyo_llh

        test_offsets = np.array([
            [100.0, 200.0, 50.0],     # Northeast and up
            [-100.0, -200.0, -50.0],  # Southwest and down
            [0.0, 0.0, 100.0],        # Directly up
            [1000.0, 0.0, 0.0],       # East only
        ])

        xyz = enu2ecef(test_offsets, origin)
        enu_recovered = ecef2enu(xyz, origin)
        np.testing.assert_allclose(enu_recovered, test_offsets, rtol=1e-10, atol=1e-8)

        for offset in test_offsets:
            np.testing.assert_allclose(ecef2enu(enu2ecef(offset, origin), origin), offset, atol=1e-8)

    def test_up_axis_follows_normal(self):
        origin = self.newyork_llh
        above = llh2ecef(origin + np.array([0.0, 0.0, 100.0]))
        np.testing.assert_allclose(ecef2enu(above, origin), [0.0, 0.0, 100.0], atol=1e-8)
        np.testing.assert_allclose(ecef2enu(llh2ecef(origin), origin), [0.0, 0.0, 0.0], atol=1e-8)

    def test_rotation_matrix_enu(self):
        R = rotation_matrix_enu(self.tokyo_llh[0], self.tokyo_llh[1])

        np.testing.assert_allclose(R @ R.T, np.eye(3), rtol=1e-10, atol=1e-10)
        self.assertAlmostEqual(np.linalg.det(R), 1.0, places=10)

    def test_rotation_matrix_at_pole(self):
        R = rotation_matrix_enu(90.0, 0.0)
        np.testing.assert_array_equal(R[2], [0.0, 0.0, 1.0])


if __name__ == '__main__':
    unittest.main()
