import unittest

import numpy as np
from pyecef.coordinate.coordinate_transformer import CoordinateTransformer
from pyecef.coordinate.transforms import ecef2enu, llh2ecef


class TestCoordinateTransformer(unittest.TestCase):

    def setUp(self):
        self.reference_llh = np.array([35.0, 139.0, 50.0])
        self.transformer = CoordinateTransformer(self.reference_llh)

    def test_no_reference_raises(self):
        transformer = CoordinateTransformer()
        self.assertFalse(transformer.has_reference)
        self.assertIsNone(transformer.reference_ecef)
        self.assertIsNone(transformer.reference_llh)
        with self.assertRaises(ValueError):
            transformer.ecef_to_enu(np.zeros(3))
        with self.assertRaises(ValueError):
            transformer.enu_to_llh(np.zeros(3))
        with self.assertRaises(ValueError):
            transformer.ecef_vector_to_enu(np.zeros(3))

    def test_reference_point_is_origin(self):
        enu = self.transformer.ecef_to_enu(self.transformer.reference_ecef)
        np.testing.assert_allclose(enu, np.zeros(3), atol=1e-8)

    def test_matches_functional_api(self):
        xyz = llh2ecef(np.array([35.01, 139.02, 80.0]))
        np.testing.assert_allclose(self.transformer.ecef_to_enu(xyz),
                                   ecef2enu(xyz, self.reference_llh), atol=1e-8)

    def test_llh_enu_round_trip(self):
        llh = np.array([
            [35.001, 139.001, 10.0],
            [34.99, 138.98, 500.0],
            [35.0, 139.0, -20.0],
        ])
        enu = self.transformer.llh_to_enu(llh)
        self.assertEqual(enu.shape, (3, 3))
        llh_back = self.transformer.enu_to_llh(enu)
        np.testing.assert_allclose(llh_back[:, :2], llh[:, :2], atol=1e-11)
        np.testing.assert_allclose(llh_back[:, 2], llh[:, 2], atol=1e-7)

    def test_set_reference_ecef(self):
        other = CoordinateTransformer()
        other.set_reference_ecef(self.transformer.reference_ecef)
        self.assertTrue(other.has_reference)
        np.testing.assert_allclose(other.reference_llh[:2], self.reference_llh[:2], atol=1e-11)
        self.assertAlmostEqual(other.reference_llh[2], self.reference_llh[2], delta=1e-8)

        enu = np.array([120.0, -45.0, 3.0])
        np.testing.assert_allclose(other.enu_to_ecef(enu), self.transformer.enu_to_ecef(enu), atol=1e-7)

    def test_vector_round_trip(self):
        velocity = np.array([1.5, -2.0, 0.25])
        enu = self.transformer.ecef_vector_to_enu(velocity)
        self.assertAlmostEqual(np.linalg.norm(enu), np.linalg.norm(velocity), places=12)
        np.testing.assert_allclose(self.transformer.enu_vector_to_ecef(enu), velocity, atol=1e-12)

    def test_reference_copies(self):
        ref = self.transformer.reference_llh
        ref[0] = 0.0
        self.assertEqual(self.transformer.reference_llh[0], 35.0)


if __name__ == '__main__':
    unittest.main()
