import unittest

import numpy as np
from pyecef.coordinate.geodetic import geodetic_height_bound, radius_of_curvature, wrap_longitude
from pyecef.core.ellipsoid import SPHERE, WGS84


class TestRadiusOfCurvature(unittest.TestCase):

    def test_equator(self):
        M, N = radius_of_curvature(0.0)
        self.assertAlmostEqual(N, WGS84.a, delta=1e-9)
        self.assertAlmostEqual(M, WGS84.a * WGS84.e2m, delta=1e-8)

    def test_pole(self):
        M, N = radius_of_curvature(90.0)
        polar = WGS84.a / np.sqrt(WGS84.e2m)
        self.assertAlmostEqual(N, polar, delta=1e-8)
        self.assertAlmostEqual(M, polar, delta=1e-8)

    def test_array_input(self):
        lat = np.linspace(-90.0, 90.0, 7)
        M, N = radius_of_curvature(lat)
        self.assertEqual(M.shape, lat.shape)
        self.assertTrue(np.all(M <= N + 1e-6))
        np.testing.assert_allclose(N, N[::-1], rtol=1e-15)

    def test_sphere(self):
        M, N = radius_of_curvature(np.array([0.0, 45.0, 90.0]), SPHERE)
        np.testing.assert_allclose(M, SPHERE.a)
        np.testing.assert_allclose(N, SPHERE.a)


class TestHeightBound(unittest.TestCase):

    def test_values(self):
        self.assertAlmostEqual(geodetic_height_bound(0.0), -WGS84.a * WGS84.e2m, delta=1e-8)
        self.assertAlmostEqual(geodetic_height_bound(90.0), -WGS84.b, delta=1e-8)
        self.assertAlmostEqual(geodetic_height_bound(-90.0), -WGS84.b, delta=1e-8)

    def test_sphere(self):
        self.assertAlmostEqual(geodetic_height_bound(30.0, SPHERE), -SPHERE.a, delta=1e-8)


class TestWrapLongitude(unittest.TestCase):

    def test_scalar(self):
        self.assertEqual(wrap_longitude(190.0), -170.0)
        self.assertEqual(wrap_longitude(-180.0), 180.0)
        self.assertEqual(wrap_longitude(180.0), 180.0)
        self.assertEqual(wrap_longitude(540.0), 180.0)
        self.assertEqual(wrap_longitude(-90.0), -90.0)
        self.assertIsInstance(wrap_longitude(10.0), float)

    def test_array(self):
        lon = np.array([[0.0, 360.0], [-190.0, 725.0]])
        wrapped = wrap_longitude(lon)
        self.assertEqual(wrapped.shape, lon.shape)
        np.testing.assert_allclose(wrapped, [[0.0, 0.0], [170.0, 5.0]], atol=1e-12)

    def test_zero_is_positive(self):
        self.assertEqual(np.copysign(1.0, wrap_longitude(360.0)), 1.0)


if __name__ == '__main__':
    unittest.main()
