# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import unittest

import numpy as np
import pyproj

from geolayer.crs import CoordinateTransformation
from geolayer.crs import PyprojMathTransform
from geolayer.crs import get_authority_code
from test.helpers import CRS_PSEUDO_MERCATOR
from test.helpers import CRS_WGS84
from test.helpers import ONE_DEGREE_X
from test.helpers import ONE_DEGREE_Y
from test.helpers import ScaleTransform


def new_mercator_transform() -> PyprojMathTransform:
    return PyprojMathTransform(
        pyproj.Transformer.from_crs(CRS_WGS84, CRS_PSEUDO_MERCATOR, always_xy=True)
    )


# noinspection PyMethodMayBeStatic
class PyprojMathTransformTest(unittest.TestCase):
    def test_transform(self):
        mt = new_mercator_transform()
        self.assertFalse(mt.is_inverse)
        x, y = mt.transform(np.array([1.0, -1.0]), np.array([1.0, 0.0]))
        np.testing.assert_almost_equal(np.array([ONE_DEGREE_X, -ONE_DEGREE_X]), x)
        np.testing.assert_almost_equal(np.array([ONE_DEGREE_Y, 0.0]), y)

    def test_transform_with_z(self):
        mt = new_mercator_transform()
        x, y, z = mt.transform(1.0, 1.0, 10.0)
        self.assertAlmostEqual(ONE_DEGREE_X, x, places=6)
        self.assertAlmostEqual(ONE_DEGREE_Y, y, places=6)
        self.assertAlmostEqual(10.0, z)

    def test_inverted_is_pure(self):
        mt = new_mercator_transform()
        inverse_mt = mt.inverted()
        self.assertIsNot(mt, inverse_mt)
        self.assertTrue(inverse_mt.is_inverse)
        self.assertFalse(mt.is_inverse)
        self.assertIs(mt.transformer, inverse_mt.transformer)

        x, y = inverse_mt(ONE_DEGREE_X, ONE_DEGREE_Y)
        self.assertAlmostEqual(1.0, x)
        self.assertAlmostEqual(1.0, y)

        # Still forward
        x, y = mt(1.0, 1.0)
        self.assertAlmostEqual(ONE_DEGREE_X, x, places=6)

        self.assertFalse(inverse_mt.inverted().is_inverse)

    def test_requires_transformer(self):
        with self.assertRaises(TypeError):
            # noinspection PyTypeChecker
            PyprojMathTransform("EPSG:4326")


class CoordinateTransformationTest(unittest.TestCase):
    def test_props(self):
        mt = new_mercator_transform()
        transformation = CoordinateTransformation(CRS_WGS84, CRS_PSEUDO_MERCATOR, mt)
        self.assertIs(CRS_WGS84, transformation.source_cs)
        self.assertIs(CRS_PSEUDO_MERCATOR, transformation.target_cs)
        self.assertIs(mt, transformation.math_transform)
        self.assertEqual(4326, transformation.source_srid)
        self.assertEqual(3857, transformation.target_srid)

    def test_inverted(self):
        transformation = CoordinateTransformation(
            CRS_WGS84, CRS_PSEUDO_MERCATOR, ScaleTransform(2.0)
        )
        inverse_transformation = transformation.inverted()
        self.assertEqual(3857, inverse_transformation.source_srid)
        self.assertEqual(4326, inverse_transformation.target_srid)
        self.assertEqual(0.5, inverse_transformation.math_transform.factor)
        self.assertEqual(2.0, transformation.math_transform.factor)

    def test_invalid_args(self):
        with self.assertRaises(TypeError):
            # noinspection PyTypeChecker
            CoordinateTransformation("EPSG:4326", CRS_PSEUDO_MERCATOR, ScaleTransform(2))
        with self.assertRaises(TypeError):
            # noinspection PyTypeChecker
            CoordinateTransformation(CRS_WGS84, CRS_PSEUDO_MERCATOR, lambda x, y: (x, y))


class GetAuthorityCodeTest(unittest.TestCase):
    def test_epsg(self):
        self.assertEqual(4326, get_authority_code(CRS_WGS84))
        self.assertEqual(32632, get_authority_code(pyproj.CRS.from_epsg(32632)))

    def test_no_authority(self):
        crs = pyproj.CRS.from_proj4("+proj=ortho +lat_0=52.1 +lon_0=13.3 +ellps=WGS84")
        with self.assertRaises(ValueError) as cm:
            get_authority_code(crs)
        self.assertIn("does not declare an authority code", f"{cm.exception}")
