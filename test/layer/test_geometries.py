# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import unittest

import numpy as np
import shapely.geometry

from geolayer.geometry import Envelope
from geolayer.geometry import get_srid
from geolayer.layer import GeometryLayer
from geolayer.render import Viewport
from geolayer.style import Style
from geolayer.style import VisibilityUnits
from test.helpers import ONE_DEGREE_X
from test.helpers import ONE_DEGREE_Y
from test.helpers import RecordingSurface


def new_layer(**kwargs) -> GeometryLayer:
    return GeometryLayer(
        geometries=[
            shapely.geometry.Point(-1.0, -1.0),
            shapely.geometry.LineString([(0.0, 0.0), (1.0, 1.0)]),
            shapely.geometry.Point(20.0, 20.0),
        ],
        srid=4326,
        target_srid=3857,
        name="places",
        **kwargs,
    )


# noinspection PyMethodMayBeStatic
class GeometryLayerTest(unittest.TestCase):
    def test_envelope(self):
        layer = new_layer()
        self.assertEqual(Envelope(-1.0, -1.0, 20.0, 20.0), layer.source_envelope)
        envelope = layer.envelope
        self.assertAlmostEqual(-ONE_DEGREE_X, envelope.x_min, places=6)
        self.assertAlmostEqual(-ONE_DEGREE_Y, envelope.y_min, places=6)
        self.assertAlmostEqual(20 * ONE_DEGREE_X, envelope.x_max, places=5)
        self.assertGreater(envelope.y_max, 20 * ONE_DEGREE_Y)

    def test_envelope_without_transformation(self):
        layer = GeometryLayer(
            geometries=[shapely.geometry.box(0, 0, 2, 1)], srid=4326
        )
        self.assertEqual(Envelope(0.0, 0.0, 2.0, 1.0), layer.envelope)

    def test_empty(self):
        layer = GeometryLayer(srid=4326, target_srid=3857)
        self.assertEqual((), layer.geometries)
        self.assertIsNone(layer.source_envelope)
        self.assertIsNone(layer.envelope)
        layer.add_geometry(shapely.geometry.Polygon())
        self.assertIsNone(layer.envelope)

    def test_add_geometry(self):
        layer = GeometryLayer()
        with self.assertRaises(TypeError):
            # noinspection PyTypeChecker
            layer.add_geometry("POINT (1 2)")
        layer.add_geometry(shapely.geometry.Point(1, 2))
        self.assertEqual(1, len(layer.geometries))
        layer.clear()
        self.assertEqual(0, len(layer.geometries))

    def test_get_geometries_in_view(self):
        layer = new_layer()
        view = Envelope(-2 * ONE_DEGREE_X, -2 * ONE_DEGREE_Y, 0.0, 0.0)
        geometries = layer.get_geometries_in_view(view)
        self.assertEqual(2, len(geometries))
        point, line = geometries
        self.assertEqual(3857, get_srid(point))
        self.assertAlmostEqual(-ONE_DEGREE_X, point.x, places=6)
        self.assertAlmostEqual(-ONE_DEGREE_Y, point.y, places=6)
        np.testing.assert_almost_equal(
            np.array([[0.0, 0.0], [ONE_DEGREE_X, ONE_DEGREE_Y]]),
            np.array(line.coords),
            decimal=6,
        )

    def test_render(self):
        layer = new_layer()
        surface = RecordingSurface()
        rendered = []
        layer.layer_rendered.subscribe(lambda *args: rendered.append(args))
        view = Envelope(-2 * ONE_DEGREE_X, -2 * ONE_DEGREE_Y, 0.0, 0.0)

        layer.render(surface, Viewport(view, zoom=2 * ONE_DEGREE_X, scale=1e6))

        self.assertEqual(2, len(surface.drawn))
        for geometry, style in surface.drawn:
            self.assertEqual(3857, get_srid(geometry))
            self.assertIs(layer.style, style)
        self.assertEqual([(layer, surface)], rendered)

    def test_render_invisible(self):
        layer = new_layer(
            style=Style(
                min_visible=1000.0,
                max_visible=50000.0,
                visibility_units=VisibilityUnits.SCALE,
            )
        )
        surface = RecordingSurface()
        rendered = []
        layer.layer_rendered.subscribe(lambda *args: rendered.append(args))
        view = Envelope(-2 * ONE_DEGREE_X, -2 * ONE_DEGREE_Y, 0.0, 0.0)

        layer.render(surface, Viewport(view, zoom=1.0, scale=50000.0))
        self.assertEqual([], surface.drawn)

        layer.render(surface, Viewport(view, zoom=1.0, scale=10000.0))
        self.assertEqual(2, len(surface.drawn))

        layer.enabled = False
        layer.render(surface, Viewport(view, zoom=1.0, scale=10000.0))
        self.assertEqual(2, len(surface.drawn))

        self.assertEqual(3, len(rendered))
