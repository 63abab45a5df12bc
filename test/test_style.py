# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import sys
import unittest

import jsonschema

from geolayer.geometry import Envelope
from geolayer.render import Viewport
from geolayer.style import Style
from geolayer.style import VisibilityUnits

VIEW = Envelope(0, 0, 1, 1)


class StyleTest(unittest.TestCase):
    def test_defaults(self):
        style = Style()
        self.assertTrue(style.enabled)
        self.assertEqual(0.0, style.min_visible)
        self.assertEqual(sys.float_info.max, style.max_visible)
        self.assertEqual(VisibilityUnits.ZOOM_LEVEL, style.visibility_units)

    def test_is_visible_at_zoom_level(self):
        style = Style(min_visible=10.0, max_visible=100.0)
        self.assertFalse(style.is_visible_at(Viewport(VIEW, zoom=5.0, scale=50.0)))
        self.assertTrue(style.is_visible_at(Viewport(VIEW, zoom=10.0, scale=500.0)))
        self.assertTrue(style.is_visible_at(Viewport(VIEW, zoom=99.0, scale=500.0)))
        self.assertFalse(style.is_visible_at(Viewport(VIEW, zoom=100.0, scale=50.0)))

    def test_is_visible_at_scale(self):
        style = Style(
            min_visible=10.0, max_visible=100.0, visibility_units=VisibilityUnits.SCALE
        )
        self.assertTrue(style.is_visible_at(Viewport(VIEW, zoom=5.0, scale=50.0)))
        self.assertFalse(style.is_visible_at(Viewport(VIEW, zoom=50.0, scale=500.0)))

    def test_is_visible_at_disabled(self):
        style = Style(enabled=False)
        self.assertFalse(style.is_visible_at(Viewport(VIEW, zoom=1.0, scale=1.0)))

    def test_from_dict(self):
        style = Style.from_dict(
            {"enabled": False, "max_visible": 5000, "visibility_units": "scale"}
        )
        self.assertEqual(
            Style(
                enabled=False,
                max_visible=5000,
                visibility_units=VisibilityUnits.SCALE,
            ),
            style,
        )
        self.assertEqual(Style(), Style.from_dict({}))

    def test_from_dict_invalid(self):
        with self.assertRaises(jsonschema.ValidationError):
            Style.from_dict({"visibility_units": "meters"})
        with self.assertRaises(jsonschema.ValidationError):
            Style.from_dict({"min_visible": -1})
        with self.assertRaises(jsonschema.ValidationError):
            Style.from_dict({"color": "red"})
        with self.assertRaises(TypeError):
            # noinspection PyTypeChecker
            Style.from_dict("enabled")

    def test_to_dict(self):
        self.assertEqual(
            {
                "enabled": True,
                "min_visible": 1.0,
                "max_visible": 2.0,
                "visibility_units": "zoom_level",
            },
            Style(min_visible=1.0, max_visible=2.0).to_dict(),
        )

    def test_equality(self):
        self.assertEqual(Style(), Style())
        self.assertNotEqual(Style(), Style(enabled=False))
        self.assertNotEqual(Style(), {"enabled": True})
        with self.assertRaises(TypeError):
            hash(Style())

    def test_schema(self):
        schema = Style.get_schema()
        self.assertEqual("object", schema["type"])
        self.assertIn("visibility_units", schema["properties"])
