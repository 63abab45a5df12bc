# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from unittest import TestCase

from geolayer.util.assertions import assert_given
from geolayer.util.assertions import assert_instance
from geolayer.util.assertions import assert_srid
from geolayer.util.assertions import assert_true


class AssertTest(TestCase):
    def test_assert_given(self):
        assert_given("layer.yaml", "x")
        with self.assertRaises(ValueError) as e:
            assert_given("", "x")
        self.assertEqual(("x must be given",), e.exception.args)

    def test_assert_instance(self):
        assert_instance(10, int, "x")
        with self.assertRaises(TypeError) as e:
            assert_instance(0.5, (int, str), "x")
        self.assertEqual(
            (
                "x must be an instance of "
                "(<class 'int'>, <class 'str'>), "
                "was <class 'float'>",
            ),
            e.exception.args,
        )

    def test_assert_true(self):
        assert_true(True, "Should be true")
        with self.assertRaises(ValueError) as e:
            assert_true(False, "Should be true")
        self.assertEqual(("Should be true",), e.exception.args)

    def test_assert_srid(self):
        assert_srid(4326)
        assert_srid(-1)
        with self.assertRaises(TypeError) as e:
            assert_srid("4326", "target_srid")
        self.assertEqual(
            ("target_srid must be an integer SRID, was <class 'str'>",),
            e.exception.args,
        )
        with self.assertRaises(TypeError):
            assert_srid(True)
