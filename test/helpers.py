# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from typing import Any

import numpy as np
import pyproj
from shapely.geometry.base import BaseGeometry

from geolayer.crs import CoordinateTransformation, CrsService, MathTransform
from geolayer.render import Surface
from geolayer.style import Style

CRS_WGS84 = pyproj.CRS.from_epsg(4326)
CRS_PSEUDO_MERCATOR = pyproj.CRS.from_epsg(3857)

# Forward projection of one degree at the equator into EPSG:3857
ONE_DEGREE_X = 111319.49079327357
ONE_DEGREE_Y = 111325.14286638486


class CountingCrsService(CrsService):
    """A CRS service that counts its calls."""

    def __init__(self):
        super().__init__()
        self.lookups: list[int] = []
        self.transformations: list[tuple[int, int]] = []

    def get_coordinate_system(self, srid: int) -> pyproj.CRS:
        self.lookups.append(srid)
        return super().get_coordinate_system(srid)

    def create_transformation(
        self, source_cs: pyproj.CRS, target_cs: pyproj.CRS
    ) -> CoordinateTransformation:
        self.transformations.append((source_cs.to_epsg(), target_cs.to_epsg()))
        return super().create_transformation(source_cs, target_cs)


class ScaleTransform(MathTransform):
    """Scales coordinates by a constant factor."""

    def __init__(self, factor: float):
        self.factor = factor

    def transform(self, x: Any, y: Any, z: Any = None) -> tuple:
        if z is None:
            return _scale(x, self.factor), _scale(y, self.factor)
        return _scale(x, self.factor), _scale(y, self.factor), z

    def inverted(self) -> "ScaleTransform":
        return ScaleTransform(1.0 / self.factor)


class BrokenInverseTransform(ScaleTransform):
    """A transform whose inverse fails."""

    def inverted(self) -> MathTransform:
        return _FailingTransform()


class _FailingTransform(MathTransform):
    def transform(self, x: Any, y: Any, z: Any = None) -> tuple:
        raise ValueError("transform failed")

    def inverted(self) -> MathTransform:
        return self


def _scale(values: Any, factor: float) -> np.ndarray:
    return np.asarray(values, dtype=np.float64) * factor


class RecordingSurface(Surface):
    """A surface that records drawn geometries."""

    def __init__(self):
        self.drawn: list[tuple[BaseGeometry, Style]] = []

    def draw_geometry(self, geometry: BaseGeometry, style: Style):
        self.drawn.append((geometry, style))
