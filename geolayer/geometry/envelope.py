# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from collections.abc import Sequence
from typing import NamedTuple, Union

import numpy as np
import shapely.geometry
from shapely.geometry.base import BaseGeometry

from geolayer.util.assertions import assert_true

Number = Union[int, float]


class Envelope(NamedTuple):
    """An axis-aligned bounding box
    (x_min, y_min, x_max, y_max).
    """

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @classmethod
    def from_points(cls, xs: Sequence[Number], ys: Sequence[Number]) -> "Envelope":
        """Get the minimum envelope of the given points."""
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        assert_true(xs.size > 0 and xs.size == ys.size, "invalid point coordinates")
        return cls(
            float(np.min(xs)), float(np.min(ys)), float(np.max(xs)), float(np.max(ys))
        )

    @classmethod
    def from_geometry(cls, geometry: BaseGeometry) -> "Envelope":
        assert_true(not geometry.is_empty, "geometry must not be empty")
        return cls(*geometry.bounds)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def is_empty(self) -> bool:
        return self.x_min > self.x_max or self.y_min > self.y_max

    @property
    def corners(self) -> tuple[np.ndarray, np.ndarray]:
        """The x- and y-coordinates of the four corners in the order
        lower-left, upper-right, upper-left, lower-right.
        """
        return (
            np.array([self.x_min, self.x_max, self.x_min, self.x_max]),
            np.array([self.y_min, self.y_max, self.y_max, self.y_min]),
        )

    def intersects(self, other: "Envelope") -> bool:
        return not (
            other.x_min > self.x_max
            or other.x_max < self.x_min
            or other.y_min > self.y_max
            or other.y_max < self.y_min
        )

    def expand(self, other: "Envelope") -> "Envelope":
        """Get the minimum envelope including this and *other*."""
        return Envelope(
            min(self.x_min, other.x_min),
            min(self.y_min, other.y_min),
            max(self.x_max, other.x_max),
            max(self.y_max, other.y_max),
        )

    def to_geometry(self) -> shapely.geometry.Polygon:
        return shapely.geometry.box(*self)
