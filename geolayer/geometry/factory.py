# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import shapely
import shapely.geometry
from shapely.geometry.base import BaseGeometry

from geolayer.util.assertions import assert_instance, assert_srid

from .envelope import Envelope


class GeometryFactory:
    """Creates shapely geometries tagged with a spatial
    reference identifier (SRID).

    Args:
        srid: The SRID assigned to all created geometries.
    """

    def __init__(self, srid: int):
        assert_srid(srid)
        self._srid = srid

    @property
    def srid(self) -> int:
        return self._srid

    def create(self, geometry: BaseGeometry) -> BaseGeometry:
        """Get *geometry* tagged with this factory's SRID."""
        assert_instance(geometry, BaseGeometry, name="geometry")
        if shapely.get_srid(geometry) == self._srid:
            return geometry
        return shapely.set_srid(geometry, self._srid)

    def point(self, x: float, y: float) -> shapely.geometry.Point:
        return self.create(shapely.geometry.Point(x, y))

    def box(self, envelope: Envelope) -> shapely.geometry.Polygon:
        return self.create(shapely.geometry.box(*envelope))

    def __eq__(self, other):
        return isinstance(other, GeometryFactory) and other._srid == self._srid

    def __hash__(self):
        return hash(self._srid)

    def __repr__(self):
        return f"GeometryFactory(srid={self._srid})"


class GeometryService:
    """Provides geometry factories."""

    INSTANCE: "GeometryService"

    # noinspection PyMethodMayBeStatic
    def create_geometry_factory(self, srid: int) -> GeometryFactory:
        return GeometryFactory(srid)


def get_srid(geometry: BaseGeometry) -> int:
    """Get the SRID *geometry* is tagged with,
    0 if it is not tagged.
    """
    return int(shapely.get_srid(geometry))


GeometryService.INSTANCE = GeometryService()
