# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from collections.abc import Iterable, Sequence
from typing import Optional

from shapely.geometry.base import BaseGeometry

from geolayer.constants import LOG
from geolayer.geometry import Envelope
from geolayer.render import Surface, Viewport
from geolayer.util.assertions import assert_instance

from .base import Layer


class GeometryLayer(Layer):
    """A layer that holds shapely geometries
    given in the layer's source CRS.

    Args:
        geometries: The initial geometries.
        srid: The SRID of the geometries.
        target_srid: Optional SRID the geometries are presented in.
        kwargs: Passed to :class:`Layer`.
    """

    def __init__(
        self,
        geometries: Optional[Iterable[BaseGeometry]] = None,
        srid: Optional[int] = None,
        target_srid: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._geometries: list[BaseGeometry] = []
        if srid is not None:
            self.srid = srid
        if target_srid is not None:
            self.target_srid = target_srid
        for geometry in geometries or ():
            self.add_geometry(geometry)

    @property
    def geometries(self) -> Sequence[BaseGeometry]:
        """The geometries in the source CRS."""
        return tuple(self._geometries)

    def add_geometry(self, geometry: BaseGeometry):
        assert_instance(geometry, BaseGeometry, name="geometry")
        self._geometries.append(geometry)

    def clear(self):
        self._geometries.clear()

    @property
    def source_envelope(self) -> Optional[Envelope]:
        """The extent of the geometries in the source CRS."""
        envelope = None
        for geometry in self._geometries:
            if geometry.is_empty:
                continue
            geometry_envelope = Envelope.from_geometry(geometry)
            envelope = (
                geometry_envelope if envelope is None
                else envelope.expand(geometry_envelope)
            )
        return envelope

    @property
    def envelope(self) -> Optional[Envelope]:
        return self.crs.envelope_to_target(self.source_envelope)

    def get_geometries_in_view(self, envelope: Envelope) -> list[BaseGeometry]:
        """Get the geometries intersecting *envelope*,
        reprojected into the target CRS.

        Args:
            envelope: The view envelope in the target CRS.
        """
        source_envelope = self.crs.envelope_to_source(envelope)
        return [
            self.crs.geometry_to_target(geometry)
            for geometry in self._geometries
            if not geometry.is_empty
            and source_envelope.intersects(Envelope.from_geometry(geometry))
        ]

    def render(self, surface: Surface, viewport: Viewport):
        if self.style.is_visible_at(viewport):
            geometries = self.get_geometries_in_view(viewport.envelope)
            LOG.debug("Rendering %d geometries of layer %r", len(geometries), self.name)
            for geometry in geometries:
                surface.draw_geometry(geometry, self.style)
        super().render(surface, viewport)
