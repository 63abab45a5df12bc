# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from typing import Any, Optional

from shapely.geometry.base import BaseGeometry

from geolayer.constants import LOG, SRID_NONE, SRID_UNSET
from geolayer.crs import CoordinateTransformation, CrsService
from geolayer.geometry import (
    Envelope,
    GeometryFactory,
    GeometryService,
    get_srid,
    reproject_envelope,
    transform_box,
    transform_geometry,
)
from geolayer.util.assertions import assert_instance, assert_srid
from geolayer.util.event import Event
from geolayer.util.sentinel import UNDEFINED, CacheSlot


def needs_transformation(srid: int, target_srid: int) -> bool:
    """Test whether geometries given in *srid* must be
    transformed to be presented in *target_srid*.
    The SRID 0 means "no CRS" and never needs a transformation.
    """
    return srid != SRID_NONE and target_srid != SRID_NONE and srid != target_srid


class LayerCrs:
    """The coordinate reference system state of a layer.

    Holds the layer's source SRID and an optional target SRID,
    lazily resolves and caches the geometry factories and the
    coordinate transformations between both, and reprojects
    envelopes and geometries.

    Cached transformations and factories are invalidated
    whenever the SRIDs change. Instances are not thread-safe.

    Args:
        owner: The object passed to listeners of this object's
            events. Defaults to this object.
        crs_service: Service used to look up coordinate systems
            and to create transformations.
            Defaults to ``CrsService.INSTANCE``.
        geometry_service: Service used to create geometry factories.
            Defaults to ``GeometryService.INSTANCE``.
    """

    def __init__(
        self,
        owner: Any = None,
        crs_service: Optional[CrsService] = None,
        geometry_service: Optional[GeometryService] = None,
    ):
        self._owner = owner
        self._crs_service = crs_service
        self._geometry_service = geometry_service

        self._srid = SRID_UNSET
        self._target_srid: Optional[int] = None

        self._forward_transformation: CacheSlot[CoordinateTransformation] = (
            CacheSlot("forward_transformation")
        )
        self._reverse_transformation: CacheSlot[CoordinateTransformation] = (
            CacheSlot("reverse_transformation")
        )
        self._source_factory: CacheSlot[GeometryFactory] = CacheSlot("source_factory")
        self._target_factory: CacheSlot[GeometryFactory] = CacheSlot("target_factory")

        self._srid_changed = Event("srid_changed")
        self._target_srid_changed = Event("target_srid_changed")
        self._transformation_changed = Event("transformation_changed")

    @property
    def crs_service(self) -> CrsService:
        if self._crs_service is not None:
            return self._crs_service
        return CrsService.INSTANCE

    @property
    def geometry_service(self) -> GeometryService:
        if self._geometry_service is not None:
            return self._geometry_service
        return GeometryService.INSTANCE

    ###########################################################################
    # Events

    @property
    def srid_changed(self) -> Event:
        """Fired with the owner after :attr:`srid` has changed."""
        return self._srid_changed

    @property
    def target_srid_changed(self) -> Event:
        """Fired with the owner after the effective
        :attr:`target_srid` has changed.
        """
        return self._target_srid_changed

    @property
    def transformation_changed(self) -> Event:
        """Fired with the owner after :attr:`forward_transformation`
        has been set.
        """
        return self._transformation_changed

    ###########################################################################
    # CRS state

    @property
    def srid(self) -> int:
        """The SRID of the layer's geometries, -1 if unset."""
        return self._srid

    @srid.setter
    def srid(self, srid: int):
        assert_srid(srid, name="srid")
        if srid == self._srid:
            return
        old_target_srid = self.target_srid
        self._srid = srid
        self._on_srid_changed()
        if self.target_srid != old_target_srid:
            self._target_srid_changed.fire(self._sender)

    def _on_srid_changed(self):
        LOG.debug("SRID changed to %d, invalidating transformations", self._srid)
        self._source_factory.set(self._create_geometry_factory(self._srid))
        self._forward_transformation.clear()
        self._reverse_transformation.clear()
        self._srid_changed.fire(self._sender)

    @property
    def target_srid(self) -> int:
        """The SRID geometries are presented in.
        Equals :attr:`srid`, unless explicitly set.
        """
        if self._target_srid is not None:
            return self._target_srid
        return self._srid

    @target_srid.setter
    def target_srid(self, target_srid: int):
        assert_srid(target_srid, name="target_srid")
        old_target_srid = self.target_srid
        self._target_srid = target_srid
        self._target_factory.set(self._create_geometry_factory(target_srid))
        if target_srid != old_target_srid:
            LOG.debug(
                "Target SRID changed to %d, invalidating transformations",
                target_srid,
            )
            self._forward_transformation.clear()
            self._reverse_transformation.clear()
            self._target_srid_changed.fire(self._sender)

    @property
    def has_target_srid(self) -> bool:
        """Whether the target SRID has been set explicitly."""
        return self._target_srid is not None

    @property
    def needs_transformation(self) -> bool:
        return needs_transformation(self._srid, self.target_srid)

    ###########################################################################
    # Transformations

    @property
    def forward_transformation(self) -> Optional[CoordinateTransformation]:
        """The transformation from :attr:`srid` to :attr:`target_srid`.

        Resolved on first access using the CRS service,
        if a transformation is needed at all.
        Otherwise, None.

        Setting a transformation also sets :attr:`srid` and
        :attr:`target_srid` from the authority codes of the
        transformation's source and target CRS. The transformation
        is stored before any of the change events fire.
        Setting None drops it, so it is resolved again on next access.
        """
        if (
            not self._forward_transformation.is_resolved
            and self.needs_transformation
        ):
            self._forward_transformation.set(
                self._create_transformation(self._srid, self.target_srid)
            )
        return self._forward_transformation.get()

    @forward_transformation.setter
    def forward_transformation(
        self, transformation: Optional[CoordinateTransformation]
    ):
        if transformation is self._forward_transformation.get():
            return
        if transformation is None:
            self._forward_transformation.clear()
            self._transformation_changed.fire(self._sender)
            return

        assert_instance(transformation, CoordinateTransformation, name="transformation")
        srid = transformation.source_srid
        target_srid = transformation.target_srid

        old_srid = self._srid
        old_target_srid = self.target_srid
        self._srid = srid
        self._target_srid = target_srid
        if srid != old_srid:
            self._source_factory.set(self._create_geometry_factory(srid))
        self._target_factory.set(self._create_geometry_factory(target_srid))
        if srid != old_srid or target_srid != old_target_srid:
            self._reverse_transformation.clear()
        self._forward_transformation.set(transformation)

        # Listeners see the injected transformation
        if srid != old_srid:
            self._srid_changed.fire(self._sender)
        if target_srid != old_target_srid:
            self._target_srid_changed.fire(self._sender)
        self._transformation_changed.fire(self._sender)

    @property
    def reverse_transformation(self) -> Optional[CoordinateTransformation]:
        """The transformation from :attr:`target_srid` to :attr:`srid`.

        Resolved on first access using the CRS service,
        if a transformation is needed at all.
        Otherwise, None.

        Set it explicitly if the forward transformation
        cannot be inverted.
        """
        if (
            not self._reverse_transformation.is_resolved
            and self.needs_transformation
        ):
            self._reverse_transformation.set(
                self._create_transformation(self.target_srid, self._srid)
            )
        return self._reverse_transformation.get()

    @reverse_transformation.setter
    def reverse_transformation(
        self, transformation: Optional[CoordinateTransformation]
    ):
        if transformation is None:
            self._reverse_transformation.clear()
        else:
            assert_instance(
                transformation, CoordinateTransformation, name="transformation"
            )
            self._reverse_transformation.set(transformation)

    def _create_transformation(
        self, source_srid: int, target_srid: int
    ) -> CoordinateTransformation:
        LOG.debug(
            "Resolving transformation from SRID %d to SRID %d",
            source_srid,
            target_srid,
        )
        crs_service = self.crs_service
        return crs_service.create_transformation(
            crs_service.get_coordinate_system(source_srid),
            crs_service.get_coordinate_system(target_srid),
        )

    ###########################################################################
    # Geometry factories

    @property
    def source_factory(self) -> GeometryFactory:
        """The factory for geometries in :attr:`srid`."""
        return self._source_factory.resolve(
            lambda: self._create_geometry_factory(self._srid)
        )

    @property
    def target_factory(self) -> GeometryFactory:
        """The factory for geometries in :attr:`target_srid`.
        Falls back to :attr:`source_factory`.
        """
        if self._target_factory.is_resolved:
            return self._target_factory.value
        return self.source_factory

    def _create_geometry_factory(self, srid: int) -> GeometryFactory:
        LOG.debug("Creating geometry factory for SRID %d", srid)
        return self.geometry_service.create_geometry_factory(srid)

    ###########################################################################
    # Reprojection

    def envelope_to_target(
        self,
        envelope: Optional[Envelope],
        transformation: Optional[CoordinateTransformation] = UNDEFINED,
    ) -> Optional[Envelope]:
        """Reproject *envelope* from the source into the target CRS.

        Args:
            envelope: The envelope in the source CRS.
            transformation: The transformation to use.
                Defaults to :attr:`forward_transformation`.
                If None, *envelope* is returned unchanged.
        """
        if transformation is UNDEFINED:
            transformation = self.forward_transformation
        return reproject_envelope(envelope, transformation)

    def envelope_to_source(self, envelope: Optional[Envelope]) -> Optional[Envelope]:
        """Reproject *envelope* from the target into the source CRS
        using the reverse transformation or, if that is not available,
        the inverse of the forward transformation.
        """
        reverse_transformation = self.reverse_transformation
        if reverse_transformation is not None:
            return transform_box(envelope, reverse_transformation.math_transform)
        forward_transformation = self.forward_transformation
        if forward_transformation is not None:
            return transform_box(
                envelope, forward_transformation.math_transform.inverted()
            )
        return envelope

    def geometry_to_target(self, geometry: BaseGeometry) -> BaseGeometry:
        """Reproject *geometry* from the source into the target CRS.
        Returns *geometry* if it is already tagged with
        :attr:`target_srid` or if no transformation is needed.
        """
        if get_srid(geometry) == self.target_srid:
            return geometry
        forward_transformation = self.forward_transformation
        if forward_transformation is not None:
            return transform_geometry(
                geometry, forward_transformation.math_transform, self.target_factory
            )
        return geometry

    def geometry_to_source(self, geometry: BaseGeometry) -> BaseGeometry:
        """Reproject *geometry* from the target into the source CRS.
        Returns *geometry* if it is already tagged with
        :attr:`srid` or if no transformation is needed.
        """
        if get_srid(geometry) == self._srid:
            return geometry
        reverse_transformation = self.reverse_transformation
        if reverse_transformation is not None:
            return transform_geometry(
                geometry, reverse_transformation.math_transform, self.source_factory
            )
        forward_transformation = self.forward_transformation
        if forward_transformation is not None:
            return transform_geometry(
                geometry,
                forward_transformation.math_transform.inverted(),
                self.source_factory,
            )
        return geometry

    ###########################################################################
    # Lifecycle

    def close(self):
        """Release transformations and geometry factories."""
        self._forward_transformation.clear()
        self._reverse_transformation.clear()
        self._source_factory.clear()
        self._target_factory.clear()

    @property
    def _sender(self) -> Any:
        return self._owner if self._owner is not None else self

    def __repr__(self):
        return f"LayerCrs(srid={self._srid}, target_srid={self.target_srid})"
