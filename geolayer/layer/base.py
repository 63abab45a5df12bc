# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import abc
from typing import Optional

from geolayer.constants import LOG
from geolayer.crs import CoordinateTransformation, CrsService
from geolayer.geometry import Envelope, GeometryService
from geolayer.render import Surface, Viewport
from geolayer.style import Style, VisibilityUnits
from geolayer.util.assertions import assert_instance
from geolayer.util.event import Event

from .crs import LayerCrs


class Layer(abc.ABC):
    """An abstract map layer.

    A layer stores its geometries in the CRS given by :attr:`srid`
    and presents them in the CRS given by :attr:`target_srid`.
    All CRS-related state and the reprojection utilities are
    provided by the composed :attr:`crs` object.

    Derived classes must implement :attr:`envelope` and should
    override :meth:`render`.

    Args:
        style: The layer style. Defaults to a new :class:`Style`.
        name: The layer name.
        crs_service: Optional CRS service used to resolve
            transformations.
        geometry_service: Optional service used to create
            geometry factories.
    """

    def __init__(
        self,
        style: Optional[Style] = None,
        name: Optional[str] = None,
        crs_service: Optional[CrsService] = None,
        geometry_service: Optional[GeometryService] = None,
    ):
        if style is not None:
            assert_instance(style, Style, name="style")
        self._style = style if style is not None else Style()
        self._name = name
        self._crs = LayerCrs(
            self, crs_service=crs_service, geometry_service=geometry_service
        )
        self._style_changed = Event("style_changed")
        self._layer_name_changed = Event("layer_name_changed")
        self._layer_rendered = Event("layer_rendered")

    @property
    def crs(self) -> LayerCrs:
        """The CRS state and reprojection utilities of this layer."""
        return self._crs

    @property
    @abc.abstractmethod
    def envelope(self) -> Optional[Envelope]:
        """The extent of the layer's features in the target CRS,
        or None if the layer is empty.
        """

    def render(self, surface: Surface, viewport: Viewport):
        """Render this layer onto *surface*.

        Derived classes must call this method after drawing,
        it fires the :attr:`layer_rendered` event.
        """
        self._layer_rendered.fire(self, surface)

    ###########################################################################
    # Events

    @property
    def srid_changed(self) -> Event:
        return self._crs.srid_changed

    @property
    def target_srid_changed(self) -> Event:
        return self._crs.target_srid_changed

    @property
    def transformation_changed(self) -> Event:
        return self._crs.transformation_changed

    @property
    def style_changed(self) -> Event:
        return self._style_changed

    @property
    def layer_name_changed(self) -> Event:
        return self._layer_name_changed

    @property
    def layer_rendered(self) -> Event:
        """Fired with the layer and the surface after rendering."""
        return self._layer_rendered

    ###########################################################################
    # Properties

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, name: Optional[str]):
        if name == self._name:
            return
        self._name = name
        self._layer_name_changed.fire(self)

    @property
    def srid(self) -> int:
        return self._crs.srid

    @srid.setter
    def srid(self, srid: int):
        self._crs.srid = srid

    @property
    def target_srid(self) -> int:
        return self._crs.target_srid

    @target_srid.setter
    def target_srid(self, target_srid: int):
        self._crs.target_srid = target_srid

    @property
    def transformation(self) -> Optional[CoordinateTransformation]:
        return self._crs.forward_transformation

    @transformation.setter
    def transformation(self, transformation: Optional[CoordinateTransformation]):
        self._crs.forward_transformation = transformation

    @property
    def reverse_transformation(self) -> Optional[CoordinateTransformation]:
        return self._crs.reverse_transformation

    @reverse_transformation.setter
    def reverse_transformation(
        self, transformation: Optional[CoordinateTransformation]
    ):
        self._crs.reverse_transformation = transformation

    @property
    def style(self) -> Style:
        return self._style

    @style.setter
    def style(self, style: Style):
        assert_instance(style, Style, name="style")
        if style is self._style or style == self._style:
            return
        self._style = style
        self._style_changed.fire(self)

    @property
    def enabled(self) -> bool:
        """Whether the layer is rendered."""
        return self._style.enabled

    @enabled.setter
    def enabled(self, enabled: bool):
        self._style.enabled = enabled

    @property
    def min_visible(self) -> float:
        """Minimum visibility, inclusive."""
        return self._style.min_visible

    @min_visible.setter
    def min_visible(self, min_visible: float):
        self._style.min_visible = min_visible

    @property
    def max_visible(self) -> float:
        """Maximum visibility, exclusive."""
        return self._style.max_visible

    @max_visible.setter
    def max_visible(self, max_visible: float):
        self._style.max_visible = max_visible

    @property
    def visibility_units(self) -> VisibilityUnits:
        return self._style.visibility_units

    @visibility_units.setter
    def visibility_units(self, visibility_units: VisibilityUnits):
        self._style.visibility_units = visibility_units

    ###########################################################################
    # Lifecycle

    def close(self):
        """Release the cached transformations and geometry factories.
        The layer remains usable, they are resolved again on demand.
        """
        LOG.debug("Closing layer %r", self._name)
        self._crs.close()

    def __enter__(self) -> "Layer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __str__(self):
        return str(self._name)
