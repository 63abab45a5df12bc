# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import abc
from typing import NamedTuple

from shapely.geometry.base import BaseGeometry

from geolayer.geometry import Envelope
from geolayer.style import Style


class Viewport(NamedTuple):
    """The visible part of a map.

    Attributes:
        envelope: Visible area in the map's (target) CRS.
        zoom: Width of the visible area in world units.
        scale: Map scale denominator.
    """

    envelope: Envelope
    zoom: float
    scale: float


class Surface(abc.ABC):
    """A graphics surface layers draw onto."""

    @abc.abstractmethod
    def draw_geometry(self, geometry: BaseGeometry, style: Style):
        """Draw *geometry*, given in the map's CRS, using *style*."""
