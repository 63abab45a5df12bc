# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from .base import Layer
from .crs import LayerCrs, needs_transformation
from .geometries import GeometryLayer
