# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from .envelope import Envelope
from .factory import GeometryFactory, GeometryService, get_srid
from .transform import (
    reproject_envelope,
    reproject_geometry,
    transform_box,
    transform_geometry,
)
