# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from .service import CrsService
from .transformation import (
    CoordinateTransformation,
    MathTransform,
    PyprojMathTransform,
    get_authority_code,
)
