# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from typing import Optional

import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry

from geolayer.crs.transformation import CoordinateTransformation, MathTransform

from .envelope import Envelope
from .factory import GeometryFactory


def transform_box(
    envelope: Optional[Envelope], math_transform: MathTransform
) -> Optional[Envelope]:
    """Transform *envelope* by mapping its four corners
    and computing the bounding envelope of the results.

    Args:
        envelope: The envelope, may be None.
        math_transform: The transform to apply.

    Returns:
        The transformed envelope or None, if *envelope* is None.
    """
    if envelope is None:
        return None
    xs, ys = math_transform.transform(*envelope.corners)
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise ValueError(f"envelope {tuple(envelope)} cannot be transformed")
    return Envelope.from_points(xs, ys)


def transform_geometry(
    geometry: BaseGeometry,
    math_transform: MathTransform,
    factory: GeometryFactory,
) -> BaseGeometry:
    """Transform the coordinates of *geometry* and create
    the result using *factory*, so it is tagged with the
    factory's SRID.
    """
    return factory.create(
        shapely.transform(geometry, math_transform.transform, interleaved=False)
    )


def reproject_envelope(
    envelope: Optional[Envelope],
    transformation: Optional[CoordinateTransformation],
) -> Optional[Envelope]:
    """Reproject *envelope* using *transformation*.
    Returns *envelope* unchanged if *transformation* is None.
    """
    if transformation is None:
        return envelope
    return transform_box(envelope, transformation.math_transform)


def reproject_geometry(
    geometry: BaseGeometry,
    transformation: Optional[CoordinateTransformation],
    factory: GeometryFactory,
) -> BaseGeometry:
    """Reproject *geometry* using *transformation*.
    Returns *geometry* unchanged if *transformation* is None.
    """
    if transformation is None:
        return geometry
    return transform_geometry(geometry, transformation.math_transform, factory)
