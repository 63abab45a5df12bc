# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import abc
from typing import Any, Optional

import pyproj
from pyproj.enums import TransformDirection

from geolayer.util.assertions import assert_instance


class MathTransform(abc.ABC):
    """Maps coordinates from one coordinate reference system
    into another.

    Instances are immutable. Use :meth:`inverted` to obtain
    the transform for the opposite direction.
    """

    @abc.abstractmethod
    def transform(self, x: Any, y: Any, z: Any = None) -> tuple:
        """Transform the given coordinates.

        Args:
            x: Scalar or array-like x-coordinates.
            y: Scalar or array-like y-coordinates.
            z: Optional scalar or array-like z-coordinates.

        Returns:
            A tuple (x, y) or, if *z* is given, (x, y, z)
            of transformed coordinates.
        """

    @abc.abstractmethod
    def inverted(self) -> "MathTransform":
        """Get a new transform that maps coordinates
        in the opposite direction. This transform
        is left unchanged.
        """

    def __call__(self, x: Any, y: Any, z: Any = None) -> tuple:
        return self.transform(x, y, z)


class PyprojMathTransform(MathTransform):
    """A math transform backed by a ``pyproj.Transformer``.

    The transformer should be created with ``always_xy=True``
    so coordinates are always given in x, y (east, north) order.

    Args:
        transformer: The pyproj transformer.
        inverse: Whether to apply the transformer
            in inverse direction.
    """

    def __init__(self, transformer: pyproj.Transformer, inverse: bool = False):
        assert_instance(transformer, pyproj.Transformer, name="transformer")
        self._transformer = transformer
        self._inverse = inverse

    @property
    def transformer(self) -> pyproj.Transformer:
        return self._transformer

    @property
    def is_inverse(self) -> bool:
        return self._inverse

    def transform(self, x: Any, y: Any, z: Any = None) -> tuple:
        direction = (
            TransformDirection.INVERSE if self._inverse else TransformDirection.FORWARD
        )
        if z is None:
            return self._transformer.transform(x, y, direction=direction)
        return self._transformer.transform(x, y, z, direction=direction)

    def inverted(self) -> "PyprojMathTransform":
        return PyprojMathTransform(self._transformer, inverse=not self._inverse)

    def __repr__(self):
        return (
            f"PyprojMathTransform({self._transformer.name!r},"
            f" inverse={self._inverse})"
        )


class CoordinateTransformation:
    """A transformation between two coordinate reference systems.

    Args:
        source_cs: The source coordinate reference system.
        target_cs: The target coordinate reference system.
        math_transform: The transform mapping coordinates
            from *source_cs* to *target_cs*.
    """

    def __init__(
        self,
        source_cs: pyproj.CRS,
        target_cs: pyproj.CRS,
        math_transform: MathTransform,
    ):
        assert_instance(source_cs, pyproj.CRS, name="source_cs")
        assert_instance(target_cs, pyproj.CRS, name="target_cs")
        assert_instance(math_transform, MathTransform, name="math_transform")
        self._source_cs = source_cs
        self._target_cs = target_cs
        self._math_transform = math_transform

    @property
    def source_cs(self) -> pyproj.CRS:
        return self._source_cs

    @property
    def target_cs(self) -> pyproj.CRS:
        return self._target_cs

    @property
    def math_transform(self) -> MathTransform:
        return self._math_transform

    @property
    def source_srid(self) -> int:
        """The declared authority code of the source CRS."""
        return get_authority_code(self._source_cs)

    @property
    def target_srid(self) -> int:
        """The declared authority code of the target CRS."""
        return get_authority_code(self._target_cs)

    def inverted(self) -> "CoordinateTransformation":
        """Get the transformation in opposite direction."""
        return CoordinateTransformation(
            self._target_cs, self._source_cs, self._math_transform.inverted()
        )

    def __repr__(self):
        return (
            f"CoordinateTransformation("
            f"{self._source_cs.srs!r} -> {self._target_cs.srs!r})"
        )


def get_authority_code(crs: pyproj.CRS) -> int:
    """Get the integer authority code of *crs*,
    e.g., 4326 for "EPSG:4326".

    Raises:
        ValueError: if *crs* does not declare an integer
            authority code.
    """
    authority: Optional[tuple[str, str]] = crs.to_authority()
    if authority is None:
        raise ValueError(f"CRS {crs.name!r} does not declare an authority code")
    _, code = authority
    try:
        return int(code)
    except ValueError as e:
        raise ValueError(
            f"authority code {code!r} of CRS {crs.name!r} is not an integer"
        ) from e
