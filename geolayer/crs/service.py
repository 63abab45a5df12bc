# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import pyproj

from geolayer.constants import DEFAULT_CRS_AUTHORITY, LOG
from geolayer.util.assertions import assert_srid

from .transformation import CoordinateTransformation, PyprojMathTransform


class CrsService:
    """
    Looks up coordinate reference systems by SRID and
    creates transformations between them.

    pyproj objects may take considerable time to construct,
    hence CRSs and transformers are cached.

    Args:
        authority: The authority that issued the SRIDs.
            Defaults to "EPSG".
    """

    INSTANCE: "CrsService"

    def __init__(self, authority: str = DEFAULT_CRS_AUTHORITY):
        self._authority = authority
        self._crs_cache: dict[int, pyproj.CRS] = dict()
        self._transformer_cache: dict[str, pyproj.Transformer] = dict()

    @property
    def authority(self) -> str:
        return self._authority

    def get_coordinate_system(self, srid: int) -> pyproj.CRS:
        """Get the coordinate reference system for *srid*.

        Raises:
            pyproj.exceptions.CRSError: if *srid* is unknown.
        """
        assert_srid(srid)
        if srid not in self._crs_cache:
            self._crs_cache[srid] = pyproj.CRS.from_authority(self._authority, srid)
        return self._crs_cache[srid]

    def create_transformation(
        self, source_cs: pyproj.CRS, target_cs: pyproj.CRS
    ) -> CoordinateTransformation:
        """Create a new transformation from *source_cs* to *target_cs*."""
        key = f"{source_cs.srs}->{target_cs.srs}"
        if key not in self._transformer_cache:
            LOG.debug("Creating transformer %s", key)
            # pyproj.Transformer.from_crs() is really expensive,
            # save result for later use
            self._transformer_cache[key] = pyproj.Transformer.from_crs(
                source_cs, target_cs, always_xy=True
            )
        return CoordinateTransformation(
            source_cs,
            target_cs,
            PyprojMathTransform(self._transformer_cache[key]),
        )

    def create_transformation_from_srids(
        self, source_srid: int, target_srid: int
    ) -> CoordinateTransformation:
        return self.create_transformation(
            self.get_coordinate_system(source_srid),
            self.get_coordinate_system(target_srid),
        )


CrsService.INSTANCE = CrsService()
