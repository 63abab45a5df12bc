# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import logging

#: SRID of a layer whose coordinate reference system has not been set yet
SRID_UNSET = -1
#: SRID meaning "no CRS", never part of a transformation
SRID_NONE = 0

#: Authority used to look up coordinate systems by SRID
DEFAULT_CRS_AUTHORITY = "EPSG"

LOG_LEVEL_OFF_NAME = "OFF"
LOG_LEVEL_OFF = logging.CRITICAL + 5

LOG_LEVEL_DETAIL_NAME = "DETAIL"
LOG_LEVEL_DETAIL = logging.DEBUG + 5

LOG_LEVEL_TRACE_NAME = "TRACE"
LOG_LEVEL_TRACE = logging.DEBUG - 5

logging.addLevelName(LOG_LEVEL_DETAIL, LOG_LEVEL_DETAIL_NAME)
logging.addLevelName(LOG_LEVEL_TRACE, LOG_LEVEL_TRACE_NAME)

LOG_LEVELS = [
    LOG_LEVEL_OFF_NAME,
    "CRITICAL",
    "ERROR",
    "WARNING",
    "INFO",
    LOG_LEVEL_DETAIL_NAME,
    "DEBUG",
    LOG_LEVEL_TRACE_NAME,
]

DEFAULT_GEOLAYER_LOG_LEVEL = logging.WARNING

GENERAL_LOG_FORMAT = "[%(levelname).1s %(asctime)s %(name)s] %(message)s"

# geolayer logger
LOG = logging.getLogger("geolayer")
LOG.setLevel(DEFAULT_GEOLAYER_LOG_LEVEL)
