# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import logging
import sys
from typing import Optional

import click

from geolayer.constants import (
    GENERAL_LOG_FORMAT,
    LOG,
    LOG_LEVEL_OFF,
    LOG_LEVEL_OFF_NAME,
)


def new_cli_ctx_obj():
    return {
        "traceback": False,
    }


def cli_option_traceback(func):
    """Decorator for adding a reusable CLI option `--traceback`."""

    # noinspection PyUnusedLocal
    def _callback(ctx: click.Context, param: click.Option, value: bool):
        ctx_obj = ctx.ensure_object(dict)
        ctx_obj["traceback"] = value
        return value

    return click.option(
        "--traceback",
        is_flag=True,
        help="Enable tracing back errors by dumping the Python call stack. "
        "Pass as very first option to also trace back error during command-line validation.",
        callback=_callback,
    )(func)


def parse_cli_bbox(value: str, metavar: str = "BBOX") -> tuple[float, ...]:
    """Parse a string of the form "<x1>,<y1>,<x2>,<y2>"
    into a tuple of four numbers.
    """
    items = value.split(",")
    if len(items) != 4:
        raise click.ClickException(
            f"{metavar} must have 4 numbers separated by ','"
        )
    try:
        x1, y1, x2, y2 = map(float, items)
    except ValueError as e:
        raise click.ClickException(f"Invalid numbers in {metavar} found: {e}")
    if x1 > x2 or y1 > y2:
        raise click.ClickException(f"{metavar} must satisfy x1 <= x2 and y1 <= y2")
    return x1, y1, x2, y2


def handle_cli_exception(
    e: BaseException, exit_code: int = None, traceback_mode: bool = False
) -> int:
    exc_info = traceback_mode and e
    if isinstance(e, click.Abort):
        LOG.error("Aborted.", exc_info=exc_info)
        exit_code = exit_code or 1
    elif isinstance(e, click.ClickException):
        LOG.error("%s", e, exc_info=exc_info)
        exit_code = exit_code or e.exit_code
    elif isinstance(e, OSError):
        LOG.error("OS error: %s", e, exc_info=exc_info)
        exit_code = exit_code or 2
    else:
        LOG.error("Internal error: %s", e, exc_info=exc_info)
        exit_code = exit_code or 3
    LOG.debug("Exit with code %d", exit_code)
    return exit_code


def configure_logging(
    log_file: Optional[str],
    log_level: Optional[str],
    logger: logging.Logger = logging.getLogger(),
):
    remove_log_handlers(logger)
    if log_level == LOG_LEVEL_OFF_NAME:
        logger.setLevel(LOG_LEVEL_OFF)
    else:
        logger.setLevel(log_level)
        formatter = logging.Formatter(GENERAL_LOG_FORMAT)
        if log_file:
            handler = logging.FileHandler(log_file, "a", encoding="utf8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def remove_log_handlers(logger: logging.Logger):
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
