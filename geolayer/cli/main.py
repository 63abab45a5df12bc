# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import sys

import click

from geolayer.cli.bbox import bbox
from geolayer.cli.common import (
    cli_option_traceback,
    configure_logging,
    handle_cli_exception,
    new_cli_ctx_obj,
)
from geolayer.cli.info import info
from geolayer.constants import LOG, LOG_LEVEL_OFF_NAME, LOG_LEVELS
from geolayer.version import version


# noinspection PyShadowingBuiltins,PyUnusedLocal
@click.group(name="geolayer")
@click.version_option(version)
@cli_option_traceback
@click.option(
    "--loglevel",
    "log_level",
    metavar="LOG_LEVEL",
    type=click.Choice(LOG_LEVELS),
    default=LOG_LEVEL_OFF_NAME,
    help=f"Log level."
    f' Must be one of {", ".join(LOG_LEVELS)}.'
    f" Defaults to {LOG_LEVEL_OFF_NAME}."
    f" If the level is not {LOG_LEVEL_OFF_NAME},"
    f" any log messages up to the given level will be"
    f" written either to the console (stderr)"
    f" or LOG_FILE, if provided.",
)
@click.option(
    "--logfile",
    "log_file",
    metavar="LOG_FILE",
    help=f"Log file path."
    f" If given, any log messages will redirected into"
    f" LOG_FILE. Effective only if LOG_LEVEL"
    f" is not {LOG_LEVEL_OFF_NAME}.",
)
def cli(traceback=False, log_level=None, log_file=None):
    """Map layer reprojection tools"""
    configure_logging(log_file=log_file, log_level=log_level)
    if log_level != LOG_LEVEL_OFF_NAME:
        LOG.setLevel(log_level)


cli.add_command(bbox)
cli.add_command(info)


def main(args=None):
    # noinspection PyBroadException
    ctx_obj = new_cli_ctx_obj()
    try:
        exit_code = cli.main(args=args, obj=ctx_obj, standalone_mode=False)
    except Exception as e:
        exit_code = handle_cli_exception(
            e, traceback_mode=ctx_obj.get("traceback", False)
        )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
