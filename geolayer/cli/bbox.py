# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import click


# noinspection PyShadowingBuiltins
@click.command(name="bbox")
@click.argument("srid", type=int)
@click.argument("target_srid", metavar="TARGET_SRID", type=int)
@click.argument("bbox_str", metavar="BBOX")
@click.option(
    "--inverse",
    "-i",
    is_flag=True,
    help="Reproject BBOX from TARGET_SRID back to SRID.",
)
def bbox(srid: int, target_srid: int, bbox_str: str, inverse: bool = False):
    """
    Reproject a bounding box.

    Reprojects BBOX, given as "<x1>,<y1>,<x2>,<y2>" in the CRS
    identified by SRID, into the CRS identified by TARGET_SRID.
    Prints the minimum bounding box of the reprojected corners.
    """
    from geolayer.cli.common import parse_cli_bbox
    from geolayer.geometry import Envelope
    from geolayer.layer import LayerCrs

    envelope = Envelope(*parse_cli_bbox(bbox_str))

    layer_crs = LayerCrs()
    layer_crs.srid = srid
    layer_crs.target_srid = target_srid

    if inverse:
        result = layer_crs.envelope_to_source(envelope)
    else:
        result = layer_crs.envelope_to_target(envelope)

    click.echo(",".join(map(repr, result)))
