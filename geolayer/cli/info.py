# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import click


# noinspection PyShadowingBuiltins
@click.command(name="info")
@click.argument("config_paths", metavar="CONFIG", nargs=-1, required=True)
def info(config_paths: tuple[str, ...]):
    """
    Print information about a layer.

    Loads the layer configuration from one or more CONFIG files
    given in JSON or YAML format. If multiple files are given,
    later ones override settings of earlier ones.
    """
    from geolayer.config import load_configs, new_layer_from_config

    config = load_configs(*config_paths, exception_type=click.ClickException)
    with new_layer_from_config(config, exception_type=click.ClickException) as layer:
        envelope = layer.envelope
        click.echo(f"name: {layer.name}")
        click.echo(f"srid: {layer.srid}")
        click.echo(f"target_srid: {layer.target_srid}")
        click.echo(f"needs_transformation: {layer.crs.needs_transformation}")
        click.echo(f"geometries: {len(layer.geometries)}")
        if envelope is not None:
            click.echo(f"envelope: {','.join(map(repr, envelope))}")
        else:
            click.echo("envelope: none")
