# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import io
import json
import os
import string
from typing import Any, Union

import fsspec
import jsonschema
import shapely.errors
import shapely.geometry
import shapely.wkt
import yaml
from shapely.geometry.base import BaseGeometry

from geolayer.constants import LOG
from geolayer.layer import GeometryLayer
from geolayer.style import STYLE_SCHEMA, Style

GeometryLike = Union[BaseGeometry, dict[str, Any], str]

LAYER_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "srid": {"type": "integer"},
        "target_srid": {"type": "integer"},
        "style": STYLE_SCHEMA,
        "geometries": {
            "type": "array",
            "items": {"type": ["string", "object"]},
        },
    },
    "required": ["srid"],
    "additionalProperties": False,
}

_INVALID_GEOMETRY_MSG = (
    "Geometry must be either a shapely geometry object,"
    " a GeoJSON geometry dictionary, or a geometry WKT string"
)


def merge_config(first_dict: dict, *more_dicts):
    if not more_dicts:
        output_dict = first_dict
    else:
        output_dict = dict(first_dict)
        for d in more_dicts:
            for k, v in d.items():
                if (
                    k in output_dict
                    and isinstance(output_dict[k], dict)
                    and isinstance(v, dict)
                ):
                    v = merge_config(output_dict[k], v)
                output_dict[k] = v
    return output_dict


def load_configs(
    *config_paths: str, exception_type: type[Exception] = ValueError
) -> dict[str, Any]:
    """Load and merge the configurations from the given
    JSON or YAML files. Later configurations override earlier ones.
    """
    config_dicts = []
    for config_path in config_paths:
        config_dict = load_json_or_yaml_config(
            config_path, exception_type=exception_type
        )
        config_dicts.append(config_dict)
    if not config_dicts:
        return {}
    return merge_config(*config_dicts)


def load_json_or_yaml_config(
    config_path: str, exception_type: type[Exception] = ValueError
) -> dict[str, Any]:
    try:
        config_dict = _load_json_or_yaml_config(config_path)
        LOG.info(f"Configuration loaded: {config_path}")
    except FileNotFoundError as e:
        raise exception_type(f"Cannot find configuration {config_path!r}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise exception_type(f"Configuration {config_path!r} is invalid: {e}") from e
    except OSError as e:
        raise exception_type(
            f"Cannot load configuration from {config_path!r}: {e}"
        ) from e
    if config_dict is None:
        return {}
    if not isinstance(config_dict, dict):
        raise exception_type(
            f"Invalid configuration format in {config_path!r}: dictionary expected"
        )
    return config_dict


def _load_json_or_yaml_config(config_file: str) -> Any:
    with fsspec.open(config_file, mode="r") as fp:
        file_content = fp.read()
    template = string.Template(file_content)
    file_content = template.safe_substitute(os.environ)
    with io.StringIO(file_content) as fp:
        if config_file.endswith(".json"):
            return json.load(fp)
        else:
            return yaml.safe_load(fp)


def validate_layer_config(
    config: dict[str, Any], exception_type: type[Exception] = ValueError
):
    try:
        jsonschema.validate(config, LAYER_CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        path = ".".join(map(str, e.absolute_path))
        where = f" at {path!r}" if path else ""
        raise exception_type(f"Invalid layer configuration{where}: {e.message}") from e


def normalize_geometry(geometry: GeometryLike) -> BaseGeometry:
    """Convert a geometry-like object into a shapely geometry.

    A geometry-like object may be any shapely geometry object,
    a GeoJSON geometry dictionary, or a WKT string.
    """
    if isinstance(geometry, BaseGeometry):
        return geometry
    try:
        if isinstance(geometry, dict):
            return shapely.geometry.shape(geometry)
        if isinstance(geometry, str):
            return shapely.wkt.loads(geometry)
    except (shapely.errors.ShapelyError, KeyError, TypeError, ValueError) as e:
        raise ValueError(f"{_INVALID_GEOMETRY_MSG}: {e}") from e
    raise ValueError(_INVALID_GEOMETRY_MSG)


def new_layer_from_config(
    config: dict[str, Any], exception_type: type[Exception] = ValueError
) -> GeometryLayer:
    """Create a new geometry layer from the given
    layer configuration.

    Raises:
        exception_type: if *config* is invalid.
    """
    validate_layer_config(config, exception_type=exception_type)
    style = Style.from_dict(config["style"]) if "style" in config else None
    try:
        geometries = [normalize_geometry(g) for g in config.get("geometries", [])]
    except ValueError as e:
        raise exception_type(f"Invalid layer configuration: {e}") from e
    return GeometryLayer(
        geometries=geometries,
        srid=config["srid"],
        target_srid=config.get("target_srid"),
        style=style,
        name=config.get("name"),
    )
