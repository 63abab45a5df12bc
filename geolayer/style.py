# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import enum
import sys
from typing import Any

import jsonschema

from geolayer.util.assertions import assert_instance

DEFAULT_MIN_VISIBLE = 0.0
DEFAULT_MAX_VISIBLE = sys.float_info.max


class VisibilityUnits(enum.Enum):
    """Units of a style's visibility range."""

    #: Visibility is given in map zoom, i.e., the viewport width
    #: in world units.
    ZOOM_LEVEL = "zoom_level"
    #: Visibility is given as map scale denominator.
    SCALE = "scale"


STYLE_SCHEMA = {
    "type": "object",
    "properties": {
        "enabled": {"type": "boolean"},
        "min_visible": {"type": "number", "minimum": 0},
        "max_visible": {"type": "number", "minimum": 0},
        "visibility_units": {"enum": [u.value for u in VisibilityUnits]},
    },
    "additionalProperties": False,
}


class Style:
    """The style of a layer.

    Values are not validated here, except by
    :meth:`from_dict`.

    Args:
        enabled: Whether the layer is rendered.
        min_visible: Minimum visibility, inclusive.
        max_visible: Maximum visibility, exclusive.
        visibility_units: Units of *min_visible* and *max_visible*.
    """

    def __init__(
        self,
        enabled: bool = True,
        min_visible: float = DEFAULT_MIN_VISIBLE,
        max_visible: float = DEFAULT_MAX_VISIBLE,
        visibility_units: VisibilityUnits = VisibilityUnits.ZOOM_LEVEL,
    ):
        self.enabled = enabled
        self.min_visible = min_visible
        self.max_visible = max_visible
        self.visibility_units = visibility_units

    def is_visible_at(self, viewport) -> bool:
        """Test whether a layer with this style is visible
        in the given viewport.

        Args:
            viewport: A :class:`geolayer.render.Viewport`.
        """
        if not self.enabled:
            return False
        if self.visibility_units == VisibilityUnits.SCALE:
            value = viewport.scale
        else:
            value = viewport.zoom
        return self.min_visible <= value < self.max_visible

    @classmethod
    def get_schema(cls) -> dict[str, Any]:
        return STYLE_SCHEMA

    @classmethod
    def from_dict(cls, value: dict[str, Any]) -> "Style":
        assert_instance(value, dict, name="value")
        jsonschema.validate(value, STYLE_SCHEMA)
        kwargs = dict(value)
        if "visibility_units" in kwargs:
            kwargs["visibility_units"] = VisibilityUnits(kwargs["visibility_units"])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return dict(
            enabled=self.enabled,
            min_visible=self.min_visible,
            max_visible=self.max_visible,
            visibility_units=self.visibility_units.value,
        )

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Style):
            return False
        return (
            self.enabled == other.enabled
            and self.min_visible == other.min_visible
            and self.max_visible == other.max_visible
            and self.visibility_units == other.visibility_units
        )

    # Styles are mutable
    __hash__ = None

    def __repr__(self):
        return (
            f"Style(enabled={self.enabled!r},"
            f" min_visible={self.min_visible!r},"
            f" max_visible={self.max_visible!r},"
            f" visibility_units={self.visibility_units})"
        )
