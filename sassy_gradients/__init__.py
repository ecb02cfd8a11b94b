"""
Sassy Gradients - CSS linear-gradient values as immutable records
=================================================================

Key Features
------------
- Direction keywords and angles (deg, grad, rad, turn) with validation
- Legacy (``-webkit-``) direction derived for old gradient syntax
- Unpositioned color-stops spread the way browsers place them
- Hard-edged stripes from a list of colors
- ``background`` declarations with an optional legacy prefixed line

Quick Start
-----------
>>> from sassy_gradients import make_gradient, render_css, RenderConfig
>>>
>>> g = make_gradient("to bottom right", "red 20%", "yellow", "green", "blue 55%", "red 55%", "green")
>>> g.get("legacy-direction")
'top left'
>>> print(render_css(g.stripes(), config=RenderConfig(legacy_prefix=True, precision=3)))  # doctest: +SKIP
"""

from .errors import GradientError, InvalidDirection, InsufficientColorStops, UnknownKey
from .types import AngleUnit, ColorStop
from .colors import to_css_color
from .direction import Angle, parse_direction, is_valid_direction, legacy_direction
from .stops import parse_color_stop, normalize_color_stops
from .stripes import compute_stripes
from .gradient import LinearGradient, make_gradient, get, stripes, FIELD_KEYS
from .config import RenderConfig, DEFAULT_CONFIG
from .render import Declaration, render, render_css, linear_gradient_value
from .debug import debug_dump

__version__ = "1.0.0"

__all__ = [
    # errors
    "GradientError",
    "InvalidDirection",
    "InsufficientColorStops",
    "UnknownKey",
    # value types
    "AngleUnit",
    "Angle",
    "ColorStop",
    "LinearGradient",
    # directions
    "parse_direction",
    "is_valid_direction",
    "legacy_direction",
    # color-stops
    "to_css_color",
    "parse_color_stop",
    "normalize_color_stops",
    "compute_stripes",
    # gradient record
    "make_gradient",
    "get",
    "stripes",
    "FIELD_KEYS",
    # output
    "RenderConfig",
    "DEFAULT_CONFIG",
    "Declaration",
    "render",
    "render_css",
    "linear_gradient_value",
    "debug_dump",
    "__version__",
]
