from __future__ import annotations
from typing import NamedTuple, Optional, Tuple

from .colors import to_css_color
from .config import DEFAULT_CONFIG, RenderConfig
from .direction import Angle, Direction
from .gradient import LinearGradient
from .types.stop_types import ColorInput, ColorStop
from .utils.default import value_or_default
from .utils.num_utils import format_number, format_percentage

BACKGROUND = "background"


class Declaration(NamedTuple):
    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value};"


def format_direction(direction: Direction, precision: int) -> str:
    if isinstance(direction, Angle):
        return f"{format_number(direction.value, precision)}{direction.unit.value}"
    return direction


def format_color_stop(stop: ColorStop, precision: int) -> str:
    if stop.position is None:
        return stop.color
    return f"{stop.color} {format_percentage(stop.position, precision)}"


def linear_gradient_value(
    gradient: LinearGradient,
    config: Optional[RenderConfig] = None,
    legacy: bool = False,
) -> str:
    """
    Write the ``linear-gradient(...)`` call for a gradient.

    Args:
        gradient: Gradient to write
        config: Rendering options, defaults to ``DEFAULT_CONFIG``
        legacy: Write the prefixed legacy form using the legacy direction

    Returns:
        CSS function call with fully positioned stops
    """
    config = value_or_default(config, DEFAULT_CONFIG)
    direction = gradient.legacy_direction if legacy else gradient.direction
    prefix = config.legacy_prefix_name if legacy else ""
    args = [format_direction(direction, config.precision)]
    args.extend(format_color_stop(stop, config.precision) for stop in gradient.color_stops)
    return f"{prefix}linear-gradient({', '.join(args)})"


def render(
    gradient: LinearGradient,
    fallback: Optional[ColorInput] = None,
    config: Optional[RenderConfig] = None,
) -> Tuple[Declaration, ...]:
    """
    Build the ``background`` declarations for a gradient.

    The first declaration sets the plain fallback color for clients without
    gradient support; the legacy prefixed gradient follows when
    ``config.legacy_prefix`` is on, and the standard gradient comes last.
    """
    config = value_or_default(config, DEFAULT_CONFIG)
    fallback_color = gradient.fallback if fallback is None else to_css_color(fallback)
    declarations = [Declaration(BACKGROUND, fallback_color)]
    if config.legacy_prefix:
        declarations.append(Declaration(BACKGROUND, linear_gradient_value(gradient, config, legacy=True)))
    declarations.append(Declaration(BACKGROUND, linear_gradient_value(gradient, config)))
    return tuple(declarations)


def render_css(
    gradient: LinearGradient,
    fallback: Optional[ColorInput] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    return "\n".join(str(d) for d in render(gradient, fallback, config))
