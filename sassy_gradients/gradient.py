from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
import logging

from .colors import to_css_color
from .direction import Direction, DirectionInput, legacy_direction, parse_direction
from .errors import InsufficientColorStops, UnknownKey
from .stops import normalize_color_stops, parse_color_stops
from .stripes import compute_stripes
from .types.stop_types import ColorInput, ColorStop, StopInput
from .utils.default import value_or_default

logger = logging.getLogger(__name__)

MIN_COLOR_STOPS = 2

# String key -> attribute name
FIELD_KEYS: Dict[str, str] = {
    "direction": "direction",
    "legacy-direction": "legacy_direction",
    "authored-color-stops": "authored_color_stops",
    "color-stops": "color_stops",
    "colors": "colors",
    "fallback": "fallback",
    "length": "length",
}


class LinearGradient:
    """
    Immutable model of a CSS ``linear-gradient`` value.

    Built from a direction and at least two color-stops. Everything else
    (colors, fully positioned stops, legacy direction, fallback) is derived
    once here and never changes; the ``with_*`` methods and ``stripes``
    return new gradients.

    >>> g = LinearGradient("to bottom right", "red 20%", "yellow", "blue")
    >>> g.legacy_direction
    'top left'
    >>> [str(s) for s in g.color_stops]
    ['red 20%', 'yellow 60%', 'blue 100%']
    """
    __slots__ = (
        '_direction',
        '_legacy_direction',
        '_authored_color_stops',
        '_color_stops',
        '_colors',
        '_fallback',
        '_is_frozen',
    )

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        direction: DirectionInput,
        *color_stops: StopInput,
        fallback: Optional[ColorInput] = None,
    ) -> None:
        parsed_direction = parse_direction(direction)
        if len(color_stops) < MIN_COLOR_STOPS:
            raise InsufficientColorStops(len(color_stops), MIN_COLOR_STOPS)

        authored = parse_color_stops(color_stops)
        colors = tuple(stop.color for stop in authored)

        self._direction = parsed_direction
        self._legacy_direction = legacy_direction(parsed_direction)
        self._authored_color_stops = authored
        self._color_stops = normalize_color_stops(authored)
        self._colors = colors
        self._fallback = to_css_color(value_or_default(fallback, colors[0]))

        super().__setattr__('_is_frozen', True)
        logger.debug("Built %r", self)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def legacy_direction(self) -> Direction:
        return self._legacy_direction

    @property
    def authored_color_stops(self) -> Tuple[ColorStop, ...]:
        return self._authored_color_stops

    @property
    def color_stops(self) -> Tuple[ColorStop, ...]:
        return self._color_stops

    @property
    def colors(self) -> Tuple[str, ...]:
        return self._colors

    @property
    def fallback(self) -> str:
        return self._fallback

    @property
    def length(self) -> int:
        return len(self._colors)

    def __len__(self) -> int:
        return self.length

    # ------------------ KEYED ACCESS ------------------
    def get(self, key: str) -> Any:
        """
        Look a field up by its string key (``"color-stops"``, ``"legacy-direction"``, ...).

        Underscore spellings of the keys are accepted as well.

        Raises:
            UnknownKey: if ``key`` does not name one of the seven fields
        """
        attr = FIELD_KEYS.get(key) if isinstance(key, str) else None
        if attr is None and isinstance(key, str):
            attr = FIELD_KEYS.get(key.replace("_", "-"))
        if attr is None:
            raise UnknownKey(key, FIELD_KEYS)
        return getattr(self, attr)

    def as_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, attr) for key, attr in FIELD_KEYS.items()}

    # ------------------ UPDATES ------------------
    def with_direction(self, direction: DirectionInput) -> LinearGradient:
        return self.__class__(direction, *self._authored_color_stops, fallback=self._fallback)

    def with_color_stops(self, *color_stops: StopInput) -> LinearGradient:
        """Rebuild with new stops; the fallback follows the new first color."""
        return self.__class__(self._direction, *color_stops)

    def with_fallback(self, fallback: ColorInput) -> LinearGradient:
        return self.__class__(self._direction, *self._authored_color_stops, fallback=fallback)

    def stripes(self) -> LinearGradient:
        """
        Rewrite the stops into hard-edged bands, one equal-width band per color.

        Direction and fallback are kept. The new gradient has two stops per
        original color, so its ``colors`` list holds each color twice.
        """
        striped = self.__class__(self._direction, *compute_stripes(self._colors), fallback=self._fallback)
        logger.debug("Striped %d colors into %d stops", self.length, striped.length)
        return striped

    # ------------------ VALUE SEMANTICS ------------------
    def _key(self) -> tuple:
        return (self._direction, self._authored_color_stops, self._fallback)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearGradient):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        args = [repr(str(self._direction))]
        args.extend(repr(str(stop)) for stop in self._authored_color_stops)
        args.append(f"fallback={self._fallback!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"


def make_gradient(
    direction: DirectionInput,
    *color_stops: StopInput,
    fallback: Optional[ColorInput] = None,
) -> LinearGradient:
    """Build a ``LinearGradient``; see the class for the accepted inputs."""
    return LinearGradient(direction, *color_stops, fallback=fallback)


def get(gradient: LinearGradient, key: str) -> Any:
    return gradient.get(key)


def stripes(gradient: LinearGradient) -> LinearGradient:
    return gradient.stripes()
