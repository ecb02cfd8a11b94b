"""
Gradient directions
===================

A direction is either a keyword (``"to top"``, ``"to bottom right"``) or an
angle (``45deg``, ``0.25turn``, ...). Keywords are kept in a canonical
spelling: lower case, single spaces, vertical side before horizontal side.

The legacy (``-webkit-`` prefixed) syntax names the side a gradient starts
from instead of the side it goes to, and measures angles counter-clockwise
from the right instead of clockwise from the top. ``legacy_direction``
converts between the two conventions in both directions.

>>> parse_direction("to right  Bottom")
'to bottom right'
>>> legacy_direction("to bottom right")
'top left'
>>> str(legacy_direction("30deg"))
'60deg'
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union
import math
import re

from .errors import InvalidDirection
from .types.angle_units import AngleUnit, full_turn, DEGREES_360
from .types.stop_types import OPPOSITE_SIDE, VERTICAL_SIDES, HORIZONTAL_SIDES
from .utils.num_utils import format_number

_ANGLE_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(deg|grad|rad|turn)$")

# Modern angles run clockwise from the top, legacy ones counter-clockwise from the right.
_LEGACY_ANGLE_OFFSET = 450


def _angle_unit(unit) -> AngleUnit:
    try:
        return AngleUnit(unit)
    except ValueError:
        raise InvalidDirection(unit) from None


@dataclass(frozen=True)
class Angle:
    value: float
    unit: AngleUnit = AngleUnit.DEG

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidDirection(self.value)
        if not math.isfinite(self.value):
            raise InvalidDirection(self.value)
        object.__setattr__(self, "unit", _angle_unit(self.unit))

    @property
    def degrees(self) -> float:
        if self.unit == AngleUnit.DEG:
            return self.value
        return self.value * DEGREES_360 / full_turn[self.unit]

    @classmethod
    def from_degrees(cls, degrees: float, unit: AngleUnit = AngleUnit.DEG) -> Angle:
        unit = _angle_unit(unit)
        if unit == AngleUnit.DEG:
            return cls(degrees, unit)
        return cls(degrees * full_turn[unit] / DEGREES_360, unit)

    def legacy(self) -> Angle:
        """Mirror this angle into the other angle convention, keeping the unit."""
        return Angle.from_degrees((_LEGACY_ANGLE_OFFSET - self.degrees) % DEGREES_360, self.unit)

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit.value}"


Direction = Union[str, Angle]
DirectionInput = Union[str, Angle, int, float]


def _canonical_sides(tokens: Tuple[str, ...]) -> Tuple[str, ...] | None:
    """Order side tokens vertical-first, or return None if they do not name a side or corner."""
    if not 1 <= len(tokens) <= 2:
        return None
    vertical = [t for t in tokens if t in VERTICAL_SIDES]
    horizontal = [t for t in tokens if t in HORIZONTAL_SIDES]
    if len(vertical) > 1 or len(horizontal) > 1 or len(vertical) + len(horizontal) != len(tokens):
        return None
    return tuple(vertical + horizontal)


def _parse_angle(text: str) -> Angle | None:
    match = _ANGLE_RE.match(text)
    if match is None:
        return None
    number, unit = match.groups()
    value = int(number) if re.fullmatch(r"[+-]?\d+", number) else float(number)
    return Angle(value, AngleUnit(unit))


def _tokens(value: str) -> Tuple[str, ...]:
    return tuple(value.lower().split())


def parse_direction(value: DirectionInput) -> Direction:
    """
    Validate a modern direction and return its canonical form.

    Args:
        value: Keyword string, angle string, ``Angle`` or a bare number of degrees

    Returns:
        Canonical keyword string or ``Angle``

    Raises:
        InvalidDirection: if ``value`` is not part of the direction vocabulary
    """
    if isinstance(value, Angle):
        return value
    if isinstance(value, bool):
        raise InvalidDirection(value)
    if isinstance(value, (int, float)):
        return Angle(value, AngleUnit.DEG)
    if not isinstance(value, str):
        raise InvalidDirection(value)

    tokens = _tokens(value)
    if tokens and tokens[0] == "to":
        sides = _canonical_sides(tokens[1:])
        if sides is not None:
            return "to " + " ".join(sides)
        raise InvalidDirection(value)
    if len(tokens) == 1:
        angle = _parse_angle(tokens[0])
        if angle is not None:
            return angle
    raise InvalidDirection(value)


def is_valid_direction(value: DirectionInput) -> bool:
    try:
        parse_direction(value)
    except InvalidDirection:
        return False
    return True


def legacy_direction(direction: DirectionInput) -> Direction:
    """
    Convert a direction between the modern and the legacy convention.

    Modern keywords become the opposite side or corner without the ``to``
    prefix; legacy keywords (``"top left"``) become modern ones again. Angles
    are mapped with ``(450 - angle) mod 360`` in degrees and handed back in
    their original unit. Applying the function twice gives back an
    equivalent direction.
    """
    if isinstance(direction, str):
        legacy_sides = _canonical_sides(_tokens(direction))
        if legacy_sides is not None:
            return "to " + " ".join(OPPOSITE_SIDE[s] for s in legacy_sides)

    parsed = parse_direction(direction)
    if isinstance(parsed, Angle):
        return parsed.legacy()
    sides = _canonical_sides(_tokens(parsed)[1:])
    return " ".join(OPPOSITE_SIDE[s] for s in sides)
