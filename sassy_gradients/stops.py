from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import re
import numpy as np

from .colors import to_css_color
from .types.stop_types import ColorStop, PositionInput, StopInput

_PERCENT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)%$")
# Any trailing number or dimension ("20px", "0.5", "1e2em"); only percentages are valid positions.
_DIMENSION_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?[a-z%]*$", re.IGNORECASE)

START_POSITION = 0.0
END_POSITION = 100.0


def parse_position(value: PositionInput) -> Optional[float]:
    """Read a stop position as a percentage number; ``None`` means unpositioned."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid color-stop position: {value!r}")
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    if isinstance(value, str) and _PERCENT_RE.match(value.strip()):
        return float(value.strip()[:-1])
    raise ValueError(f"Invalid color-stop position: {value!r}; expected a number or a percentage")


def _split_authored(text: str) -> Tuple[str, Optional[float]]:
    parts = text.strip().rsplit(None, 1)
    if len(parts) == 2 and _PERCENT_RE.match(parts[1]):
        return parts[0], parse_position(parts[1])
    if len(parts) == 2 and _DIMENSION_RE.match(parts[1]):
        raise ValueError(
            f"Invalid color-stop position: {parts[1]!r} in {text!r}; only percentages are supported"
        )
    return text, None


def parse_color_stop(value: StopInput) -> ColorStop:
    """
    Turn any supported stop input into a ``ColorStop``.

    Accepted inputs:
        - ``ColorStop`` instances
        - ``(color, position)`` pairs, position a number, ``"20%"`` or None
        - authored strings such as ``"red 20%"`` or ``"rgba(0, 0, 0, 0.5) 40%"``
        - a bare color (string, RGB(A) tuple or 1-D array)
    """
    if isinstance(value, ColorStop):
        return ColorStop(to_css_color(value.color), parse_position(value.position))
    if isinstance(value, str):
        color, position = _split_authored(value)
        return ColorStop(to_css_color(color), position)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        color, position = value
        return ColorStop(to_css_color(color), parse_position(position))
    return ColorStop(to_css_color(value))


def parse_color_stops(values: Sequence[StopInput]) -> Tuple[ColorStop, ...]:
    return tuple(parse_color_stop(v) for v in values)


def _fill_endpoints(positions: List[Optional[float]]) -> None:
    if positions[0] is None:
        positions[0] = START_POSITION
    if positions[-1] is None:
        positions[-1] = END_POSITION


def _fill_gaps(positions: List[Optional[float]]) -> None:
    known = [i for i, p in enumerate(positions) if p is not None]
    for start, end in zip(known, known[1:]):
        if end - start < 2:
            continue
        # linspace includes both known endpoints; only the interior is new.
        filled = np.linspace(positions[start], positions[end], end - start + 1)
        for offset, position in enumerate(filled[1:-1], start=1):
            positions[start + offset] = float(position)


def normalize_color_stops(stops: Sequence[StopInput]) -> Tuple[ColorStop, ...]:
    """
    Give every color-stop an explicit position.

    A missing first position becomes 0% and a missing last one 100%. Each run
    of unpositioned stops between two positioned ones is then spread evenly
    across that gap, the same way browsers place unpositioned stops.
    Positioned stops are left as authored, even when they go backwards.

    Args:
        stops: At least two stops, in any form ``parse_color_stop`` accepts

    Returns:
        Tuple of ``ColorStop`` with the same colors in the same order
    """
    parsed = parse_color_stops(stops)
    positions: List[Optional[float]] = [s.position for s in parsed]
    _fill_endpoints(positions)
    _fill_gaps(positions)
    return tuple(ColorStop(s.color, p) for s, p in zip(parsed, positions))
