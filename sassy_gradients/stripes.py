from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np

from .colors import to_css_color
from .errors import InsufficientColorStops
from .stops import START_POSITION, END_POSITION
from .types.stop_types import ColorInput, ColorStop


def stripe_boundaries(count: int) -> np.ndarray:
    """Return the ``count + 1`` band edges splitting 0%..100% into equal bands."""
    return np.linspace(START_POSITION, END_POSITION, count + 1)


def compute_stripes(colors: Sequence[ColorInput]) -> Tuple[ColorStop, ...]:
    """
    Build hard-edged bands, one per color, of equal width.

    Every color gets two stops, one at each edge of its band, so neighbouring
    bands meet at a shared position instead of blending. Positions are kept
    at full float precision.

    Args:
        colors: At least one color

    Returns:
        ``2 * len(colors)`` color-stops
    """
    if len(colors) < 1:
        raise InsufficientColorStops(len(colors), minimum=1)
    edges = stripe_boundaries(len(colors))
    stops = []
    for i, color in enumerate(colors):
        token = to_css_color(color)
        stops.append(ColorStop(token, float(edges[i])))
        stops.append(ColorStop(token, float(edges[i + 1])))
    return tuple(stops)
