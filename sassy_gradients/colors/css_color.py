from __future__ import annotations
from typing import Tuple
import numpy as np

from ..types.stop_types import ColorInput, Scalar
from ..utils.num_utils import format_number


def validate_and_return_1d_array(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise ValueError("Color array must be 1-dimensional.")
    return arr


def _channels_to_css(channels: Tuple[Scalar, ...]) -> str:
    if len(channels) == 3:
        r, g, b = (int(round(c)) for c in channels)
        return f"rgb({r}, {g}, {b})"
    if len(channels) == 4:
        r, g, b = (int(round(c)) for c in channels[:3])
        return f"rgba({r}, {g}, {b}, {format_number(float(channels[3]))})"
    raise ValueError(f"Color tuples need 3 or 4 channels, got {len(channels)}")


def to_css_color(color_input: ColorInput) -> str:
    """
    Turn a color input into the token written into CSS.

    Strings are taken as already-valid CSS colors (named colors, hex,
    ``rgb()``/``hsl()`` functions, ...) and only trimmed. Integer RGB(A)
    tuples, lists and 1-D arrays become ``rgb()``/``rgba()`` calls, with the
    alpha channel kept as a unit float.
    """
    if isinstance(color_input, str):
        token = color_input.strip()
        if not token:
            raise ValueError("Color string must not be empty.")
        return token
    if isinstance(color_input, np.ndarray):
        return _channels_to_css(tuple(validate_and_return_1d_array(color_input).tolist()))
    if isinstance(color_input, (tuple, list)):
        return _channels_to_css(tuple(color_input))
    raise TypeError(f"Unsupported color input type: {type(color_input).__name__}")
