from __future__ import annotations
from typing import NamedTuple, Optional, Tuple, Union
from numpy import ndarray
from ..utils.num_utils import format_percentage

Scalar = int | float
ColorTuple = Tuple[Scalar, ...]
ColorInput = Union[str, ColorTuple, ndarray]
PositionInput = Union[Scalar, str, None]

VERTICAL_SIDES = ("top", "bottom")
HORIZONTAL_SIDES = ("left", "right")

OPPOSITE_SIDE = {
    "top": "bottom",
    "bottom": "top",
    "left": "right",
    "right": "left",
}


class ColorStop(NamedTuple):
    """A color with an optional position, in percent."""
    color: str
    position: Optional[float] = None

    def __str__(self) -> str:
        if self.position is None:
            return self.color
        return f"{self.color} {format_percentage(self.position)}"


StopInput = Union[ColorStop, Tuple[ColorInput, PositionInput], ColorInput]
