from .angle_units import AngleUnit, full_turn, DEGREES_360
from .stop_types import ColorStop, OPPOSITE_SIDE, VERTICAL_SIDES, HORIZONTAL_SIDES

__all__ = [
    "AngleUnit",
    "full_turn",
    "DEGREES_360",
    "ColorStop",
    "OPPOSITE_SIDE",
    "VERTICAL_SIDES",
    "HORIZONTAL_SIDES",
]
