# No dependencies
from enum import Enum
import math


class AngleUnit(str, Enum):
    DEG = "deg"
    GRAD = "grad"
    RAD = "rad"
    TURN = "turn"


full_turn = {
    AngleUnit.DEG: 360,
    AngleUnit.GRAD: 400,
    AngleUnit.RAD: 2 * math.pi,
    AngleUnit.TURN: 1,
}

DEGREES_360 = 360
