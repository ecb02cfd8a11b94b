"""Errors raised while building or reading a gradient."""


class GradientError(ValueError):
    """Base class for invalid gradient input."""


class InvalidDirection(GradientError):
    def __init__(self, direction) -> None:
        self.direction = direction
        super().__init__(
            f"Invalid gradient direction: {direction!r}. Expected 'to <side>', "
            f"'to <corner>' or an angle such as '45deg'"
        )


class InsufficientColorStops(GradientError):
    def __init__(self, count: int, minimum: int = 2) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"A gradient needs at least {minimum} color-stops, got {count}")


class UnknownKey(GradientError):
    def __init__(self, key, valid_keys) -> None:
        self.key = key
        self.valid_keys = tuple(valid_keys)
        super().__init__(f"Unknown gradient key {key!r}; valid keys are {', '.join(self.valid_keys)}")
