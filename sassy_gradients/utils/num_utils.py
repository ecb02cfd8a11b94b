DEFAULT_PRECISION = 10


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render a number the way CSS expects it: no exponent, no trailing zeros.

    Args:
        value: Number to render
        precision: Maximum number of decimal digits kept

    Returns:
        Shortest decimal string for ``value`` rounded to ``precision`` digits
    """
    if is_close_to_int(value, tol=10 ** -(precision + 1)):
        return str(int(round(value)))
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def format_percentage(value: float, precision: int = DEFAULT_PRECISION) -> str:
    return f"{format_number(value, precision)}%"
