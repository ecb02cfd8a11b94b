from .default import value_or_default
from .num_utils import DEFAULT_PRECISION, format_number, format_percentage, is_close_to_int

__all__ = [
    "value_or_default",
    "DEFAULT_PRECISION",
    "format_number",
    "format_percentage",
    "is_close_to_int",
]
