from __future__ import annotations
from typing import Any, Dict
import logging

from .gradient import LinearGradient

logger = logging.getLogger(__name__)

RAW_KEY = "raw"


def debug_dump(gradient: LinearGradient) -> Dict[str, Any]:
    """
    Collect every field of a gradient for inspection.

    The result holds the seven keyed fields plus ``"raw"``, the ``repr`` of
    the gradient. The same dump is logged at DEBUG level.
    """
    dump = gradient.as_dict()
    dump[RAW_KEY] = repr(gradient)
    for key, value in dump.items():
        logger.debug("%s: %s", key, _describe(value))
    return dump


def _describe(value: Any) -> str:
    if isinstance(value, tuple):
        return "(" + ", ".join(str(v) for v in value) + ")"
    return str(value)
