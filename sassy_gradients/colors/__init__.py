"""
Color tokens
============

Gradient colors are stored as the exact token emitted into CSS. Strings pass
through untouched apart from trimming; RGB(A) tuples and arrays are written
as ``rgb()``/``rgba()`` calls.

>>> from sassy_gradients.colors import to_css_color
>>> to_css_color("  red ")
'red'
>>> to_css_color((255, 128, 0))
'rgb(255, 128, 0)'
>>> to_css_color((0, 0, 0, 0.5))
'rgba(0, 0, 0, 0.5)'
"""
from .css_color import to_css_color

__all__ = ["to_css_color"]
