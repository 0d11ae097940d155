"""Data models for decoded color values."""

from .color import Color
from .fill import ColorValue, ColorValueAdapter, JsonColorValue, Many, Rainbow, Single

__all__ = [
    "Color",
    # Variants
    "ColorValue",
    "ColorValueAdapter",
    "JsonColorValue",
    "Many",
    "Rainbow",
    "Single",
]
