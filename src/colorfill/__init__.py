"""colorfill: decode and re-encode JSON color values."""

__version__ = "0.1.0"

from .codec import decode_hex, parse_color_value, serialize_color_value
from .document import ColorDocument, DocumentPersistence
from .models import Color, ColorValue, Many, Rainbow, Single

__all__ = [
    "Color",
    "ColorDocument",
    "ColorValue",
    "DocumentPersistence",
    "Many",
    "Rainbow",
    "Single",
    "decode_hex",
    "parse_color_value",
    "serialize_color_value",
]
