"""JSON color value codec."""

from .hex import decode_hex
from .parser import RAINBOW_LITERAL, json_kind, parse_color_value
from .serializer import serialize_color_value

__all__ = [
    "RAINBOW_LITERAL",
    "decode_hex",
    "json_kind",
    "parse_color_value",
    "serialize_color_value",
]
