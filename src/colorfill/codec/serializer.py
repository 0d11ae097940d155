"""Encoding of ColorValue variants back into JSON values."""

from colorfill.models import ColorValue, Many, Rainbow, Single

from .parser import RAINBOW_LITERAL


def serialize_color_value(value: ColorValue) -> str | list[str]:
    """
    Encode a ColorValue into the JSON shape it was parsed from.

    Colors are always written in canonical ``#rrggbb`` lowercase form,
    so short input like ``"#F00"`` comes back as ``"#ff0000"``. A Many
    stays an array whatever its length.

    Raises:
        TypeError: If ``value`` is not a ColorValue variant
    """
    if isinstance(value, Rainbow):
        return RAINBOW_LITERAL
    if isinstance(value, Single):
        return value.color.to_hex()
    if isinstance(value, Many):
        return [color.to_hex() for color in value.colors]
    raise TypeError(f"Not a color value: {type(value).__name__}")
