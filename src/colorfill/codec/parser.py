"""Decoding of JSON color values into typed ColorValue variants."""

import logging
from typing import Any

from colorfill.exceptions import ColorFormatError, ColorTypeError, FormatReason
from colorfill.models import Color, ColorValue, Many, Rainbow, Single

from .hex import decode_hex

logger = logging.getLogger(__name__)

RAINBOW_LITERAL = "rainbow"


def json_kind(value: Any) -> str:
    """
    Name the JSON kind of a decoded JSON value.

    bool is checked before int since it is an int subclass.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def parse_color_value(value: Any) -> ColorValue:
    """
    Classify a JSON value and decode it into a ColorValue.

    Accepted shapes:
        - ``"rainbow"`` (exact, case-sensitive) -> Rainbow
        - a hex token (``"#rrggbb"`` or ``"#rgb"``) -> Single
        - an array of hex tokens -> Many (empty arrays included)

    Args:
        value: A value as produced by ``json.loads``

    Returns:
        The decoded variant

    Raises:
        ColorFormatError: If a token is malformed. For arrays, ``index``
            names the failing element and the element error is the cause.
        ColorTypeError: If the value is neither a string nor an array
    """
    kind = json_kind(value)

    if kind == "string":
        if value == RAINBOW_LITERAL:
            logger.debug("Parsed rainbow literal")
            return Rainbow()
        return Single(color=_color_from_token(value))

    if kind == "array":
        colors = []
        for index, element in enumerate(value):
            if not isinstance(element, str):
                raise ColorFormatError(
                    element,
                    FormatReason.NOT_A_STRING,
                    f"expected a hex color string, got {json_kind(element)}",
                    index=index,
                )
            try:
                colors.append(_color_from_token(element))
            except ColorFormatError as e:
                raise ColorFormatError(element, e.reason, e.detail, index=index) from e

        logger.debug(f"Parsed array of {len(colors)} colors")
        return Many(colors=tuple(colors))

    raise ColorTypeError(kind)


def _color_from_token(token: str) -> Color:
    red, green, blue = decode_hex(token)
    return Color(r=red, g=green, b=blue)
