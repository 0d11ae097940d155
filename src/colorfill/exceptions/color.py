"""Color value exceptions.

This module defines the errors raised while decoding a JSON color value:
- ColorValueError: Base class for color value errors
- ColorFormatError: A hex token is malformed (wrong length, bad digit, not a string)
- ColorTypeError: The JSON value is not a string or an array
"""

from enum import Enum
from typing import Optional

from .base import ColorFillError


class FormatReason(str, Enum):
    """Why a hex token was rejected."""

    INVALID_LENGTH = "invalid_length"
    INVALID_DIGIT = "invalid_digit"
    NOT_A_STRING = "not_a_string"


class ColorValueError(ColorFillError):
    """A JSON value could not be decoded into a color value."""
    pass


class ColorFormatError(ColorValueError, ValueError):
    """A hex color token failed validation."""

    def __init__(
        self,
        token: object,
        reason: FormatReason,
        detail: str,
        index: Optional[int] = None,
    ):
        """
        Initialize color format error.

        Args:
            token: The offending token (the raw element for non-string array items)
            reason: Category of the failure
            detail: What exactly is wrong with the token
            index: Position of the token inside an array, if any
        """
        location = f" at index {index}" if index is not None else ""
        super().__init__(
            user_message=f"Invalid color {token!r}{location}: {detail}",
            technical_message=(
                f"Hex decode failed{location} for {token!r} "
                f"[reason={reason.value}]: {detail}"
            ),
            recoverable=True,
            recovery_hint=(
                "Use \"rainbow\", a hex color like \"#ff0000\" or \"#f00\", "
                "or an array of hex colors"
            ),
        )
        self.token = token
        self.reason = reason
        self.detail = detail
        self.index = index


class ColorTypeError(ColorValueError, TypeError):
    """The JSON value kind is not one of the accepted shapes."""

    def __init__(self, kind: str):
        """
        Initialize color type error.

        Args:
            kind: JSON kind of the rejected value (e.g. "number", "object")
        """
        super().__init__(
            user_message=f"Expected a color string or an array of colors, got {kind}",
            technical_message=f"Unsupported JSON kind for color value: {kind}",
            recoverable=True,
            recovery_hint="Color values must be a JSON string or a JSON array of strings",
        )
        self.kind = kind
