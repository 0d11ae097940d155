"""Hex color token decoding."""

import logging

from colorfill.exceptions import ColorFormatError, FormatReason

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_hex(token: str) -> tuple[int, int, int]:
    """
    Decode a hex color token into 8-bit (red, green, blue) components.

    The token may carry one leading ``#``. Six digits are read as three
    pairs; three digits are short form, where each digit stands for a
    doubled pair (``f`` is ``ff``, not ``f * 16``).

    Args:
        token: Hex token such as ``"#ff8800"``, ``"#f80"`` or ``"FF8800"``

    Returns:
        tuple[int, int, int]: Components in the 0-255 range

    Raises:
        ColorFormatError: If the digit count is not 3 or 6, or a character
            is not a hex digit

    Example:
        >>> decode_hex("#f80")
        (255, 136, 0)
    """
    digits = token[1:] if token.startswith("#") else token
    logger.debug(f"Decoding hex token {token!r}")

    if len(digits) not in (3, 6):
        raise ColorFormatError(
            token,
            FormatReason.INVALID_LENGTH,
            f"expected 3 or 6 hex digits, got {len(digits)}",
        )

    for position, char in enumerate(digits):
        if char not in HEX_DIGITS:
            raise ColorFormatError(
                token,
                FormatReason.INVALID_DIGIT,
                f"{char!r} at position {position} is not a hex digit",
            )

    if len(digits) == 3:
        pairs = [char * 2 for char in digits]
    else:
        pairs = [digits[i:i + 2] for i in range(0, 6, 2)]

    red, green, blue = (int(pair, 16) for pair in pairs)
    return red, green, blue
