"""Document-related exceptions.

This module defines exceptions for JSON documents holding a color field:
- DocumentError: Base class for document errors
- DocumentFileInvalidError: Document has invalid JSON syntax or is empty
- DocumentValidationError: Document parses but its values fail validation
"""

from typing import Any, Optional

from .base import ColorFillError


class DocumentError(ColorFillError):
    """Document is invalid or cannot be loaded."""
    pass


class DocumentFileInvalidError(DocumentError):
    """Document has invalid JSON syntax."""

    def __init__(self, source: str, parse_error: str, recovery_hint: Optional[str] = None):
        """
        Initialize document invalid error.

        Args:
            source: Path (or label) of the invalid document
            parse_error: The parsing error message
            recovery_hint: Overrides the generic JSON syntax hint
        """
        user_msg = f"Document {source} has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets"

        if "empty" in parse_error.lower():
            user_msg = f"Document {source} is empty"
        elif "utf-8" in parse_error.lower():
            user_msg = f"Document {source} is not valid UTF-8 text"
            recovery = "Re-save the file with UTF-8 encoding"

        if recovery_hint:
            recovery = recovery_hint

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {source}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.source = source
        self.parse_error = parse_error


class DocumentValidationError(DocumentError):
    """Document values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, source: Optional[str] = None):
        """
        Initialize document validation error.

        Args:
            field: The field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            source: Path (or label) of the document (optional)
        """
        user_msg = f"Invalid value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your document"
        if source:
            recovery += f"\nDocument: {source}"
        if field == "color":
            recovery += '\nAccepted forms: "rainbow", "#rrggbb", "#rgb", or an array of hex colors'

        super().__init__(
            user_message=user_msg,
            technical_message=f"Validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.source = source
