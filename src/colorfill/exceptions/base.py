"""Root of the colorfill exception tree.

Every error raised by the package derives from ColorFillError and carries
two renderings of the same failure: a short `user_message` for the CLI and
a `technical_message` with the raw details for log files. Errors caused by
bad input are `recoverable` and usually carry a `recovery_hint`.
"""

from typing import Optional


class ColorFillError(Exception):
    """Base class for colorfill errors."""

    def __init__(
        self,
        user_message: str,
        *,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.user_message!r})"

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
