"""
Centralized error handling utilities.

Low-level failures (JSON syntax, pydantic validation) are translated here
into ColorFillError subclasses that carry a user message, a technical
message for logs and a recovery hint.

## Handling Patterns

| Pattern | Code |
|---------|------|
| Convert a pydantic failure | `raise wrap_pydantic_error(e, str(path)) from e` |
| Show an error to the user | `message, hint = format_error_for_display(e)` |
| Validate many files, collect errors | `collector = collect_errors("check"); with collector.try_operation(name): ...` |
| Critical section with auto-logging | `with ErrorContext("normalize doc.json"): ...` |
"""

import logging
from typing import Optional

from .base import ColorFillError
from .document import DocumentFileInvalidError, DocumentValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("load palette.json", logger_instance=logger):
            document = DocumentPersistence.load(path)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, ColorFillError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def wrap_pydantic_error(error: Exception, source: str) -> ColorFillError:
    """
    Convert Pydantic validation errors to colorfill exceptions.

    Args:
        error: The Pydantic ValidationError
        source: Path (or label) of the document that failed validation

    Returns:
        A DocumentError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if isinstance(error, ValidationError):
        errors = error.errors()

        # Syntax errors come back as a single entry of type json_invalid
        for err in errors:
            if err.get("type") == "json_invalid":
                parse_error = err.get("msg", "invalid JSON")
                prefix = "Invalid JSON: "
                if parse_error.startswith(prefix):
                    parse_error = parse_error[len(prefix):]
                return DocumentFileInvalidError(source, parse_error)

        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ())) or "document"
            return DocumentValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=_strip_value_error_prefix(first_error.get("msg", "validation failed")),
                source=source,
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ())) or "document"
                msg = _strip_value_error_prefix(err.get("msg", "validation failed"))
                error_lines.append(f"  - {field}: {msg}")

            return DocumentValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                source=source,
            )

    return DocumentValidationError(field="unknown", value=None, error_msg=error_msg, source=source)


def _strip_value_error_prefix(msg: str) -> str:
    # Pydantic prefixes messages of ValueErrors raised in validators
    prefix = "Value error, "
    return msg[len(prefix):] if msg.startswith(prefix) else msg


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ColorFillError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("check documents")

        for path in paths:
            with collector.try_operation(str(path)):
                DocumentPersistence.load(path)

        if collector.has_errors:
            print(collector.get_summary())
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Only ColorFillError and OSError are collected; anything else
        propagates.
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """Get a multi-line summary of collected errors."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed {self.error_count} of {self.error_count + self.success_count} operations:\n"
        for sub_op, error in self.errors:
            if isinstance(error, ColorFillError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not isinstance(exc_val, (ColorFillError, OSError)):
                return False

            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val}")
            self.collector.errors.append((self.sub_operation, exc_val))
            return True
