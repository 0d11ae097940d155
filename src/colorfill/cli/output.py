"""Shared helpers for CLI input and error output."""

import logging
import sys
from pathlib import Path

import click

from colorfill.document import DocumentPersistence
from colorfill.exceptions import DocumentFileInvalidError, format_error_for_display
from colorfill.models import ColorValue, Many, Rainbow, Single

logger = logging.getLogger(__name__)


def read_source(path: Path) -> tuple[str, str]:
    """
    Read JSON text from a file, or from stdin when the path is '-'.

    Returns:
        Tuple of (text, source label for error messages)
    """
    if str(path) == "-":
        try:
            return sys.stdin.read(), "<stdin>"
        except UnicodeDecodeError as e:
            raise DocumentFileInvalidError("<stdin>", f"not valid UTF-8: {e}") from e
    return DocumentPersistence.read_text(path), str(path)


def describe_color_value(value: ColorValue) -> list[str]:
    """Render a decoded color value as human-readable lines."""
    if isinstance(value, Rainbow):
        return ["rainbow"]
    if isinstance(value, Single):
        return [f"single {value.color.to_hex()} {value.color.to_rgb_tuple()}"]
    if isinstance(value, Many):
        lines = [f"many ({len(value.colors)} colors)"]
        for i, color in enumerate(value.colors):
            lines.append(f"  [{i}] {color.to_hex()} {color.to_rgb_tuple()}")
        return lines
    raise TypeError(f"Not a color value: {type(value).__name__}")


def fail(error: Exception) -> None:
    """Show an error without a traceback and exit with status 1."""
    logger.debug("Command failed", exc_info=error)

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    sys.exit(1)
