"""CLI commands for colorfill."""

from .check import check
from .normalize import normalize
from .parse import parse

__all__ = ["check", "normalize", "parse"]
