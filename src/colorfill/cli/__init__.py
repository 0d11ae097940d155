"""Command line interface for colorfill."""

from .main import cli

__all__ = ["cli"]
