"""Color documents and their JSON persistence."""

from .model import ColorDocument
from .persistence import DocumentPersistence

__all__ = ["ColorDocument", "DocumentPersistence"]
