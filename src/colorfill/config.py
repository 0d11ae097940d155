"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_CONFIG_PATH = Path.home() / ".colorfill" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    indent: int = Field(
        default=2, ge=0, le=8, description="JSON indentation for normalized output (0 = compact)"
    )
    backup: bool = Field(
        default=True, description="Write a .bak copy before rewriting a document in place"
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colorfill/config.json).

        Raises:
            DocumentFileInvalidError: If config file has invalid JSON syntax
            DocumentValidationError: If config values fail validation
        """
        from colorfill.document import DocumentPersistence

        if path is None:
            path = DEFAULT_CONFIG_PATH

        return DocumentPersistence.load_or_default(path, cls)
