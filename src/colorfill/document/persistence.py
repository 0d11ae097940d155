"""Loading and saving color documents.

Design Philosophy:
    - Stateless utility functions (no internal state)
    - Centralized error handling with custom exceptions
    - Thread-safe (no shared mutable state)

Safety Features:
    - Automatic .bak backups before overwriting files
    - Atomic writes using temp file + rename
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from colorfill.exceptions import DocumentFileInvalidError, wrap_pydantic_error

from .model import ColorDocument

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class DocumentPersistence:
    """
    Stateless load/save operations for pydantic models stored as JSON.

    Defaults to ColorDocument; any other BaseModel (e.g. AppConfig) can be
    passed as ``model_type``.

    Example Usage:
        ```python
        document = DocumentPersistence.load(Path("fill.json"))
        DocumentPersistence.save(document, Path("fill.json"))
        ```
    """

    @staticmethod
    def loads(text: str, source: str = "<string>", model_type: type[T] = ColorDocument) -> T:
        """
        Validate a model from JSON text.

        Args:
            text: JSON text
            source: Label used in error messages (usually the file path)
            model_type: The model class to validate against

        Raises:
            DocumentFileInvalidError: If the text is empty or not valid JSON
            DocumentValidationError: If the JSON content fails validation
        """
        if not text or not text.strip():
            raise DocumentFileInvalidError(
                source, "Document is empty", recovery_hint=_empty_document_hint(model_type)
            )

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {source}: {e}")
            raise wrap_pydantic_error(e, source) from e

        logger.debug(f"Loaded {model_type.__name__} from {source}")
        return model

    @staticmethod
    def load(path: Path, model_type: type[T] = ColorDocument) -> T:
        """
        Load and validate a model from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            DocumentFileInvalidError: If the JSON syntax is invalid
            DocumentValidationError: If the JSON content fails validation
        """
        return DocumentPersistence.loads(
            DocumentPersistence.read_text(path), source=str(path), model_type=model_type
        )

    @staticmethod
    def read_text(path: Path) -> str:
        """
        Read a document file as UTF-8 text.

        Raises:
            FileNotFoundError: If the file doesn't exist
            DocumentFileInvalidError: If the file is not valid UTF-8
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentFileInvalidError(str(path), f"not valid UTF-8: {e}") from e

    @staticmethod
    def load_or_default(path: Path, model_type: type[T]) -> T:
        """
        Load a model from file, or return a default instance if the file is missing.

        Invalid files are never replaced with defaults; their errors propagate.
        """
        try:
            return DocumentPersistence.load(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} not found, using default {model_type.__name__}")
            return model_type()

    @staticmethod
    def dumps(data: BaseModel, indent: int = 2) -> str:
        """Serialize a model to JSON text, in canonical color form."""
        return data.model_dump_json(indent=indent if indent > 0 else None)

    @staticmethod
    def save(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Save a model to a JSON file with optional backup and atomic write.

        Args:
            data: The model instance to save
            path: Destination file
            indent: JSON indentation level (0 for compact output)
            create_parents: Create parent directories if they don't exist
            backup: Copy an existing file to ``<name>.bak`` before overwriting

        Raises:
            OSError: If the file cannot be written
        """
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            backup_path = path.with_suffix(path.suffix + ".bak")
            shutil.copy2(path, backup_path)
            logger.debug(f"Created backup: {backup_path}")

        json_content = DocumentPersistence.dumps(data, indent=indent)

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(json_content + "\n", encoding="utf-8")
            temp_path.replace(path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info(f"Saved {type(data).__name__} to {path}")


def _empty_document_hint(model_type: type[BaseModel]) -> str:
    if issubclass(model_type, ColorDocument):
        return 'Add a JSON object such as {"color": "#ff0000"}'
    example = model_type().model_dump_json() if _has_defaults(model_type) else "{}"
    return f"Add a JSON object with {model_type.__name__} settings, such as {example}"


def _has_defaults(model_type: type[BaseModel]) -> bool:
    return all(not field.is_required() for field in model_type.model_fields.values())
