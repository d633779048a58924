"""Error taxonomy for project generation.

Validation errors (``MissingRequiredField``, ``InvalidPort``, ``MissingAPIKey``)
are raised before anything touches the filesystem.  The I/O errors wrap the
underlying ``OSError`` together with the path involved and are the only ones
that can leave partial artifacts behind.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for every failure surfaced by the generator."""


class MissingRequiredField(GenerationError):
    """Raised when a mandatory input (target path, template, credentials) is empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidPort(GenerationError):
    """Raised when a port value does not fit an unsigned 16-bit integer."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid port for {field}: {value!r} (must be 0-65535)")


class MissingAPIKey(GenerationError):
    """Raised by the command-line boundary when the API key is empty."""

    def __init__(self) -> None:
        super().__init__("Missing API key: the server API key must not be empty")


class TemplateNotFound(GenerationError):
    """Raised when an external application template cannot be read."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not read template file {self.path}: {cause}")


class DirectoryCreationFailed(GenerationError):
    """Raised when the target directory tree cannot be prepared."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not create project directory {self.path}: {cause}")


class FileWriteFailed(GenerationError):
    """Raised when an artifact cannot be written to disk."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not write file {self.path}: {cause}")
