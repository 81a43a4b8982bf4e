"""Errors raised while building a translation table."""

from pathlib import Path
from typing import Optional, Union


class TranslationError(Exception):
    """Base class for translation loading failures."""


class ConfigurationError(TranslationError):
    """Raised when the loader is configured with an unusable root or format."""


class ParseError(TranslationError):
    """Raised when a translation file cannot be decoded in the selected format.

    Attributes:
        path: the offending file
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class FilesystemError(TranslationError):
    """Raised on any other I/O failure while walking or reading files.

    Attributes:
        path: the file or directory that could not be accessed
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
