import os
from typing import TypeAlias

PathLike: TypeAlias = str | os.PathLike[str]

ENCODING = "utf-8"

LOG_FILENAME = "enhanced_file.log"
LOG_LEVEL_ENV = "ENHANCED_FILE_LOG_LEVEL"
LOG_DIR_ENV = "ENHANCED_FILE_LOG_DIR"
DEFAULT_LOG_LEVEL = "INFO"
LOG_ROTATION = "10 MB"


class EnhancedFileError(Exception):
    """Base class of the errors raised by enhanced file operations."""


class DestinationNotFoundError(EnhancedFileError, FileNotFoundError):
    """The destination folder of a move does not exist."""


class MoveError(EnhancedFileError, OSError):
    """The entry can't be moved to the requested destination."""
