from enhanced_file.define import DestinationNotFoundError, EnhancedFileError, MoveError
from enhanced_file.enhanced_file import EnhancedFile
from enhanced_file.file_handler import FileHandler, MockFileSystem, OsFileHandler
from enhanced_file.log import setup_logging
from enhanced_file.result import OperationResult

__all__ = [
    "DestinationNotFoundError",
    "EnhancedFile",
    "EnhancedFileError",
    "FileHandler",
    "MockFileSystem",
    "MoveError",
    "OperationResult",
    "OsFileHandler",
    "setup_logging",
]
