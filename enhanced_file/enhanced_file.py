import os
from pathlib import Path

from loguru import logger

from enhanced_file.define import DestinationNotFoundError, MoveError, PathLike
from enhanced_file.file_handler import FileHandler, OsFileHandler
from enhanced_file.result import OperationResult


class EnhancedFile:
    """An absolute filesystem path with checked delete, move and rename.

    The value never changes once built: operations only act on the entry
    the path points to, so after a successful move or rename this object
    still describes the old location.
    """

    __slots__ = ("__path", "__handler")

    def __init__(
        self,
        path: PathLike | None = None,
        child: str | None = None,
        *,
        file_handler: FileHandler | None = None,
    ) -> None:
        """Build a file from a path, or from a parent path and a child name.

        Args:
            path: The path of the file, or of the parent when `child` is
                given. The current working directory when omitted.
            child: Name of the file inside `path`.
            file_handler: Filesystem primitives, copied from `path` when it
                is an `EnhancedFile`, OS ones otherwise.
        """
        if path is None:
            if child is not None:
                raise TypeError("A child name needs a parent path.")
            path = os.getcwd()
        elif not isinstance(path, (str, os.PathLike)):
            raise TypeError(f"Expected a path, got {type(path).__name__}.")

        if file_handler is None:
            if isinstance(path, EnhancedFile):
                file_handler = path.__handler
            else:
                file_handler = OsFileHandler()

        absolute = os.path.abspath(path)
        if child is not None:
            if not isinstance(child, str):
                raise TypeError(f"Expected a child name, got {type(child).__name__}.")
            # Always below the parent, even for a child starting with a separator
            absolute = os.path.abspath(f"{absolute.rstrip(os.sep)}{os.sep}{child}")

        self.__path: str = absolute
        self.__handler: FileHandler = file_handler

    @property
    def path(self) -> str:
        """Absolute path"""
        return self.__path

    @property
    def name(self) -> str:
        return os.path.basename(self.__path)

    @property
    def parent(self) -> "EnhancedFile":
        return EnhancedFile(os.path.dirname(self.__path), file_handler=self.__handler)

    def exists(self) -> bool:
        return self.__handler.exists(self.__path)

    def is_dir(self) -> bool:
        return self.__handler.is_dir(self.__path)

    def to_path(self) -> Path:
        return Path(self.__path)

    def delete(self) -> OperationResult:
        """Delete the file, or the directory if it is empty.

        Returns:
            A falsy result carrying a diagnostic if nothing was deleted.
        """
        try:
            self.__handler.delete(self.__path)
        except (OSError, ValueError) as e:
            message = f"{self} was not deleted."
            logger.error(message)
            logger.debug(f"Delete of {self} failed: {e}")
            return OperationResult.failure(message)

        logger.debug(f"Deleted {self}.")
        return OperationResult.success()

    def move_to(self, folder: PathLike) -> bool:
        """Move this file to a directory different than the parent one.

        Args:
            folder: The destination folder, as a string, a `Path` or an
                `EnhancedFile`.

        Returns:
            `True` once the file has been moved.

        Raises:
            DestinationNotFoundError: `folder` does not exist.
            MoveError: `folder` is not a directory.
            OSError: The atomic move itself failed.
        """
        return self.__move_into(EnhancedFile(folder, file_handler=self.__handler))

    def rename(self, name: str | None) -> OperationResult:
        """Change the name of this file, keeping it in the same parent.

        An existing entry with the new name is never replaced. The check
        and the rename are two separate calls, so a concurrent writer can
        still slip in between them.

        Args:
            name: The new name for this file.

        Returns:
            A falsy result if the name is blank, if the name is already taken
            or if the platform refused the rename.
        """
        if name is None or not name.strip():
            return OperationResult.failure()

        candidate = EnhancedFile(self.parent, name)
        if self.__handler.exists(candidate.path):
            message = f"{candidate} already exist."
            logger.error(message)
            return OperationResult.failure(message)

        try:
            self.__handler.rename(self.__path, candidate.path)
        except (OSError, ValueError) as e:
            reason = getattr(e, "strerror", None) or e
            message = f"{self} was not renamed to {candidate}: {reason}"
            logger.error(message)
            return OperationResult.failure(message)

        logger.debug(f"Renamed {self} to {candidate}.")
        return OperationResult.success()

    def __move_into(self, folder: "EnhancedFile") -> bool:
        if not self.__handler.exists(folder.path):
            raise DestinationNotFoundError(f"{folder} does not exist.")
        if not self.__handler.is_dir(folder.path):
            raise MoveError(f"Can't move {self}")
        if not self.name:
            raise MoveError(f"Can't move the root {self}")

        target = EnhancedFile(folder, self.name)
        self.__handler.move(self.__path, target.path)
        logger.debug(f"Moved {self} to {target}.")
        return True

    def __fspath__(self) -> str:
        return self.__path

    def __str__(self) -> str:
        return self.__path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnhancedFile):
            return NotImplemented
        return self.__path == other.__path

    def __hash__(self) -> int:
        return hash(self.__path)
