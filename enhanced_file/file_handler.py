import errno
import os
from abc import ABCMeta, abstractmethod
from typing import Any

from enhanced_file.define import ENCODING, PathLike


class FileHandler(metaclass=ABCMeta):
    """Filesystem primitives used by `EnhancedFile`.

    Every method raises an `OSError` subclass on failure, it's up to the
    caller to decide whether that failure is fatal.
    """

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def delete(self, path: PathLike) -> None:
        """Delete a file or an empty directory.

        Args:
            path: The entry to delete.
        """
        raise NotImplementedError()

    @abstractmethod
    def move(self, src: PathLike, dst: PathLike) -> None:
        """Atomically move an entry, replacing `dst` if it is a file.

        Args:
            src: The entry to move.
            dst: The full destination path, not the destination folder.
        """
        raise NotImplementedError()

    @abstractmethod
    def rename(self, src: PathLike, dst: PathLike) -> None:
        """Rename an entry with the platform rename primitive.

        Args:
            src: The entry to rename.
            dst: The new full path.
        """
        raise NotImplementedError()


class OsFileHandler(FileHandler):
    """OS File System"""

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: PathLike) -> bool:
        return os.path.isdir(path)

    def delete(self, path: PathLike) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)

    def move(self, src: PathLike, dst: PathLike) -> None:
        os.replace(src, dst)

    def rename(self, src: PathLike, dst: PathLike) -> None:
        os.rename(src, dst)


class MockFileSystem(FileHandler):
    """In-memory file system keyed by absolute path strings."""

    def __init__(self, cross_device: bool = False) -> None:
        self.files: dict[str, Any] = {}
        self.dirs: set[str] = set()
        self.cross_device = cross_device

    def exists(self, path: PathLike) -> bool:
        key = self.__key(path)
        return key in self.files or key in self.dirs

    def is_dir(self, path: PathLike) -> bool:
        return self.__key(path) in self.dirs

    def delete(self, path: PathLike) -> None:
        key = self.__key(path)
        if key in self.files:
            del self.files[key]
        elif key in self.dirs:
            if self.__children(key):
                raise OSError(errno.ENOTEMPTY, "Directory not empty", key)
            self.dirs.remove(key)
        else:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", key)

    def move(self, src: PathLike, dst: PathLike) -> None:
        self.__relocate(src, dst)

    def rename(self, src: PathLike, dst: PathLike) -> None:
        self.__relocate(src, dst)

    def save(self, path: PathLike, content: Any = b"") -> None:
        if isinstance(content, str):
            content = content.encode(ENCODING)
        self.files[self.__key(path)] = content

    def read(self, path: PathLike) -> Any:
        key = self.__key(path)
        if key in self.files:
            return self.files[key]
        else:
            raise FileNotFoundError(f"File '{path}' not found.")

    def mkdir(self, path: PathLike) -> None:
        self.dirs.add(self.__key(path))

    def clear(self) -> None:
        self.files.clear()
        self.dirs.clear()

    def __relocate(self, src: PathLike, dst: PathLike) -> None:
        src_key = self.__key(src)
        dst_key = self.__key(dst)

        if self.cross_device:
            raise OSError(errno.EXDEV, "Invalid cross-device link", src_key)
        if not self.exists(src_key):
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", src_key)
        if dst_key in self.dirs:
            raise IsADirectoryError(errno.EISDIR, "Is a directory", dst_key)
        if src_key in self.dirs and dst_key in self.files:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", dst_key)

        if src_key in self.files:
            self.files[dst_key] = self.files.pop(src_key)
            return

        # Directories carry their whole subtree along
        for child in self.__children(src_key):
            new_child = dst_key + child[len(src_key) :]
            if child in self.files:
                self.files[new_child] = self.files.pop(child)
            else:
                self.dirs.remove(child)
                self.dirs.add(new_child)
        self.dirs.remove(src_key)
        self.dirs.add(dst_key)

    def __children(self, key: str) -> list[str]:
        prefix = key.rstrip(os.sep) + os.sep
        return [p for p in (*self.files, *self.dirs) if p.startswith(prefix)]

    def __key(self, path: PathLike) -> str:
        return os.fspath(path)
