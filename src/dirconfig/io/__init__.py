"""Config source abstractions. Extend by implementing the FileReader protocol."""

from dirconfig.io.base import DirEntry, FileReader
from dirconfig.io.local import LocalFileReader

__all__ = ["DirEntry", "FileReader", "LocalFileReader"]
