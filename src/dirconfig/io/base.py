"""Protocols for reading config sources. Implement these to read from archives, secret stores, etc."""

from typing import NamedTuple, Protocol


class DirEntry(NamedTuple):
    """One direct child of a search-path directory."""

    name: str
    path: str
    is_dir: bool


class FileReader(Protocol):
    """List directories and read whole files from a source."""

    def list_dir(self, path: str) -> list[DirEntry]:
        """
        Return the direct children of path, sorted by name.
        Raise OSError when the directory cannot be listed.
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """Return the full content of path. Raise FileReadError when it cannot be read."""
        ...
