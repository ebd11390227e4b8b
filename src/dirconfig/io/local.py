"""Local filesystem implementation of FileReader."""

import os

from dirconfig.errors import FileReadError
from dirconfig.io.base import DirEntry


class LocalFileReader:
    """Read from local filesystem."""

    def list_dir(self, path: str) -> list[DirEntry]:
        with os.scandir(path) as it:
            entries = [DirEntry(e.name, e.path, _is_dir(e)) for e in it]
        entries.sort(key=lambda e: e.name)
        return entries

    def read_bytes(self, path: str) -> bytes:
        # FIFOs and device nodes would block or never end
        if not os.path.isfile(path):
            raise FileReadError(path, OSError(f"not a regular file: {path}"))
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise FileReadError(path, e) from e


def _is_dir(entry: os.DirEntry) -> bool:
    # Not following symlinks: a link to a directory is listed as a file and
    # skipped when its read fails
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
