"""
Load-once configuration from a directory search path.

Subpackages:
  config   - ConfigLoader and the process-wide accessors (get_bytes, get_string, get_url, ...)
  io       - FileReader; add archive/secret-store sources by implementing it
  entity   - Userinfo and other typed shapes returned by accessors

Set CONFIG_PATH to a list of directories (os.pathsep separated). Each file found directly
inside them is available by its base name:

    from dirconfig import config
    db = config.get_url("db_url")
"""

from dirconfig import config
from dirconfig.config import ConfigLoader
from dirconfig.constants import Constants
from dirconfig.entity import Userinfo
from dirconfig.errors import (
    ConfigError,
    ConfigUnavailableError,
    DecodeError,
    DirectoryReadError,
    DuplicateNameError,
    FileReadError,
    LoadError,
    NotFoundError,
    SearchPathError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "ConfigUnavailableError",
    "Constants",
    "DecodeError",
    "DirectoryReadError",
    "DuplicateNameError",
    "FileReadError",
    "LoadError",
    "NotFoundError",
    "SearchPathError",
    "Userinfo",
    "config",
]
