"""Error types raised by the config loader and its accessors."""

from typing import Any


class ConfigError(Exception):
    """Base class for every error raised by dirconfig."""


class LoadError(ConfigError):
    """Fatal error recorded by a load. Replayed to every later caller."""


class DirectoryReadError(LoadError):
    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"config: error reading directory {path!r}: {cause}")


class SearchPathError(LoadError):
    """The search path itself could not be resolved (unreadable or undecodable .env)."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"config: error resolving search path: {cause}")


class DuplicateNameError(LoadError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"config: multiple config entries with name: {name!r}")


class FileReadError(ConfigError, OSError):
    """A single file could not be read. The loader skips the file."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"config: error reading file {path!r}: {cause}")


class ConfigUnavailableError(ConfigError):
    """An accessor was called after the load failed."""

    def __init__(self, name: str, cause: LoadError):
        self.name = name
        self.cause = cause
        super().__init__(
            f"config: failed to get value {name!r} because there was a load error: {cause}"
        )


class NotFoundError(ConfigError, LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"config: no config entry with name: {name!r}")


class DecodeError(ConfigError, ValueError):
    """Content of an entry could not be converted into the requested shape."""

    def __init__(self, name: str, target: Any, cause: BaseException):
        self.name = name
        self.target = target
        self.cause = cause
        super().__init__(
            f"config: failed to unmarshal {name} into {describe_target(target)}: {cause}"
        )


def describe_target(target: Any) -> str:
    if target is None:
        return "any"
    if isinstance(target, str):
        return target
    if isinstance(target, type):
        return target.__qualname__
    return repr(target)
