"""
Search-path config loader.

Every regular file found directly inside the search-path directories is read once and
kept in memory, keyed by base file name. Accessors reinterpret the raw bytes as text,
a URL, a username/password pair, or any JSON/YAML shape.
"""

import json
import logging
import re
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union
from urllib.parse import SplitResult, urlsplit

import yaml
from pydantic import TypeAdapter

from dirconfig.config.search_path import config_path, split_search_path
from dirconfig.constants import Constants
from dirconfig.entity.userinfo import Userinfo
from dirconfig.errors import (
    ConfigUnavailableError,
    DecodeError,
    DirectoryReadError,
    DuplicateNameError,
    FileReadError,
    LoadError,
    NotFoundError,
    SearchPathError,
)
from dirconfig.io.base import FileReader
from dirconfig.io.local import LocalFileReader

logger = logging.getLogger(__name__)

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# RFC 3986 unreserved, sub-delims, pct-encoded and IP-literal brackets
_HOST_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~!$&'()*+,;=%[]:"
)


@dataclass(frozen=True)
class LoadOutcome:
    """Result of the single load: a store or the fatal error, never both."""

    store: Optional[Mapping[str, bytes]] = None
    error: Optional[LoadError] = None


class ConfigLoader:
    """
    Load-once view over the files on a search path.

    path fixes the search path string; when omitted it is resolved from env_var,
    then env_file, then default_path at the first load.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        *,
        env_var: str = Constants.ENV_VAR,
        default_path: Optional[str] = None,
        env_file: Optional[Union[str, Path]] = None,
        reader: Optional[FileReader] = None,
    ):
        self.path = path
        self.env_var = env_var
        self.default_path = default_path
        self.env_file = env_file
        self.reader = reader or LocalFileReader()
        self._lock = threading.Lock()
        self._outcome: Optional[LoadOutcome] = None

    @property
    def loaded(self) -> bool:
        """True once a load has finished, successfully or not."""
        return self._outcome is not None

    def search_path(self) -> str:
        if self.path is not None:
            return self.path
        return config_path(self.env_var, default=self.default_path, env_file=self.env_file)

    def load(self) -> None:
        """
        Scan the search path on the first call; later calls replay the outcome.
        Raises the recorded LoadError (the same object every time) if the scan failed.
        """
        self._store()

    def names(self) -> list[str]:
        return sorted(self._store())

    def _store(self) -> Mapping[str, bytes]:
        outcome = self._outcome
        if outcome is None:
            with self._lock:
                if self._outcome is None:
                    self._outcome = self._scan()
                outcome = self._outcome
        if outcome.error is not None:
            raise outcome.error
        return outcome.store

    def _scan(self) -> LoadOutcome:
        result: dict[str, bytes] = {}
        files: list[str] = []
        try:
            try:
                value = self.search_path()
            except (OSError, ValueError) as e:
                raise SearchPathError(e) from e
            logger.info("%s: %s=%s", Constants.LOG_PREFIX, self.env_var, value)

            for directory in split_search_path(value):
                try:
                    entries = self.reader.list_dir(directory)
                except (OSError, ValueError) as e:
                    raise DirectoryReadError(directory, e) from e

                for entry in entries:
                    if entry.is_dir:
                        logger.debug("%s: skipping directory %s", Constants.LOG_PREFIX, entry.path)
                        continue
                    # Uniqueness is global across the whole search path
                    if entry.name in result:
                        raise DuplicateNameError(entry.name)
                    try:
                        data = self.reader.read_bytes(entry.path)
                    except FileReadError as e:
                        logger.debug("%s: skipping unreadable file: %s", Constants.LOG_PREFIX, e)
                        continue
                    result[entry.name] = data
                    files.append(entry.path)
        except LoadError as e:
            logger.error("%s: load failed: %s", Constants.LOG_PREFIX, e)
            return LoadOutcome(error=e)

        logger.info("%s: files loaded: %s", Constants.LOG_PREFIX, ", ".join(files))
        return LoadOutcome(store=MappingProxyType(result))

    def get_bytes(self, name: str) -> bytes:
        try:
            store = self._store()
        except LoadError as e:
            raise ConfigUnavailableError(name, e) from e
        try:
            return store[name]
        except KeyError:
            raise NotFoundError(name) from None

    def get_string(self, name: str, encoding: str = Constants.DEFAULT_ENCODING) -> str:
        data = self.get_bytes(name)
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(name, str, e) from e

    def get_userinfo(self, name: str) -> Userinfo:
        """
        Parse entry name as a JSON object with a username and an optional password:
            {"username": "string", "password": "string"}
        """
        data = self.get_bytes(name)
        try:
            return Userinfo.model_validate_json(data)
        except ValueError as e:
            raise DecodeError(name, Userinfo, e) from e

    def get_url(self, name: str) -> SplitResult:
        """Parse entry name as a URI reference. Text without a scheme becomes a path-only URI."""
        s = self.get_string(name)
        try:
            return parse_url(s)
        except ValueError as e:
            raise DecodeError(name, SplitResult, e) from e

    def decode_json(self, name: str, shape: Any = None) -> Any:
        """json.loads the entry; validate into shape when one is given."""
        data = self.get_bytes(name)
        try:
            value = json.loads(data)
        except ValueError as e:
            raise DecodeError(name, shape, e) from e
        return _validate(name, value, shape)

    def decode_yaml(self, name: str, shape: Any = None) -> Any:
        """yaml.safe_load the entry; validate into shape when one is given."""
        data = self.get_bytes(name)
        try:
            value = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise DecodeError(name, shape, e) from e
        return _validate(name, value, shape)


def _validate(name: str, value: Any, shape: Any) -> Any:
    if shape is None:
        return value
    try:
        return TypeAdapter(shape).validate_python(value)
    except ValueError as e:
        raise DecodeError(name, shape, e) from e


def parse_url(s: str) -> SplitResult:
    """
    urlsplit with the RFC 3986 checks it leaves out.
    Raises ValueError on control characters, a bad percent-escape, a bad host, port
    or IPv6 literal, or a colon in the first segment of a relative path (it would
    read as a scheme).
    """
    for c in s:
        if ord(c) < 0x20 or ord(c) == 0x7F:
            raise ValueError(f"invalid control character in URL: {s!r}")
    bad = _BAD_ESCAPE.search(s)
    if bad:
        raise ValueError(f"invalid URL escape {s[bad.start():bad.start() + 3]!r}")
    parts = urlsplit(s)
    host = parts.netloc.rpartition("@")[2]
    for c in host:
        # Non-ASCII is left to IDNA
        if c < "\x80" and c not in _HOST_CHARS:
            raise ValueError(f"invalid character {c!r} in host name")
    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if ":" in first_segment:
            raise ValueError(f"first path segment in URL cannot contain colon: {s!r}")
    # port is parsed lazily
    parts.port
    return parts
