"""
Process-wide config access. The module-level functions share one lazily created
ConfigLoader; construct a ConfigLoader directly to pass an explicit handle instead.
"""

import threading
from typing import Any, Optional
from urllib.parse import SplitResult

from dirconfig.config.loader import ConfigLoader, LoadOutcome, parse_url
from dirconfig.config.search_path import config_path, default_env_file, split_search_path
from dirconfig.entity.userinfo import Userinfo

_default_loader: Optional[ConfigLoader] = None
_default_lock = threading.Lock()


def default_loader() -> ConfigLoader:
    """Create the shared loader on first use. Nothing is read until an accessor runs."""
    global _default_loader
    if _default_loader is None:
        with _default_lock:
            if _default_loader is None:
                _default_loader = ConfigLoader(env_file=default_env_file())
    return _default_loader


def load() -> None:
    default_loader().load()


def names() -> list[str]:
    return default_loader().names()


def get_bytes(name: str) -> bytes:
    return default_loader().get_bytes(name)


def get_string(name: str) -> str:
    return default_loader().get_string(name)


def get_userinfo(name: str) -> Userinfo:
    return default_loader().get_userinfo(name)


def get_url(name: str) -> SplitResult:
    return default_loader().get_url(name)


def decode_json(name: str, shape: Any = None) -> Any:
    return default_loader().decode_json(name, shape)


def decode_yaml(name: str, shape: Any = None) -> Any:
    return default_loader().decode_yaml(name, shape)


__all__ = [
    "ConfigLoader",
    "LoadOutcome",
    "config_path",
    "decode_json",
    "decode_yaml",
    "default_loader",
    "get_bytes",
    "get_string",
    "get_url",
    "get_userinfo",
    "load",
    "names",
    "parse_url",
    "split_search_path",
]
