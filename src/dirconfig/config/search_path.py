"""Resolve the config search path from the environment, a dotenv file, or a default."""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values, find_dotenv

from dirconfig.constants import Constants


def config_path(
    env_var: str = Constants.ENV_VAR,
    default: Optional[str] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> str:
    """
    Return the search path string.
    Precedence: process environment (even when set to ""), then env_file, then default.
    default falls back to Constants.DEFAULT_PATH, read at call time so applications can assign it.
    """
    value = os.environ.get(env_var)
    if value is not None:
        return value
    if env_file:
        value = dotenv_values(env_file).get(env_var)
        if value is not None:
            return value
    return Constants.DEFAULT_PATH if default is None else default


def split_search_path(value: str) -> list[str]:
    """Split on os.pathsep. Empty input means no directories; empty entries are kept."""
    if not value:
        return []
    return value.split(os.pathsep)


def default_env_file() -> Optional[str]:
    """Nearest .env from the working directory upward, or None."""
    return find_dotenv(usecwd=True) or None
