"""Load .lenv files into the process environment, dotenv style."""
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from .store import Store, read_store

LOGGER = logging.getLogger("lenv")

DEFAULT_PATH = ".lenv"

_default_store: Optional[Store] = None


def _is_default(path: Union[str, Path]) -> bool:
    return Path(path) == Path(DEFAULT_PATH)


def load_env(path: Union[str, Path] = DEFAULT_PATH, override: bool = False) -> Dict[str, str]:
    """Copy the latest value of every key in `path` into os.environ.

    Variables that are already set are left alone unless `override` is true.
    Returns the parsed mapping; a missing file gives an empty one.
    """
    global _default_store

    if not Path(path).exists():
        return {}

    store = read_store(path)
    parsed = store.to_map()

    for key, value in parsed.items():
        if key in os.environ and not override:
            LOGGER.debug("%s is already set, keeping the existing value", key)
            continue
        os.environ[key] = value

    _default_store = store
    return parsed


def get_env(key: str, path: Union[str, Path, None] = None) -> Optional[str]:
    """Latest value of `key`.

    Lookup order: the file at `path` when given; otherwise the default store,
    loading DEFAULT_PATH into it first if nothing is loaded and the file
    exists; os.environ only when there is no default store at all.
    """
    global _default_store

    if path is not None:
        return read_store(path).get(key)

    if _default_store is None and Path(DEFAULT_PATH).exists():
        _default_store = read_store(DEFAULT_PATH)

    if _default_store is None:
        return os.environ.get(key)
    return _default_store.get(key)


def set_env(key: str, value: str, path: Union[str, Path] = DEFAULT_PATH) -> Store:
    """Persist `key` to `path` and export it to os.environ."""
    global _default_store

    store = read_store(path)
    store.set(key, value).write()

    if _is_default(path):
        _default_store = store

    os.environ[key] = value
    return store


def reset_default() -> None:
    global _default_store
    _default_store = None
