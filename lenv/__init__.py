"""Read and write .lenv files: `KEY: value` lines with duplicate keys preserved."""

__version__ = "0.1.0"

from .environ import DEFAULT_PATH, get_env, load_env, reset_default, set_env
from .errors import KVFileError
from .kv_store import load_kv, parse_line, save_kv
from .store import Store, read_store, write_store

__all__ = [
    "DEFAULT_PATH",
    "KVFileError",
    "Store",
    "get_env",
    "load_env",
    "load_kv",
    "parse_line",
    "read_store",
    "reset_default",
    "save_kv",
    "set_env",
    "write_store",
    "__version__",
]
