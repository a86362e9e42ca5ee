from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Union

from .kv_store import load_kv, save_kv


class Store:
    """Duplicate-aware key-value store bound to a .lenv file.

    Every value added for a key is kept in order. `get` returns the latest
    one, `get_all` returns them all. Nothing touches the disk until `read`
    or `write` is called.
    """

    path : Path
    encoding : str

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._data: Dict[str, List[str]] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Store({str(self.path)!r}, keys={len(self._data)})"

    ######## File I/O ########

    def read(self) -> "Store":
        # content is only replaced once load_kv succeeds
        self._data = load_kv(self.path, self.encoding)
        return self

    def write(self) -> "Store":
        save_kv(self.path, self._data, self.encoding)
        return self

    ######## Accessors ########

    def get(self, key: str) -> Optional[str]:
        values = self._data.get(key)
        if not values:
            return None
        return values[-1]

    def get_all(self, key: str) -> List[str]:
        return list(self._data.get(key, []))

    def has(self, key: str) -> bool:
        return bool(self._data.get(key))

    def keys(self) -> List[str]:
        return list(self._data)

    def to_map(self) -> Dict[str, str]:
        return {key: values[-1] for key, values in self._data.items() if values}

    ######## Mutators ########

    def set(self, key: str, value: str) -> "Store":
        self._data[key] = [value]
        return self

    def add(self, key: str, value: str) -> "Store":
        self._data.setdefault(key, []).append(value)
        return self

    def delete(self, key: str) -> "Store":
        self._data.pop(key, None)
        return self


################# Helper functions #################

def read_store(path: Union[str, Path]) -> Store:
    return Store(path).read()


def write_store(path: Union[str, Path], data: Mapping[str, str]) -> Store:
    store = Store(path)
    for key, value in data.items():
        store.set(key, value)
    return store.write()
