from typing import Any, Dict, Generic, Iterator

from symreg._storage.base import AbstractStorage
from symreg._types import K, V


class MemoryStorage(AbstractStorage[K, V], Generic[K, V]):
    """A simple in-memory storage implementation using a dictionary."""

    def __init__(self) -> None:
        self._store: Dict[K, V] = {}

    def set(self, key: K, value: V) -> None:
        self._store[key] = value

    def get(self, key: K, default: Any = None) -> Any:
        return self._store.get(key, default)

    def pop(self, key: K, default: Any = None) -> Any:
        return self._store.pop(key, default)

    def clear(self) -> None:
        self._store.clear()

    def to_dict(self) -> Dict[K, V]:
        return dict(self._store)

    def keys(self) -> Iterator[K]:
        return iter(self._store.keys())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._store
        except TypeError:
            # unhashable keys can never have been stored
            return False
