from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterator

from symreg._types import K, V


class AbstractStorage(ABC, Generic[K, V]):
    """Abstract base class for storage implementations."""

    @abstractmethod
    def set(self, key: K, value: V) -> None:
        pass

    @abstractmethod
    def get(self, key: K, default: Any = None) -> Any:
        pass

    @abstractmethod
    def pop(self, key: K, default: Any = None) -> Any:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def to_dict(self) -> Dict[K, V]:
        pass

    @abstractmethod
    def keys(self) -> Iterator[K]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        pass
