from .base import AbstractStorage
from .memory import MemoryStorage
from .protocol import StorageProtocol

__all__ = ["AbstractStorage", "MemoryStorage", "StorageProtocol"]
