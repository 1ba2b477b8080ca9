from collections.abc import Sequence
from typing import Any, cast

from symreg._storage import MemoryStorage, StorageProtocol
from symreg._types import K, V


def _make_default_store() -> StorageProtocol[K, V]:
    """Create a default StorageProtocol[K, V] instance.

    Construct the concrete MemoryStorage() at runtime and cast it to the
    protocol with generics so the module-level type inference remains
    precise. Localizes the unavoidable cast to one place.
    """
    return cast(StorageProtocol[K, V], MemoryStorage())


def _is_name_sequence(name: Any) -> bool:
    """True for ordered sequences of names; str and bytes-likes excluded."""
    return isinstance(name, Sequence) and not isinstance(
        name, (str, bytes, bytearray)
    )


def _invalid_name_message(name: Any) -> str:
    return (
        "Name must be a str or a sequence of str, "
        f"cannot be a {type(name).__name__}"
    )
