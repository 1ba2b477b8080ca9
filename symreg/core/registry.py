import logging
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    MutableMapping,
    Optional,
    Sequence,
    Union,
)

from symreg._storage import StorageProtocol
from symreg._types import NOT_FOUND, K, Names, V
from symreg.core.utils import (
    _invalid_name_message,
    _is_name_sequence,
    _make_default_store,
)
from symreg.events import REGISTER, UNREGISTER, EventEmitter, Listener
from symreg.exceptions import InvalidArgumentError, NotRegisteredError

logger = logging.getLogger(__name__)
_package_logger = logging.getLogger("symreg")


class Registry(MutableMapping[K, V], Generic[K, V]):
    """
    Registry associating arbitrary data with symbolic names.

    Every mutation is announced synchronously through an owned EventEmitter:
    "register" with (name, data) and "unregister" with (name, removed_data).
    Registering an existing name overwrites it; unregistering a missing name
    does nothing.

    Raises:
        InvalidArgumentError: If a name is neither a string nor a sequence
            of names.
        NotRegisteredError: On strict mapping access (`registry[name]`,
            `del registry[name]`) to a name that is not registered.

    Examples:
        >>> registry = Registry[str, str]()
        >>> seen = []
        >>> _ = registry.on("register", lambda name, data: seen.append(name))
        >>> registry.register(["green", "blue"], "#00FF00")
        >>> seen
        ['green', 'blue']
        >>> registry.lookup("blue")
        '#00FF00'
        >>> registry.lookup("red")
        NOT_FOUND
    """

    def __init__(
        self,
        *,
        log_level: Optional[int] = None,
        store: Optional[StorageProtocol[K, V]] = None,
        emitter: Optional[EventEmitter] = None,
    ) -> None:
        """
        Initialize the Registry.

        Args:
            log_level: Logging level for the symreg package logger. Left
                untouched when None.
            store: An optional storage backend implementing StorageProtocol.
            emitter: An optional EventEmitter to publish events on. Sharing
                one between registries shares their observers.

        Raises:
            TypeError: If store does not implement StorageProtocol or
                emitter is not an EventEmitter.
            ValueError: If log_level is not a valid logging level.

        Example:
            registry = Registry[str, int](log_level=logging.DEBUG)
        """
        if log_level is not None and not (50 >= log_level >= 0):
            raise ValueError("log_level must be a valid logging level between 0 and 50")

        if store is not None and not isinstance(store, StorageProtocol):
            raise TypeError("store must implement StorageProtocol")

        if emitter is not None and not isinstance(emitter, EventEmitter):
            raise TypeError("emitter must be an EventEmitter")

        self._store: StorageProtocol[K, V] = (
            store if store is not None else _make_default_store()
        )
        self._emitter = emitter if emitter is not None else EventEmitter()
        if log_level is not None:
            _package_logger.setLevel(log_level)

    @property
    def emitter(self) -> EventEmitter:
        return self._emitter

    def register(self, name: Names, data: V) -> None:
        """
        Associate one or more symbolic names with some data.

        Any existing entry with the same name is overwritten. A sequence of
        names is registered in order, each to the same `data`, with one
        "register" event per name.

        Raises:
            InvalidArgumentError: If name is not a string or a sequence of names.
        """
        if isinstance(name, str):
            self.register_one(name, data)
        elif _is_name_sequence(name):
            self.register_many(name, data)
        else:
            raise InvalidArgumentError(_invalid_name_message(name))

    def register_one(self, name: K, data: V) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentError(_invalid_name_message(name))
        self._store.set(name, data)
        logger.debug("Registered %s -> %s", name, type(data))
        self._emitter.emit(REGISTER, name, data)

    def register_many(self, names: Sequence[str], data: V) -> None:
        # Not transactional: names before an invalid one stay registered.
        if not _is_name_sequence(names):
            raise InvalidArgumentError(_invalid_name_message(names))
        for name in names:
            self.register(name, data)

    def unregister(self, name: Names) -> None:
        """
        Remove one or more symbolic names from the registry.

        Names that are not registered are skipped silently. A "unregister"
        event carrying the removed data is emitted for each name removed.

        Raises:
            InvalidArgumentError: If name is not a string or a sequence of names.
        """
        if isinstance(name, str):
            self.unregister_one(name)
        elif _is_name_sequence(name):
            self.unregister_many(name)
        else:
            raise InvalidArgumentError(_invalid_name_message(name))

    def unregister_one(self, name: K) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentError(_invalid_name_message(name))
        if name not in self._store:
            return
        data = self._store.pop(name)
        logger.debug("Unregistered %s -> %s", name, type(data))
        self._emitter.emit(UNREGISTER, name, data)

    def unregister_many(self, names: Sequence[str]) -> None:
        if not _is_name_sequence(names):
            raise InvalidArgumentError(_invalid_name_message(names))
        for name in names:
            self.unregister(name)

    def lookup(self, name: Any, default: Any = NOT_FOUND) -> Any:
        """
        Get data for a given symbolic name.

        Stored falsy values, None included, are returned as stored; only a
        missing name yields `default`, which is `NOT_FOUND` unless given.
        """
        if isinstance(name, str) and name in self._store:
            return self._store.get(name)
        return default

    def entry(self, name: Optional[Names] = None) -> Callable[[V], V]:
        """
        Decorator to register an object with the given name.

        Args:
            name: The name, or sequence of names, to register the object
                under. If None, the object's `__name__` attribute is used.
        Returns:
            A decorator that registers the object and returns it.

        Raises:
            InvalidArgumentError: If the name is not provided and cannot be
                inferred from the object.
        """

        def decorator(obj: V) -> V:
            reg_name = name if name is not None else getattr(obj, "__name__", None)
            if reg_name is None:
                raise InvalidArgumentError(
                    "Registry name must be provided or inferable from object"
                )
            self.register(reg_name, obj)
            return obj

        return decorator

    def on(
        self, event: str, callback: Optional[Listener] = None
    ) -> Union[Listener, Callable[[Listener], Listener]]:
        """Subscribe to "register" or "unregister"; see `EventEmitter.on`."""
        return self._emitter.on(event, callback)

    def once(
        self, event: str, callback: Optional[Listener] = None
    ) -> Union[Listener, Callable[[Listener], Listener]]:
        return self._emitter.once(event, callback)

    def off(
        self, event: Optional[str] = None, callback: Optional[Listener] = None
    ) -> None:
        self._emitter.off(event, callback)

    def clear(self) -> None:
        """
        Unregister every entry, emitting "unregister" for each.
        """
        self.unregister_many(self.names())
        logger.debug("Registry cleared")

    def get(self, key: Any, default: Any = None) -> Any:
        return self.lookup(key, default)

    def snapshot(self) -> Dict[K, V]:
        """
        Get a shallow copy of the current entries as a dictionary.

        Values are shared with the registry; the dictionary itself is not.
        """
        return self._store.to_dict()

    def names(self) -> List[K]:
        return list(self._store.keys())

    def __getitem__(self, key: K) -> V:
        if not isinstance(key, str) or key not in self._store:
            raise NotRegisteredError(f"Registry key {key!r} is not registered")
        return self._store.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.register_one(key, value)

    def __delitem__(self, key: K) -> None:
        if not isinstance(key, str) or key not in self._store:
            raise NotRegisteredError(f"Registry key {key!r} is not registered")
        self.unregister_one(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._store

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.names()!r})"
