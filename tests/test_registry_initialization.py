import logging

import pytest

from symreg import EventEmitter, Registry
from symreg._storage import MemoryStorage
from symreg.core.registry import logger


def test_minimal_init() -> None:
    r: Registry[str, int] = Registry()
    assert len(r) == 0
    assert isinstance(r.snapshot(), dict)
    assert r.snapshot() == {}
    assert r.names() == []
    assert set(r) == set()
    assert isinstance(r.emitter, EventEmitter)


def test_init_with_store() -> None:
    store: MemoryStorage[str, int] = MemoryStorage()
    store.set("preloaded", 1)
    r: Registry[str, int] = Registry(store=store)
    assert r.lookup("preloaded") == 1
    r.register("x", 2)
    assert store.get("x") == 2


def test_init_with_shared_emitter() -> None:
    emitter = EventEmitter()
    seen = []
    emitter.on("register", lambda name, data: seen.append(name))

    a: Registry[str, int] = Registry(emitter=emitter)
    b: Registry[str, int] = Registry(emitter=emitter)
    a.register("from_a", 1)
    b.register("from_b", 2)

    assert a.emitter is b.emitter is emitter
    assert seen == ["from_a", "from_b"]
    # entries stay separate
    assert "from_b" not in a
    assert "from_a" not in b


def test_init_with_log_level() -> None:
    r: Registry[str, int] = Registry(log_level=logging.DEBUG)
    assert r is not None
    assert logger.getEffectiveLevel() == logging.DEBUG

    Registry(log_level=logging.INFO)
    assert logger.getEffectiveLevel() == logging.INFO


def test_init_without_log_level_leaves_logger_alone() -> None:
    Registry(log_level=logging.ERROR)
    Registry()
    assert logger.getEffectiveLevel() == logging.ERROR


def test_init_with_all_params() -> None:
    emitter = EventEmitter()
    store: MemoryStorage[str, int] = MemoryStorage()
    r: Registry[str, int] = Registry(log_level=20, store=store, emitter=emitter)
    assert r.emitter is emitter
    r["x"] = 10
    r["x"] = 20  # Overwrites without error
    assert r["x"] == 20
    assert store.get("x") == 20


def test_init_with_invalid_log_level() -> None:
    with pytest.raises(ValueError):
        Registry(log_level=-1)
    with pytest.raises(ValueError):
        Registry(log_level=51)


def test_init_with_invalid_store() -> None:
    with pytest.raises(TypeError):
        Registry(store={"not": "a store"})  # type: ignore


def test_init_with_invalid_emitter() -> None:
    with pytest.raises(TypeError):
        Registry(emitter="not_an_emitter")  # type: ignore


def test_init_is_keyword_only() -> None:
    with pytest.raises(TypeError):
        Registry(10)  # type: ignore


def test_package_exposes_version() -> None:
    import symreg

    assert isinstance(symreg.__version__, str)
    assert symreg.__version__
