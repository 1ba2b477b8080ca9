import logging

import pytest

from symreg import EventEmitter, InvalidArgumentError


def test_emit_without_listeners_returns_false() -> None:
    e = EventEmitter()
    assert e.emit("nothing", 1) is False


def test_listeners_run_in_subscription_order() -> None:
    e = EventEmitter()
    order = []
    e.on("go", lambda x: order.append(("first", x)))
    e.on("go", lambda x: order.append(("second", x)))
    assert e.emit("go", 1) is True
    assert order == [("first", 1), ("second", 1)]


def test_on_as_decorator_returns_function() -> None:
    e = EventEmitter()
    calls = []

    @e.on("go")
    def listener(*args: object) -> None:
        calls.append(args)

    e.emit("go", "a", 2)
    assert callable(listener)
    assert calls == [("a", 2)]
    assert e.listeners("go") == [listener]


def test_same_callback_bound_twice_runs_twice() -> None:
    e = EventEmitter()
    calls = []

    def listener() -> None:
        calls.append(1)

    e.on("go", listener)
    e.on("go", listener)
    e.emit("go")
    assert calls == [1, 1]

    e.off("go", listener)
    assert not e.has_listeners("go")


def test_once_removes_before_invocation() -> None:
    e = EventEmitter()
    calls = []

    def listener() -> None:
        # re-entrant emit must not reach this binding again
        calls.append(1)
        e.emit("go")

    e.once("go", listener)
    e.emit("go")
    e.emit("go")
    assert calls == [1]
    assert e.listeners("go") == []


def test_off_variants() -> None:
    e = EventEmitter()

    def a() -> None:
        pass

    def b() -> None:
        pass

    e.on("x", a)
    e.on("x", b)
    e.on("y", a)

    e.off("x", a)
    assert e.listeners("x") == [b]

    e.off("x")
    assert not e.has_listeners("x")
    assert e.has_listeners("y")

    e.off()
    assert not e.has_listeners("y")

    # unbinding unknown things is a no-op
    e.off("x", a)
    e.off("never")


def test_on_with_none_event_is_rejected() -> None:
    e = EventEmitter()
    with pytest.raises(InvalidArgumentError):
        e.on(None, print)  # type: ignore


def test_bindings_changed_during_emit_apply_next_time() -> None:
    e = EventEmitter()
    calls = []

    def late() -> None:
        calls.append("late")

    def first() -> None:
        calls.append("first")
        e.on("go", late)

    e.on("go", first)
    e.emit("go")
    assert calls == ["first"]
    e.emit("go")
    assert calls == ["first", "first", "late"]


def test_failing_listener_does_not_stop_others(caplog: pytest.LogCaptureFixture) -> None:
    e = EventEmitter()
    calls = []

    def bad() -> None:
        raise ValueError("first failure")

    def worse() -> None:
        raise KeyError("second failure")

    e.on("go", bad)
    e.on("go", worse)
    e.on("go", lambda: calls.append("ok"))

    with caplog.at_level(logging.ERROR, logger="symreg"):
        with pytest.raises(ValueError, match="first failure"):
            e.emit("go")

    assert calls == ["ok"]
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 2
    assert all(r.exc_info for r in errors)


@pytest.mark.parametrize("event", [1, 2.5, ("a",)])
def test_event_name_must_be_string(event: object) -> None:
    e = EventEmitter()
    with pytest.raises(InvalidArgumentError):
        e.on(event, print)  # type: ignore
    with pytest.raises(InvalidArgumentError):
        e.off(event)  # type: ignore


def test_callback_must_be_callable() -> None:
    e = EventEmitter()
    with pytest.raises(InvalidArgumentError):
        e.on("go", "not callable")  # type: ignore
    with pytest.raises(InvalidArgumentError):
        e.once("go")(42)  # type: ignore
    assert not e.has_listeners("go")
