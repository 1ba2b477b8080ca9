"""Synchronous in-process event emitter.

The emitter is a small publish/subscribe component. Listeners are bound to
an event name and called in-line, in subscription order, whenever the event
is emitted. `symreg.Registry` owns one and forwards its observer methods to
it, but the emitter has no knowledge of registries and can be used alone.

Usage:
    emitter = EventEmitter()

    @emitter.on("register")
    def announce(name, data):
        print(name, data)

    emitter.emit("register", "red", "#FF0000")
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from symreg.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

REGISTER = "register"
UNREGISTER = "unregister"

Listener = Callable[..., Any]


@dataclass
class _Binding:
    callback: Listener
    once: bool = False


class EventEmitter:
    """In-process event emitter with named events.

    A failing listener does not stop the remaining listeners of the same
    emit. Its exception is logged, and the first one raised is re-raised to
    the caller of `emit` once every listener has run.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, List[_Binding]] = {}

    def on(
        self, event: str, callback: Optional[Listener] = None
    ) -> Union[Listener, Callable[[Listener], Listener]]:
        """
        Subscribe a callback to an event.

        Args:
            event: Event name.
            callback: Callable invoked with the emitted arguments. If omitted,
                a decorator is returned instead.

        Returns:
            The callback, or a decorator that subscribes and returns it.

        Raises:
            InvalidArgumentError: If the event is not a string or the callback
                is not callable.
        """
        return self._bind(event, callback, once=False)

    def once(
        self, event: str, callback: Optional[Listener] = None
    ) -> Union[Listener, Callable[[Listener], Listener]]:
        """
        Subscribe a callback that is removed before its first invocation.

        Same arguments and return value as `on`.
        """
        return self._bind(event, callback, once=True)

    def off(
        self, event: Optional[str] = None, callback: Optional[Listener] = None
    ) -> None:
        """
        Remove bindings.

        With no arguments every binding is removed; with only an event, every
        binding of that event; otherwise every binding of `callback` to
        `event`. Removing something that is not bound is a no-op.
        """
        if event is None:
            self._bindings.clear()
            logger.debug("EventEmitter: removed all bindings")
            return
        self._check_event(event)
        if callback is None:
            self._bindings.pop(event, None)
            logger.debug("EventEmitter: removed all bindings for %r", event)
            return
        bindings = self._bindings.get(event)
        if not bindings:
            return
        remaining = [b for b in bindings if b.callback != callback]
        if remaining:
            self._bindings[event] = remaining
        else:
            del self._bindings[event]
        logger.debug("EventEmitter: unsubscribed %r from %r", callback, event)

    def emit(self, event: str, *args: Any) -> bool:
        """
        Call every listener bound to `event` with `args`.

        Listeners bound or unbound while the emit is running take effect
        from the next emit.

        Returns:
            True if at least one listener was bound, False otherwise.
        """
        bindings = list(self._bindings.get(event, ()))
        if not bindings:
            return False

        errors: List[Exception] = []
        for binding in bindings:
            if binding.once:
                self._remove_binding(event, binding)
            try:
                binding.callback(*args)
            except Exception as exc:
                logger.error(
                    "EventEmitter: listener %r failed for %r",
                    binding.callback,
                    event,
                    exc_info=exc,
                )
                errors.append(exc)

        if errors:
            raise errors[0]
        return True

    def listeners(self, event: str) -> List[Listener]:
        """Return the callbacks currently bound to `event`."""
        return [b.callback for b in self._bindings.get(event, ())]

    def has_listeners(self, event: str) -> bool:
        return bool(self._bindings.get(event))

    def _bind(
        self, event: str, callback: Optional[Listener], once: bool
    ) -> Union[Listener, Callable[[Listener], Listener]]:
        self._check_event(event)

        def decorator(fn: Listener) -> Listener:
            if not callable(fn):
                raise InvalidArgumentError(
                    f"Listener must be callable, got {type(fn).__name__}"
                )
            self._bindings.setdefault(event, []).append(_Binding(fn, once=once))
            logger.debug("EventEmitter: subscribed %r to %r", fn, event)
            return fn

        if callback is None:
            return decorator
        return decorator(callback)

    def _remove_binding(self, event: str, binding: _Binding) -> None:
        bindings = self._bindings.get(event)
        if not bindings:
            return
        # identity, not equality: the same callback may be bound twice
        for i, b in enumerate(bindings):
            if b is binding:
                del bindings[i]
                break
        if not bindings:
            del self._bindings[event]

    @staticmethod
    def _check_event(event: Any) -> None:
        if not isinstance(event, str):
            raise InvalidArgumentError(
                f"Event name must be a str, got {type(event).__name__}"
            )

    def __repr__(self) -> str:
        counts = {event: len(b) for event, b in self._bindings.items()}
        return f"{self.__class__.__name__}({counts!r})"


__all__ = ["EventEmitter", "REGISTER", "UNREGISTER", "Listener"]
