# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from collections.abc import Callable, Sequence
from typing import Any

from geolayer.util.assertions import assert_true

Listener = Callable[..., Any]


class Event:
    """An observable event with a single, ordered list of listeners.

    Listeners are called synchronously on the calling thread
    in the order they have been subscribed.
    Exceptions raised by a listener are not caught, hence
    any listeners after a failing one are not called.

    Args:
        name: The event's name.
    """

    def __init__(self, name: str):
        self._name = name
        self._listeners: list[Listener] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def listeners(self) -> Sequence[Listener]:
        return tuple(self._listeners)

    def subscribe(self, listener: Listener) -> Listener:
        """Subscribe *listener*. Returns *listener*,
        so this method can be used as a decorator.
        """
        assert_true(callable(listener), "listener must be callable", TypeError)
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> bool:
        """Unsubscribe the first subscription of *listener*.
        Returns ``True`` if *listener* was subscribed.
        """
        try:
            self._listeners.remove(listener)
            return True
        except ValueError:
            return False

    def fire(self, *args, **kwargs):
        # Copy, so listeners may unsubscribe while firing
        for listener in list(self._listeners):
            listener(*args, **kwargs)

    def clear(self):
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)

    def __repr__(self):
        return f"Event({self._name!r}, listeners={len(self._listeners)})"
