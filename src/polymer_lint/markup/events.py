from __future__ import annotations

from typing import Any
from typing import Callable

Listener = Callable[..., Any]


class EventSource:
    """
    Minimal synchronous event emitter.

    Listeners run in registration order, in the emitting thread, before
    `emit()` returns.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners.get(event, ())):
            listener(*args)
