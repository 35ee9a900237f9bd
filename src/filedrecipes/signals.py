from __future__ import annotations

from collections.abc import Callable

Callback = Callable[[], None]


class Signal:
    """Payload-less broadcast to zero or more subscribers."""

    def __init__(self) -> None:
        self._subscribers: list[Callback] = []

    def subscribe(self, callback: Callback) -> Callback:
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: Callback) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    def emit(self) -> None:
        # Subscribers added or removed while dispatching only affect the next emit.
        for callback in list(self._subscribers):
            callback()

    def __len__(self) -> int:
        return len(self._subscribers)
