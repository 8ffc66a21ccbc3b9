"""In-process dispatch of compile, decoration and coordinator events."""

from typing import Any, Callable


class EventBus:
    """Routes pipeline events to listeners keyed by event class.

    The compiler emits :class:`StylesParsed` and :class:`StylesheetCompiled`,
    the decoration engine emits reconcile and clear events, and the
    coordinator emits its state changes. Dispatch happens inline in the
    emitting call; catch-all listeners run before typed ones.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> None:
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Callable) -> None:
        """Drop *callback* for *event_type*; a callback never subscribed is ignored."""
        callbacks = self._listeners.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def on_all(self, callback: Callable) -> None:
        """Listen to every event, e.g. for logging or a debug panel."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        # Listeners may subscribe or unsubscribe while an event is dispatched.
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
