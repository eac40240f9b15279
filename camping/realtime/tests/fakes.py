from __future__ import annotations

from typing import Any

import socketio


class FakeSocketClient:
    """In-process stand-in for ``socketio.Client``.

    ``connect`` fires the ``connect`` handler the way python-socketio does;
    tests call ``trigger`` to simulate server events.
    """

    def __init__(self, *, fail_connect: bool = False):
        self.fail_connect = fail_connect
        self.handlers: dict[str, Any] = {}
        self.emitted: list[tuple[str, Any]] = []
        self.connect_calls: list[tuple[str, dict[str, Any]]] = []
        self.disconnect_calls = 0
        self.connected = False
        self.sid: str | None = None

    def on(self, event: str, handler: Any = None) -> None:
        self.handlers[event] = handler

    def connect(self, url: str, **kwargs: Any) -> None:
        self.connect_calls.append((url, kwargs))
        if self.fail_connect:
            self.trigger("connect_error", "Connection refused")
            msg = "Connection refused by the server"
            raise socketio.exceptions.ConnectionError(msg)
        self.sid = f"sid-{len(self.connect_calls)}"
        self.trigger("connect")
        self.connected = True

    def disconnect(self) -> None:
        self.disconnect_calls += 1
        was_connected = self.connected
        self.connected = False
        if was_connected:
            self.trigger("disconnect", "client disconnect")

    def emit(self, event: str, data: Any = None) -> None:
        self.emitted.append((event, data))

    def trigger(self, event: str, *args: Any) -> None:
        handler = self.handlers.get(event)
        if handler is not None:
            handler(*args)

    def reconnect(self) -> None:
        """Simulate a transport drop followed by an automatic reconnect."""
        self.trigger("disconnect", "transport close")
        self.trigger("connect")
