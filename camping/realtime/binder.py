from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING
from typing import Any

from camping.realtime.events.notifications import build_pushed_message

if TYPE_CHECKING:
    from collections.abc import Callable

    from camping.realtime.events.notifications import PushedMessage
    from camping.realtime.socketio import RealtimeChannel

logger = logging.getLogger(__name__)


class ChannelBinder:
    """Binds one realtime connection to one user identity.

    ``bind`` opens a fresh channel and, on every ``connect`` (the first one and
    each transport-level reconnect), announces the identity with
    ``register`` then ``joinRoom``. Binding the same identity again keeps the
    connection and only swaps the message callback; binding another identity
    releases the current one first. ``release``
    detaches every handler and closes the channel.
    """

    def __init__(self, channel_factory: Callable[[], RealtimeChannel]):
        self._channel_factory = channel_factory
        self._lock = threading.RLock()
        self._channel: RealtimeChannel | None = None
        self._user_id: str | None = None
        self._on_message: Callable[[PushedMessage], None] | None = None
        self._handlers: list[tuple[str, Callable[..., Any]]] = []

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def channel(self) -> RealtimeChannel | None:
        return self._channel

    @property
    def is_bound(self) -> bool:
        return self._channel is not None

    def bind(
        self,
        user_id: str,
        on_message: Callable[[PushedMessage], None],
    ) -> None:
        user_id = str(user_id)
        with self._lock:
            if self._channel is not None and self._user_id == user_id:
                self._on_message = on_message
                return
            self.release()

            channel = self._channel_factory()

            def announce(*_args: Any) -> None:
                channel.emit("register", user_id)
                channel.emit("joinRoom", user_id)

            def deliver(payload: Any = None, *_args: Any) -> None:
                message = build_pushed_message(payload)
                logger.info("Received notification for %s: %s", user_id, message.text)
                with self._lock:
                    handler = self._on_message if self._channel is channel else None
                if handler is not None:
                    handler(message)

            self._handlers = [("connect", announce), ("notification", deliver)]
            for event, handler in self._handlers:
                channel.subscribe(event, handler)
            self._channel = channel
            self._user_id = user_id
            self._on_message = on_message

        logger.info("Binding realtime channel to user %s", user_id)
        channel.open()

    def release(self) -> None:
        with self._lock:
            channel, handlers = self._channel, self._handlers
            user_id = self._user_id
            self._channel = None
            self._user_id = None
            self._handlers = []
            self._on_message = None
        if channel is None:
            return
        for event, handler in handlers:
            channel.unsubscribe(event, handler)
        channel.close()
        logger.info("Released realtime channel for user %s", user_id)

    def __enter__(self) -> ChannelBinder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
