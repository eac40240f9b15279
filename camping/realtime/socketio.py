"""Socket.IO client connection to the camping service.

Current server convention:
- URL base: http://<host>:5000
- transport: websocket only
- client -> server: ``register(userId)``, ``joinRoom(userId)``
- server -> client: ``notification({userId, message})`` sent to the per-user
  room

One RealtimeChannel wraps one python-socketio ``Client``. Handlers are
attached through ``subscribe``/``unsubscribe`` so they can be detached again;
python-socketio itself only supports adding handlers.
"""

from __future__ import annotations

import logging
import threading
from functools import partial
from typing import TYPE_CHECKING
from typing import Any

import socketio
from django.conf import settings

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class RealtimeChannel:
    def __init__(
        self,
        url: str,
        *,
        client: Any | None = None,
        reconnection_attempts: int = 5,
        timeout: float = 5.0,
    ):
        self.url = url
        self.timeout = timeout
        if client is None:
            client = socketio.Client(
                reconnection_attempts=reconnection_attempts,
                logger=False,
                engineio_logger=False,
            )
        self._client = client
        self._lock = threading.Lock()
        self._subscribers: dict[str, list[Callable[..., Any]]] = {}
        self._dispatchers: set[str] = set()
        self._closed = False

        self.subscribe("connect", self._log_connect)
        self.subscribe("connect_error", self._log_connect_error)
        self.subscribe("disconnect", self._log_disconnect)

    @classmethod
    def from_settings(cls) -> RealtimeChannel:
        return cls(
            settings.CAMPING_SOCKETIO_URL,
            reconnection_attempts=settings.CAMPING_SOCKETIO_RECONNECTION_ATTEMPTS,
            timeout=settings.CAMPING_SOCKETIO_TIMEOUT,
        )

    @property
    def sid(self) -> str | None:
        return getattr(self._client, "sid", None)

    @property
    def connected(self) -> bool:
        return bool(getattr(self._client, "connected", False))

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self) -> bool:
        """Connect; returns False when the server cannot be reached.

        A failed first attempt is retried up to ``reconnection_attempts`` times
        before giving up, and this call blocks while it retries. Connection
        errors are logged only. Once connected, dropped transports reconnect in
        the background under the same limit.
        """
        try:
            self._client.connect(
                self.url,
                transports=["websocket"],
                wait_timeout=self.timeout,
                retry=True,
            )
        except socketio.exceptions.ConnectionError as exc:
            logger.error("Socket connection error: %s", exc)  # noqa: TRY400
            return False
        return True

    def close(self) -> None:
        with self._lock:
            self._closed = True
            self._subscribers.clear()
        self._client.disconnect()
        logger.info("Socket connection closed")

    def emit(self, event: str, data: Any) -> None:
        try:
            self._client.emit(event, data)
        except socketio.exceptions.BadNamespaceError:
            logger.warning("Dropped %s event: channel not connected", event)

    def subscribe(self, event: str, handler: Callable[..., Any]) -> None:
        with self._lock:
            if self._closed:
                return
            self._subscribers.setdefault(event, []).append(handler)
            register = event not in self._dispatchers
            self._dispatchers.add(event)
        if register:
            self._client.on(event, partial(self._dispatch, event))

    def unsubscribe(self, event: str, handler: Callable[..., Any]) -> None:
        with self._lock:
            handlers = self._subscribers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

    def _dispatch(self, event: str, *args: Any) -> None:
        with self._lock:
            if self._closed:
                return
            handlers = list(self._subscribers.get(event, ()))
        for handler in handlers:
            handler(*args)

    def _log_connect(self, *_args: Any) -> None:
        logger.info("Socket connected: %s", self.sid)

    def _log_connect_error(self, *args: Any) -> None:
        error = args[0] if args else None
        logger.error("Socket connection error: %s", error)

    def _log_disconnect(self, *args: Any) -> None:
        reason = args[0] if args else None
        logger.info("Socket disconnected: %s", reason)
