from __future__ import annotations

import logging
import threading
from functools import partial
from typing import TYPE_CHECKING

from django.db import models
from django.utils.translation import gettext_lazy as _

from camping.notifications.presenter import NotificationsView
from camping.notifications.presenter import present_notifications
from camping.realtime.binder import ChannelBinder
from camping.users.services import UserFetchError
from camping.users.services import fetch_user
from camping.users.session import SessionError
from camping.users.session import decode_session

if TYPE_CHECKING:
    from collections.abc import Callable

    from camping.context import AppContext
    from camping.realtime.events.notifications import PushedMessage
    from camping.users.types import User

logger = logging.getLogger(__name__)


class ScreenState(models.TextChoices):
    LOADING = "loading", _("Loading")
    ERROR = "error", _("Error")
    READY = "ready", _("Ready")


class NotificationsScreen:
    """Notifications feed for the signed-in user.

    ``mount`` runs LOADING -> ERROR | READY: decode the stored session, fetch
    the profile, then bind the realtime channel to the user. While READY every
    pushed message is appended to the live sequence. ``unmount`` releases the
    channel and drops the live sequence, so a later mount starts empty. A
    repeated ``mount`` for the same user keeps the open connection; one that
    ends in ERROR releases it.

    Each mount gets a generation number; results or pushes carrying an older
    generation are discarded.
    """

    def __init__(
        self,
        context: AppContext,
        *,
        binder: ChannelBinder | None = None,
        on_change: Callable[[NotificationsScreen], None] | None = None,
    ):
        self.context = context
        self.binder = binder or ChannelBinder(context.channel_factory)
        self.on_change = on_change
        self._lock = threading.Lock()
        self._generation = 0
        self._mounted = False
        self._messages: list[PushedMessage] = []
        self.state = ScreenState.LOADING
        self.error: str | None = None
        self.user: User | None = None

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def messages(self) -> tuple[PushedMessage, ...]:
        with self._lock:
            return tuple(self._messages)

    def mount(self) -> ScreenState:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._mounted = True
            self._messages = []
            self.state = ScreenState.LOADING
            self.error = None
            self.user = None

        try:
            user_id = decode_session(self.context.credentials)
            user = fetch_user(user_id, self.context.api)
        except (SessionError, UserFetchError) as exc:
            if self._settle(generation, error=exc.message):
                # a refresh that fails must not keep the previous identity
                self.binder.release()
            return self.state

        if self._settle(generation, user=user):
            self.binder.bind(user.id, partial(self._on_push, generation))
            if generation != self._generation:
                # unmounted while binding
                self.binder.release()
        return self.state

    def unmount(self) -> None:
        with self._lock:
            self._generation += 1
            self._mounted = False
            self._messages = []
        self.binder.release()

    def view(self) -> NotificationsView | None:
        if self.state != ScreenState.READY:
            return None
        return present_notifications(self.user, self.messages)

    def render_lines(self) -> list[str]:
        if self.state == ScreenState.LOADING:
            return ["Loading..."]
        if self.state == ScreenState.ERROR:
            return [self.error or ""]
        return self.view().render_lines()

    def _settle(
        self,
        generation: int,
        *,
        user: User | None = None,
        error: str | None = None,
    ) -> bool:
        with self._lock:
            if not self._mounted or generation != self._generation:
                logger.debug("Discarding result of a stale mount")
                return False
            if error is not None:
                self.state = ScreenState.ERROR
                self.error = error
            else:
                self.state = ScreenState.READY
                self.user = user
        self._changed()
        return True

    def _on_push(self, generation: int, message: PushedMessage) -> None:
        with self._lock:
            if not self._mounted or generation != self._generation:
                return
            if self.state != ScreenState.READY:
                return
            self._messages.append(message)
        self.context.notification_flag.set(True)
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    def __enter__(self) -> NotificationsScreen:
        self.mount()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unmount()
