from __future__ import annotations

import threading


class NotificationFlag:
    """Process-wide "there is something new" flag shared by every screen.

    Created once at the app root (see ``camping.context``) and handed to the
    screens that read or change it. It lives for the whole process.
    """

    def __init__(self, *, has_new_notifications: bool = False):
        self._lock = threading.Lock()
        self._value = has_new_notifications

    @property
    def has_new_notifications(self) -> bool:
        return self._value

    def set(self, value: bool) -> None:  # noqa: FBT001
        with self._lock:
            self._value = bool(value)

    def mark_seen(self) -> None:
        self.set(False)
