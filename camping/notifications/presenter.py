from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from camping.realtime.events.notifications import PushedMessage
    from camping.users.types import User

UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class LiveNotificationLine:
    name: str
    text: str

    def render(self) -> str:
        return f"{self.name}: {self.text}"


@dataclass(frozen=True)
class StaticNotificationLine:
    name: str
    message: str
    image: str

    def render(self) -> str:
        return f"[{self.image}] {self.name}: {self.message}"


@dataclass(frozen=True)
class NotificationsView:
    """The two notification groups, kept apart.

    ``live`` holds pushed messages in arrival order, ``static`` one line per
    relationship record of the user snapshot, in snapshot order.
    """

    title: str
    live: tuple[LiveNotificationLine, ...]
    static: tuple[StaticNotificationLine, ...]

    def render_lines(self) -> list[str]:
        lines = [self.title]
        lines.extend(line.render() for line in self.live)
        lines.extend(line.render() for line in self.static)
        return lines


def present_notifications(
    user: User | None,
    messages: Sequence[PushedMessage] = (),
) -> NotificationsView:
    name = (user.name if user else "") or UNKNOWN_NAME
    live = tuple(LiveNotificationLine(name=name, text=m.text) for m in messages)
    static: tuple[StaticNotificationLine, ...] = ()
    if user is not None:
        static = tuple(
            StaticNotificationLine(
                name=user.name,
                message=record.notification,
                image=user.profile_image,
            )
            for record in user.join_camping_posts
        )
    return NotificationsView(title="Notifications", live=live, static=static)
