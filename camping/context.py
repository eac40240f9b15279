"""The app root: objects shared by every screen for the life of the process."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING

from camping.integrations.api import get_api_client_from_settings
from camping.notifications.context import NotificationFlag
from camping.realtime.socketio import RealtimeChannel
from camping.users.session import CredentialStore

if TYPE_CHECKING:
    from collections.abc import Callable

    from camping.integrations.api import CampingApiClient


@dataclass
class AppContext:
    api: CampingApiClient
    credentials: CredentialStore
    channel_factory: Callable[[], RealtimeChannel]
    notification_flag: NotificationFlag = field(default_factory=NotificationFlag)


def build_app_context() -> AppContext:
    return AppContext(
        api=get_api_client_from_settings(),
        credentials=CredentialStore(),
        channel_factory=RealtimeChannel.from_settings,
    )
