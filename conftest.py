from __future__ import annotations

import pytest
from django.conf import settings

from camping.context import AppContext
from camping.notifications.context import NotificationFlag
from camping.realtime.socketio import RealtimeChannel
from camping.realtime.tests.fakes import FakeSocketClient
from camping.users.session import CredentialStore
from camping.users.tests.factories import StubApi


@pytest.fixture
def credentials():
    store = CredentialStore()
    store.clear()
    yield store
    store.clear()


@pytest.fixture
def socket_clients() -> list[FakeSocketClient]:
    """Every fake client handed out by ``channel_factory``, in creation order."""
    return []


@pytest.fixture
def channel_factory(socket_clients):
    def factory() -> RealtimeChannel:
        client = FakeSocketClient()
        socket_clients.append(client)
        return RealtimeChannel(settings.CAMPING_SOCKETIO_URL, client=client)

    return factory


@pytest.fixture
def stub_api() -> StubApi:
    return StubApi()


@pytest.fixture
def app_context(stub_api, credentials, channel_factory) -> AppContext:
    return AppContext(
        api=stub_api,
        credentials=credentials,
        channel_factory=channel_factory,
        notification_flag=NotificationFlag(),
    )
