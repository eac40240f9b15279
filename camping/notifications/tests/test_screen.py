from http import HTTPStatus

import pytest

from camping.integrations.api import ApiError
from camping.notifications.screen import NotificationsScreen
from camping.notifications.screen import ScreenState
from camping.users.tests.factories import make_token


@pytest.fixture
def signed_in(credentials):
    credentials.set_token(f"Bearer {make_token({'id': '42'})}")
    return credentials


@pytest.fixture
def screen(app_context):
    screen = NotificationsScreen(app_context)
    yield screen
    screen.unmount()


def push(client, message, user_id="42"):
    client.trigger("notification", {"userId": user_id, "message": message})


def test_starts_loading(screen):
    assert screen.state == ScreenState.LOADING
    assert screen.render_lines() == ["Loading..."]


def test_mount_reaches_ready_and_binds(screen, signed_in, stub_api, socket_clients):
    assert screen.mount() == ScreenState.READY

    assert stub_api.calls == [("get_user", "42")]
    view = screen.view()
    assert len(view.static) == 2  # noqa: PLR2004
    assert view.live == ()
    (client,) = socket_clients
    assert client.emitted == [("register", "42"), ("joinRoom", "42")]


def test_no_token_is_an_error_and_never_connects(screen, socket_clients, stub_api):
    assert screen.mount() == ScreenState.ERROR
    assert screen.error == "Token not found"
    assert screen.render_lines() == ["Token not found"]
    assert screen.view() is None
    assert socket_clients == []
    assert stub_api.calls == []


def test_invalid_token_is_an_error(screen, credentials, socket_clients):
    credentials.set_token("Bearer abc.def.ghi")
    assert screen.mount() == ScreenState.ERROR
    assert screen.error == "Failed to decode token"
    assert socket_clients == []


def test_fetch_failure_is_an_error(screen, signed_in, stub_api, socket_clients):
    stub_api.user_error = ApiError("not found", HTTPStatus.NOT_FOUND)

    assert screen.mount() == ScreenState.ERROR
    assert screen.error == "Failed to fetch user data"
    assert socket_clients == []


def test_pushes_accumulate_in_arrival_order(screen, signed_in, socket_clients):
    screen.mount()
    client = socket_clients[0]

    for n in range(5):
        push(client, f"message {n}")

    assert [m.text for m in screen.messages] == [f"message {n}" for n in range(5)]
    assert [line.text for line in screen.view().live] == [
        f"message {n}" for n in range(5)
    ]


def test_push_sets_the_shared_flag(screen, signed_in, socket_clients, app_context):
    screen.mount()
    assert app_context.notification_flag.has_new_notifications is False

    push(socket_clients[0], "New match!")

    assert app_context.notification_flag.has_new_notifications is True


def test_unmount_stops_accumulation_and_closes(screen, signed_in, socket_clients):
    screen.mount()
    client = socket_clients[0]
    push(client, "one")

    screen.unmount()
    push(client, "two")

    assert screen.messages == ()
    assert client.disconnect_calls == 1
    assert not screen.mounted


def test_remount_starts_with_no_live_messages(screen, signed_in, socket_clients):
    screen.mount()
    for text in ("a", "b", "c"):
        push(socket_clients[0], text)
    assert len(screen.messages) == 3  # noqa: PLR2004

    screen.unmount()
    screen.mount()

    assert screen.state == ScreenState.READY
    assert screen.messages == ()
    assert len(socket_clients) == 2  # noqa: PLR2004
    push(socket_clients[0], "from the old connection")
    assert screen.messages == ()


def test_on_change_runs_for_profile_and_pushes(app_context, signed_in, socket_clients):
    states = []
    screen = NotificationsScreen(
        app_context,
        on_change=lambda s: states.append((s.state, len(s.messages))),
    )
    with screen:
        push(socket_clients[0], "hi")

    assert states == [(ScreenState.READY, 0), (ScreenState.READY, 1)]


def test_context_manager_unmounts_on_error(app_context, signed_in, socket_clients):
    msg = "navigated away"
    with pytest.raises(RuntimeError), NotificationsScreen(app_context):
        raise RuntimeError(msg)
    assert socket_clients[0].disconnect_calls == 1


def test_late_fetch_result_after_unmount_is_discarded(
    app_context,
    signed_in,
    stub_api,
    socket_clients,
):
    screen = NotificationsScreen(app_context)
    original_get_user = stub_api.get_user

    def get_user_then_navigate_away(user_id):
        data = original_get_user(user_id)
        screen.unmount()
        return data

    stub_api.get_user = get_user_then_navigate_away

    screen.mount()

    assert screen.state == ScreenState.LOADING
    assert screen.user is None
    assert socket_clients == []


def test_refresh_keeps_connection_and_delivery(screen, signed_in, socket_clients):
    screen.mount()
    assert screen.mount() == ScreenState.READY

    (client,) = socket_clients
    push(client, "New match!")

    assert [m.text for m in screen.messages] == ["New match!"]
    assert client.disconnect_calls == 0


def test_failed_refresh_releases_previous_identity(
    screen,
    signed_in,
    credentials,
    socket_clients,
):
    screen.mount()
    credentials.clear()

    assert screen.mount() == ScreenState.ERROR

    assert not screen.binder.is_bound
    assert screen.binder.user_id is None
    assert socket_clients[0].disconnect_calls == 1
    push(socket_clients[0], "too late")
    assert screen.messages == ()
