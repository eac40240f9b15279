from http import HTTPStatus

import pytest

from camping.integrations.api import ApiError
from camping.integrations.api import VerificationKind
from camping.integrations.api import VerificationResult
from camping.notifications.presenter import present_notifications
from camping.realtime.events.notifications import PushedMessage
from camping.users.api.serializers import SignUpSerializer
from camping.users.services import FETCH_FAILED_MESSAGE
from camping.users.services import NextScreen
from camping.users.services import UserFetchError
from camping.users.services import fetch_user
from camping.users.services import sign_up
from camping.users.tests.factories import TEST_PASSWORD
from camping.users.tests.factories import StubApi
from camping.users.tests.factories import build_user_payload


class TestFetchUser:
    def test_returns_snapshot(self, stub_api):
        user = fetch_user("42", stub_api)

        assert stub_api.calls == [("get_user", "42")]
        assert user.id == "42"
        assert len(user.join_camping_posts) == 2  # noqa: PLR2004

    @pytest.mark.parametrize(
        "error",
        [
            ApiError("User not found", status=HTTPStatus.NOT_FOUND),
            ApiError("boom", status=HTTPStatus.INTERNAL_SERVER_ERROR),
            ApiError("connection refused"),
        ],
    )
    def test_transport_failures_become_fetch_error(self, error):
        with pytest.raises(UserFetchError) as excinfo:
            fetch_user("42", StubApi(user_error=error))
        assert excinfo.value.message == FETCH_FAILED_MESSAGE
        assert excinfo.value.__cause__ is error

    @pytest.mark.parametrize(
        "body",
        [{}, {"user": None}, {"user": "42"}, {"user": {"name": "no id"}}],
    )
    def test_unusable_payload_is_fetch_error(self, body):
        with pytest.raises(UserFetchError):
            fetch_user("42", StubApi(user=body))

    def test_snapshot_keeps_record_order(self):
        payload = build_user_payload(
            joinCampingPosts=[
                {"postId": n, "notification": f"n{n}", "status": "PENDING"}
                for n in (3, 1, 2)
            ],
        )
        user = fetch_user("42", StubApi(user={"user": payload}))
        assert [r.notification for r in user.join_camping_posts] == ["n3", "n1", "n2"]

    def test_null_name_is_not_an_error(self):
        user = fetch_user("42", StubApi(user={"user": build_user_payload(name=None)}))
        assert user.name == ""
        view = present_notifications(user, [PushedMessage("9", "hi")])
        assert view.live[0].render() == "Unknown: hi"


def form(**overrides):
    data = {
        "name": "Sam Camper",
        "email": "sam@example.com",
        "password": TEST_PASSWORD,
        "confirm_password": TEST_PASSWORD,
    }
    data.update(overrides)
    return data


class TestSignUp:
    def test_registers_and_verifies(self, stub_api):
        result = sign_up(form(), stub_api)

        assert result.ok
        assert result.user_id == "42"
        assert result.next_screen == NextScreen.INTERESTS
        assert result.error == ""
        assert stub_api.calls == [
            (
                "register_user",
                {
                    "name": "Sam Camper",
                    "email": "sam@example.com",
                    "password": TEST_PASSWORD,
                    "confirmPassword": TEST_PASSWORD,
                },
            ),
            ("request_email_verification", "sam@example.com"),
            ("verify_email", "verify-token"),
        ]

    def test_validation_failure_sends_nothing(self, stub_api):
        result = sign_up(form(password="abcdefg", confirm_password="abcdefg"), stub_api)

        assert not result.ok
        assert result.error == SignUpSerializer.PASSWORD_MESSAGE
        assert result.next_screen is None
        assert stub_api.calls == []

    def test_registration_error_is_inline(self):
        api = StubApi(
            registration_error=ApiError("Email already in use", HTTPStatus.CONFLICT),
        )
        result = sign_up(form(), api)

        assert not result.ok
        assert result.error == "Email already in use"
        assert result.next_screen is None

    @pytest.mark.parametrize("registration", [{}, {"user": {}}, {"user": {"id": ""}}])
    def test_missing_user_id(self, registration):
        api = StubApi(registration=registration)
        result = sign_up(form(), api)

        assert not result.ok
        assert result.error == "Failed to get user ID from registration response"
        assert [name for name, _ in api.calls] == ["register_user"]

    def test_missing_verification_token(self):
        api = StubApi(verification={"message": "sent"})
        result = sign_up(form(), api)

        assert not result.ok
        assert result.user_id == "42"
        assert result.error == "Failed to get verification token"
        assert result.next_screen is None

    def test_verification_request_error(self):
        api = StubApi(verification_error=ApiError("Mailer down", HTTPStatus.BAD_GATEWAY))
        result = sign_up(form(), api)

        assert not result.ok
        assert result.error == "Mailer down"
        assert result.next_screen is None

    def test_rejected_token_redirects_to_sign_in(self):
        api = StubApi(
            verify_result=VerificationResult(
                VerificationKind.INVALID_TOKEN,
                "Invalid or expired token",
            ),
        )
        result = sign_up(form(), api)

        assert not result.ok
        assert result.next_screen == NextScreen.SIGN_IN
        assert result.error == "Invalid or expired token"

    def test_redirect_follows_kind_not_text(self):
        api = StubApi(
            verify_result=VerificationResult(VerificationKind.INVALID_TOKEN, "Nope"),
        )
        assert sign_up(form(), api).next_screen == NextScreen.SIGN_IN

        api = StubApi(
            verify_result=VerificationResult(
                VerificationKind.FAILED,
                "Invalid or expired token",
            ),
        )
        result = sign_up(form(), api)
        assert result.next_screen is None
        assert result.error == "Invalid or expired token"

    def test_failed_verification_without_message(self):
        api = StubApi(verify_result=VerificationResult(VerificationKind.FAILED))
        result = sign_up(form(), api)
        assert result.error == "Email verification failed"
