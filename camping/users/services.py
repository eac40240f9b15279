from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any

from django.db import models
from django.utils.translation import gettext_lazy as _

from camping.integrations.api import ApiError
from camping.integrations.api import VerificationKind
from camping.users.api.serializers import SignUpSerializer
from camping.users.api.serializers import UserSnapshotSerializer

if TYPE_CHECKING:  # import for type checking only
    from camping.integrations.api import CampingApiClient
    from camping.users.types import User

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch user data"


class UserFetchError(Exception):
    def __init__(self, message: str = FETCH_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


def fetch_user(user_id: str, api: CampingApiClient) -> User:
    """Resolve a user id to the profile snapshot held by the service."""

    try:
        data = api.get_user(user_id)
    except ApiError as exc:
        logger.error("Error fetching user data for %s: %s", user_id, exc)  # noqa: TRY400
        raise UserFetchError from exc

    payload = data.get("user") if isinstance(data, dict) else None
    if not isinstance(payload, dict):
        logger.error("Profile response for %s has no user object", user_id)
        raise UserFetchError

    serializer = UserSnapshotSerializer(data=payload)
    if not serializer.is_valid():
        logger.error("Profile for %s failed to parse: %s", user_id, serializer.errors)
        raise UserFetchError
    return serializer.save()


class NextScreen(models.TextChoices):
    INTERESTS = "interests", _("Interests")
    SIGN_IN = "sign_in", _("Sign In")


@dataclass(frozen=True)
class SignUpResult:
    ok: bool
    user_id: str | None = None
    error: str = ""
    next_screen: NextScreen | None = None


def sign_up(data: dict[str, Any], api: CampingApiClient) -> SignUpResult:
    """Register an account and run email verification.

    Validation and transport failures come back as an inline error with no
    next screen, so the form can be resubmitted. A rejected verification
    token sends the user to sign-in instead.
    """

    serializer = SignUpSerializer(data=data)
    if not serializer.is_valid():
        return SignUpResult(ok=False, error=serializer.first_error)

    email = serializer.validated_data["email"]
    try:
        registration = api.register_user(serializer.to_registration_payload())
    except ApiError as exc:
        logger.warning("Registration failed for %s: %s", email, exc)
        return SignUpResult(ok=False, error=exc.message)

    user = registration.get("user") if isinstance(registration, dict) else None
    user_id = user.get("id") if isinstance(user, dict) else None
    if not user_id:
        return SignUpResult(
            ok=False,
            error="Failed to get user ID from registration response",
        )
    user_id = str(user_id)
    logger.info("Registered user %s", user_id)

    try:
        verification = api.request_email_verification(email)
    except ApiError as exc:
        logger.warning("Verification request failed for %s: %s", email, exc)
        return SignUpResult(ok=False, user_id=user_id, error=exc.message)

    token = verification.get("token") if isinstance(verification, dict) else None
    if not token:
        return SignUpResult(
            ok=False,
            user_id=user_id,
            error="Failed to get verification token",
        )

    result = api.verify_email(token)
    if result.kind == VerificationKind.VERIFIED:
        logger.info("Email verified for user %s", user_id)
        return SignUpResult(ok=True, user_id=user_id, next_screen=NextScreen.INTERESTS)
    if result.kind == VerificationKind.INVALID_TOKEN:
        logger.info("Verification token rejected for user %s", user_id)
        return SignUpResult(
            ok=False,
            user_id=user_id,
            error=result.message or str(VerificationKind.INVALID_TOKEN.label),
            next_screen=NextScreen.SIGN_IN,
        )
    return SignUpResult(
        ok=False,
        user_id=user_id,
        error=result.message or "Email verification failed",
    )
