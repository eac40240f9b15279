"""Session handling: the persisted credential token and its decoding.

The token is an HS256 JWT issued by the camping service at login or
registration. This module only ever reads it; it is invalidated externally.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.cache import caches
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
TOKEN_KEY = "token"


class SessionError(Exception):
    """Base for session failures; ``message`` is shown to the user as is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoSessionError(SessionError):
    """No usable token is stored; the user has to log in."""


class InvalidSessionError(SessionError):
    """A token is stored but does not identify a user."""


class CredentialStore:
    """Key/value credential storage backed by a Django cache alias."""

    def __init__(self, cache=None):
        self._cache = cache or caches[settings.CAMPING_CREDENTIALS_CACHE]

    def get_token(self) -> str | None:
        return self._cache.get(TOKEN_KEY)

    def set_token(self, token: str) -> None:
        self._cache.set(TOKEN_KEY, token, timeout=None)

    def clear(self) -> None:
        self._cache.delete(TOKEN_KEY)


def get_token_backend() -> TokenBackend:
    return TokenBackend("HS256", signing_key=settings.CAMPING_JWT_SIGNING_KEY)


def strip_bearer(token: str) -> str:
    if token.startswith(BEARER_PREFIX):
        return token[len(BEARER_PREFIX) :]
    return token


def decode_session(
    store: CredentialStore,
    backend: TokenBackend | None = None,
) -> str:
    """Return the user id carried by the stored token.

    Raises NoSessionError when nothing is stored and InvalidSessionError when
    the token cannot be decoded or has no ``id`` claim.
    """
    try:
        raw = store.get_token()
    except OSError as exc:
        logger.warning("Credential store read failed: %s", exc)
        msg = "Failed to fetch token"
        raise NoSessionError(msg) from exc

    if not raw:
        msg = "Token not found"
        raise NoSessionError(msg)

    backend = backend or get_token_backend()
    try:
        claims = backend.decode(strip_bearer(raw), verify=True)
    except TokenBackendError as exc:
        logger.info("Stored token rejected: %s", exc)
        msg = "Failed to decode token"
        raise InvalidSessionError(msg) from exc

    user_id = claims.get("id") if isinstance(claims, dict) else None
    if user_id is None or user_id == "":
        msg = "Failed to decode token or token does not contain ID"
        raise InvalidSessionError(msg)
    return str(user_id)
