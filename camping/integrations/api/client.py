from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)

# Statuses the verify-email endpoint answers with when the token itself is bad.
INVALID_TOKEN_STATUSES = frozenset(
    {
        HTTPStatus.BAD_REQUEST,
        HTTPStatus.UNAUTHORIZED,
        HTTPStatus.FORBIDDEN,
        HTTPStatus.NOT_FOUND,
        HTTPStatus.GONE,
    },
)


class ApiNotConfiguredError(Exception):
    """Raised when the camping API base URL is missing."""


class ApiError(Exception):
    """A request to the camping API failed.

    ``status`` is the HTTP status code, or None when the request never got an
    answer (DNS, refused connection, timeout).
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status


class VerificationKind(models.TextChoices):
    VERIFIED = "verified", _("Verified")
    INVALID_TOKEN = "invalid_token", _("Invalid or expired token")
    FAILED = "failed", _("Failed")


@dataclass(frozen=True)
class VerificationResult:
    kind: VerificationKind
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == VerificationKind.VERIFIED


@dataclass
class ApiConfig:
    base_url: str | None = None
    timeout: float = 10.0


class CampingApiClient:
    """JSON-over-HTTP client for the camping service REST API.

    Every failure is raised as :class:`ApiError`; callers decide how it maps to
    screen state.
    """

    def __init__(self, cfg: ApiConfig):
        if not cfg.base_url:
            msg = "CAMPING_API_BASE_URL missing"
            raise ApiNotConfiguredError(msg)
        self.cfg = cfg

    def build_url(self, path: str, query: dict[str, str] | None = None) -> str:
        url = f"{self.cfg.base_url.rstrip('/')}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{urllib.parse.urlencode(query)}"
        return url

    def request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        query: dict[str, str] | None = None,
    ) -> Any:
        url = self.build_url(path, query)
        data = None
        headers = {"Accept": "application/json"}
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"
        req = urllib.request.Request(  # noqa: S310 - base URL comes from settings
            url,
            data=data,
            headers=headers,
            method=method,
        )
        logger.debug("%s %s", method, url)
        try:
            with urllib.request.urlopen(req, timeout=self.cfg.timeout) as resp:  # noqa: S310 - base URL comes from settings
                status = resp.status
                raw = resp.read()
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", "ignore")
            message = _error_message_from_body(body) or f"HTTP {e.code}"
            logger.warning("%s %s failed with %s: %s", method, url, e.code, message)
            raise ApiError(message, status=e.code) from e
        except (urllib.error.URLError, OSError) as e:
            reason = getattr(e, "reason", e)
            logger.warning("%s %s unreachable: %s", method, url, reason)
            raise ApiError(str(reason)) from e

        if not raw:
            return {}
        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as e:
            msg = "Invalid JSON in response"
            raise ApiError(msg, status=status) from e

    def get_user(self, user_id: str) -> dict[str, Any]:
        path = f"/api/users/{urllib.parse.quote(str(user_id), safe='')}"
        return self.request("GET", path)

    def register_user(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self.request("POST", "/api/users/register", payload=payload)

    def request_email_verification(self, email: str) -> dict[str, Any]:
        return self.request(
            "POST",
            "/api/email/request-verification",
            payload={"email": email},
        )

    def verify_email(self, token: str) -> VerificationResult:
        """Confirm an email verification token.

        Never raises: the outcome is reported as a :class:`VerificationKind` so
        callers branch on the kind rather than on error text.
        """
        try:
            self.request("GET", "/api/email/verify-email", query={"token": token})
        except ApiError as exc:
            if exc.status in INVALID_TOKEN_STATUSES:
                return VerificationResult(VerificationKind.INVALID_TOKEN, exc.message)
            return VerificationResult(VerificationKind.FAILED, exc.message)
        return VerificationResult(VerificationKind.VERIFIED)


def _error_message_from_body(body: str) -> str:
    if not body:
        return ""
    try:
        obj = json.loads(body)
    except ValueError:
        return body.strip()
    if isinstance(obj, dict):
        for key in ("message", "error", "detail"):
            value = obj.get(key)
            if isinstance(value, str) and value:
                return value
    return ""


def get_api_client_from_settings() -> CampingApiClient:
    cfg = ApiConfig(
        base_url=getattr(settings, "CAMPING_API_BASE_URL", None),
        timeout=float(getattr(settings, "CAMPING_API_TIMEOUT", 10.0)),
    )
    return CampingApiClient(cfg)
