from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PushedMessage:
    sender_id: str | None
    text: str


def build_pushed_message(payload: Any) -> PushedMessage:
    """Turn a ``notification`` event payload into a PushedMessage.

    The service sends ``{"userId": ..., "message": ...}``; a bare string is
    taken as the message text.
    """

    if isinstance(payload, dict):
        sender = payload.get("userId")
        text = payload.get("message")
        return PushedMessage(
            sender_id=None if sender is None else str(sender),
            text="" if text is None else str(text),
        )
    return PushedMessage(sender_id=None, text="" if payload is None else str(payload))
