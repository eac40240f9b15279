from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any

from django.conf import settings

if TYPE_CHECKING:
    from camping.users.types import User


@dataclass(frozen=True)
class UserCard:
    """A user search result: display name and avatar."""

    name: str
    image: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> UserCard:
        return cls(
            name=str(payload.get("name") or ""),
            image=str(payload.get("image") or settings.CAMPING_DEFAULT_PROFILE_IMAGE),
        )

    @classmethod
    def from_user(cls, user: User) -> UserCard:
        return cls(name=user.name, image=user.profile_image)

    def render(self) -> str:
        return f"{self.name} [{self.image}]"
