"""Read-only snapshots of entities owned by the camping service.

Nothing here is persisted locally; instances are built from API payloads by
``camping.users.api.serializers`` and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class RelationshipStatus(models.TextChoices):
    ACCEPTED = "ACCEPTED", _("Accepted")
    REJECTED = "REJECTED", _("Rejected")
    PENDING = "PENDING", _("Pending")


class Favorite(models.TextChoices):
    YES = "Yes", _("Yes")
    NO = "No", _("No")


@dataclass(frozen=True)
class RelationshipRecord:
    """Join record between a user and a camping post."""

    user_id: str
    post_id: int | None = None
    status: RelationshipStatus = RelationshipStatus.PENDING
    favorite: Favorite = Favorite.NO
    notification: str = ""
    rating: float | None = None
    reviews: str = ""


@dataclass(frozen=True)
class User:
    id: str
    email: str = ""
    name: str = ""
    images_profile: tuple[str, ...] = ()
    join_camping_posts: tuple[RelationshipRecord, ...] = field(default=())

    @property
    def profile_image(self) -> str:
        if self.images_profile:
            return self.images_profile[0]
        return settings.CAMPING_DEFAULT_PROFILE_IMAGE
