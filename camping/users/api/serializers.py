from __future__ import annotations

from typing import Any

from rest_framework import serializers

from camping.users.types import Favorite
from camping.users.types import RelationshipRecord
from camping.users.types import RelationshipStatus
from camping.users.types import User
from camping.users.validators import is_valid_email
from camping.users.validators import is_valid_password


class RelationshipRecordSerializer(serializers.Serializer):
    """One entry of ``joinCampingPosts`` in the profile payload.

    Nested ``user``/``post`` objects sent by the service are ignored.
    """

    userId = serializers.CharField(  # noqa: N815 - wire name
        source="user_id",
        required=False,
        allow_blank=True,
        default="",
    )
    postId = serializers.IntegerField(  # noqa: N815 - wire name
        source="post_id",
        required=False,
        allow_null=True,
        default=None,
    )
    status = serializers.ChoiceField(
        choices=RelationshipStatus.choices,
        required=False,
        default=RelationshipStatus.PENDING,
    )
    favorite = serializers.ChoiceField(
        choices=Favorite.choices,
        required=False,
        default=Favorite.NO,
    )
    notification = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        default="",
    )
    rating = serializers.FloatField(required=False, allow_null=True, default=None)
    reviews = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        default="",
    )

    def to_record(self, attrs: dict[str, Any]) -> RelationshipRecord:
        return RelationshipRecord(
            user_id=attrs["user_id"],
            post_id=attrs["post_id"],
            status=RelationshipStatus(attrs["status"]),
            favorite=Favorite(attrs["favorite"]),
            notification=attrs["notification"] or "",
            rating=attrs["rating"],
            reviews=attrs["reviews"] or "",
        )


class UserSnapshotSerializer(serializers.Serializer):
    """Parses the ``user`` object returned by ``GET /api/users/{id}``."""

    id = serializers.CharField()
    email = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
    )
    name = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
    )
    imagesProfile = serializers.ListField(  # noqa: N815 - wire name
        child=serializers.CharField(allow_null=True),
        source="images_profile",
        required=False,
        allow_null=True,
        default=list,
    )
    joinCampingPosts = RelationshipRecordSerializer(  # noqa: N815 - wire name
        many=True,
        source="join_camping_posts",
        required=False,
        allow_null=True,
        default=list,
    )

    def create(self, validated_data: dict[str, Any]) -> User:
        record_serializer = RelationshipRecordSerializer()
        return User(
            id=validated_data["id"],
            email=validated_data["email"] or "",
            name=validated_data["name"] or "",
            images_profile=tuple(
                image for image in validated_data["images_profile"] or () if image
            ),
            join_camping_posts=tuple(
                record_serializer.to_record(attrs)
                for attrs in validated_data["join_camping_posts"] or ()
            ),
        )


class SignUpSerializer(serializers.Serializer):
    """Client-side checks run before anything is sent to the service.

    Checks run in a fixed order and stop at the first failure so the form can
    show a single inline message.
    """

    REQUIRED_MESSAGE = "All fields are required"
    EMAIL_MESSAGE = "Please enter a valid email address"
    PASSWORD_MESSAGE = (
        "Password must be at least 7 characters long, and include uppercase, "
        "lowercase, digit, and special character"
    )
    MISMATCH_MESSAGE = "Passwords do not match"

    name = serializers.CharField(
        required=False,
        allow_blank=True,
        trim_whitespace=False,
        default="",
    )
    email = serializers.CharField(
        required=False,
        allow_blank=True,
        trim_whitespace=False,
        default="",
    )
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        trim_whitespace=False,
        default="",
    )
    confirm_password = serializers.CharField(
        required=False,
        allow_blank=True,
        trim_whitespace=False,
        default="",
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        fields = ("name", "email", "password", "confirm_password")
        if not all(attrs.get(name) for name in fields):
            raise serializers.ValidationError(self.REQUIRED_MESSAGE)
        if not is_valid_email(attrs["email"]):
            raise serializers.ValidationError(self.EMAIL_MESSAGE)
        if not is_valid_password(attrs["password"]):
            raise serializers.ValidationError(self.PASSWORD_MESSAGE)
        if attrs["password"] != attrs["confirm_password"]:
            raise serializers.ValidationError(self.MISMATCH_MESSAGE)
        return attrs

    def to_registration_payload(self) -> dict[str, str]:
        data = self.validated_data
        return {
            "name": data["name"],
            "email": data["email"],
            "password": data["password"],
            "confirmPassword": data["confirm_password"],
        }

    @property
    def first_error(self) -> str:
        for messages in self.errors.values():
            if messages:
                return str(messages[0])
        return ""
