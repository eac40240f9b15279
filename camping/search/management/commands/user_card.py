from __future__ import annotations

from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser

from camping.integrations.api import get_api_client_from_settings
from camping.search.cards import UserCard
from camping.users.services import UserFetchError
from camping.users.services import fetch_user


class Command(BaseCommand):
    help = "Fetch a user profile and print its search card"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("user_id", help="Id of the user to show")

    def handle(self, *args, **options) -> str | None:
        try:
            user = fetch_user(options["user_id"], get_api_client_from_settings())
        except UserFetchError as exc:
            self.stderr.write(self.style.ERROR(exc.message))
            return None
        self.stdout.write(UserCard.from_user(user).render())
        return None
