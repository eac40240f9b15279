from __future__ import annotations

from django.core.management.base import BaseCommand
from django.core.management.base import CommandError
from django.core.management.base import CommandParser

from camping.users.session import CredentialStore


class Command(BaseCommand):
    help = "Persist the session token issued at login, or clear it"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "token",
            nargs="?",
            help="Token as returned by the service (a 'Bearer ' prefix is fine)",
        )
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Forget the stored token",
        )

    def handle(self, *args, **options) -> str | None:
        store = CredentialStore()
        if options.get("clear"):
            store.clear()
            self.stdout.write(self.style.SUCCESS("Token cleared."))
            return None

        token: str | None = options.get("token")
        if not token:
            msg = "Provide a token or --clear."
            raise CommandError(msg)
        store.set_token(token)
        self.stdout.write(self.style.SUCCESS("Token stored."))
        return None
