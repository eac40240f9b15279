from __future__ import annotations

import getpass

from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser

from camping.integrations.api import get_api_client_from_settings
from camping.users.services import sign_up


class Command(BaseCommand):
    help = "Register a camping account and verify its email address"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--name", dest="name", default="", help="Full name")
        parser.add_argument("--email", dest="email", default="", help="Email address")
        parser.add_argument(
            "--password",
            dest="password",
            help="Password (omit to be prompted securely)",
        )
        parser.add_argument(
            "--confirm-password",
            dest="confirm_password",
            help="Password confirmation (omit to be prompted securely)",
        )

    def handle(self, *args, **options) -> str | None:
        password: str | None = options.get("password")
        confirm: str | None = options.get("confirm_password")
        if password is None:
            password = getpass.getpass("Password: ")
        if confirm is None:
            confirm = getpass.getpass("Confirm:  ")

        result = sign_up(
            {
                "name": options.get("name") or "",
                "email": options.get("email") or "",
                "password": password,
                "confirm_password": confirm,
            },
            get_api_client_from_settings(),
        )

        if result.ok:
            self.stdout.write(self.style.SUCCESS("Email verified successfully"))
        else:
            self.stderr.write(self.style.ERROR(result.error))
        if result.next_screen:
            self.stdout.write(f"next: {result.next_screen} user={result.user_id or ''}")
        return None
