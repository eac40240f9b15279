from __future__ import annotations

import threading

from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser

from camping.context import build_app_context
from camping.notifications.presenter import present_notifications
from camping.notifications.screen import NotificationsScreen
from camping.notifications.screen import ScreenState


class Command(BaseCommand):
    help = "Show the notifications screen; with --watch, keep printing live ones"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--watch",
            dest="watch",
            type=float,
            default=0.0,
            help="Seconds to keep the realtime channel open (0 prints and exits)",
        )

    def handle(self, *args, **options) -> str | None:
        watch: float = options.get("watch") or 0.0
        context = build_app_context()
        printed = 0

        def print_new_live(screen: NotificationsScreen) -> None:
            nonlocal printed
            messages = screen.messages
            if screen.state != ScreenState.READY or len(messages) <= printed:
                return
            view = present_notifications(screen.user, messages[printed:])
            for line in view.live:
                self.stdout.write(line.render())
            printed = len(messages)

        screen = NotificationsScreen(context)
        with screen:
            if screen.state == ScreenState.ERROR:
                self.stderr.write(self.style.ERROR(screen.error or ""))
                return None
            for line in screen.render_lines():
                self.stdout.write(line)
            printed = len(screen.messages)
            screen.on_change = print_new_live

            if watch > 0:
                try:
                    self.wait(watch)
                except KeyboardInterrupt:
                    self.stdout.write("")
            context.notification_flag.mark_seen()
        return None

    def wait(self, seconds: float) -> None:
        threading.Event().wait(seconds)
