from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Run the light service on the port configured by PORT"

    def add_arguments(self, parser) -> None:  # pragma: no cover - CLI plumbing
        parser.add_argument("--host", default="0.0.0.0")
        parser.add_argument("--port", type=int, default=None)
        parser.add_argument("--noreload", action="store_true")

    def handle(self, *args: Any, **options: Any) -> None:
        port = options["port"] or settings.PORT
        address = f"{options['host']}:{port}"
        self.stdout.write(self.style.SUCCESS(f"Server is running on http://{address}"))
        call_command("runserver", address, use_reloader=not options["noreload"])
