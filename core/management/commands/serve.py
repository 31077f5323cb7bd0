"""
Django management command to run the HTTP server on the configured port.
"""

import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to serve the API on HOST:PORT from settings."""

    help = "Run the license key server on the configured host and port"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
        parser.add_argument("--port", type=int, default=settings.PORT, help="Port to bind")
        parser.add_argument(
            "--skip-migrate",
            action="store_true",
            help="Don't apply pending migrations before serving",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if not options["skip_migrate"]:
            call_command("migrate", interactive=False, verbosity=0)

        addrport = f"{options['host']}:{options['port']}"
        logger.info("License key server starting", extra={"addrport": addrport})
        self.stdout.write(f"License key server running on :{options['port']}")
        call_command("runserver", addrport, use_reloader=False)
