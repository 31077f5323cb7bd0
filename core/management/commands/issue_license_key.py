"""
Django management command to issue a license key from the command line.
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from licenses.application.commands.issue_license_key import IssueLicenseKeyCommand
from licenses.application.handlers.issue_license_key_handler import IssueLicenseKeyHandler
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)


class Command(BaseCommand):
    """Command to issue a license key."""

    help = "Issue a new license key"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("--package", default=None, help="Package the key unlocks")
        parser.add_argument("--days", default="1", help="Validity window in days")

    def handle(self, *args, **options):
        """Execute the command."""
        handler = IssueLicenseKeyHandler(
            license_key_repository=DjangoLicenseKeyRepository(),
            max_attempts=settings.LICENSE_KEY_MAX_ISSUE_ATTEMPTS,
        )
        command = IssueLicenseKeyCommand(
            package_name=options["package"],
            duration_days_raw=options["days"],
        )

        try:
            result = async_to_sync(handler.handle)(command)
        except DomainException as e:
            raise CommandError(e.message) from e

        self.stdout.write(self.style.SUCCESS(f"Issued license key {result.key}"))
        self.stdout.write(f"  package:    {result.package or '-'}")
        self.stdout.write(f"  duration:   {result.duration_days} day(s)")
        self.stdout.write(f"  expires at: {result.expires_at.isoformat()}")
