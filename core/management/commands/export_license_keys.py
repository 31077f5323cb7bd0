"""
Django management command to export every license key as JSON.

Writes the same payload as the download endpoint.
"""

import json

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError
from rest_framework.renderers import JSONRenderer

from api.keys.serializers import LicenseKeySerializer
from core.domain.exceptions import DomainException
from licenses.application.handlers.list_license_keys_handler import ListLicenseKeysHandler
from licenses.application.queries.list_license_keys import ListLicenseKeysQuery
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)


class Command(BaseCommand):
    """Command to export license keys."""

    help = "Export all license keys as JSON"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--output",
            default=None,
            help="File to write (defaults to stdout)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        handler = ListLicenseKeysHandler(license_key_repository=DjangoLicenseKeyRepository())
        try:
            result = async_to_sync(handler.handle)(ListLicenseKeysQuery())
        except DomainException as e:
            raise CommandError(e.message) from e

        payload = json.loads(JSONRenderer().render(LicenseKeySerializer(result, many=True).data))
        content = json.dumps(payload, indent=2)

        output = options["output"]
        if not output:
            self.stdout.write(content)
            return

        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        self.stdout.write(self.style.SUCCESS(f"Exported {len(payload)} license key(s) to {output}"))
