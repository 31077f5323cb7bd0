"""
App configuration for License Key Service.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class LicenseKeyServiceConfig(AppConfig):
    """App configuration for LicenseKeyService."""

    name = "LicenseKeyService"
    verbose_name = "License Key Service"

    def ready(self):
        """Called when Django starts."""
        if not getattr(settings, "OTEL_ENABLED", False):
            return

        # Only setup once (Django's autoreloader calls ready() in both processes)
        if getattr(self, "_initialized", False):
            return

        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
            self._initialized = True
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Tracing is optional, the service keeps running without it
            logger.warning("Failed to setup OpenTelemetry: %s", e)
