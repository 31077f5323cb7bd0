"""
ASGI config for LicenseKeyService.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "LicenseKeyService.settings.dev")

application = get_asgi_application()
