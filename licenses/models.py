"""
Model registry for the licenses app.

Django discovers models through ``<app>.models``; the model itself lives
in the infrastructure layer.
"""
from licenses.infrastructure.models import LicenseKey  # noqa: F401
