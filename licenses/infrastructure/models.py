"""
LicenseKey model.
"""
from django.db import models

from licenses.domain.license_key import LicenseKey as LicenseKeyEntity


class LicenseKey(models.Model):
    """
    An issued license key.

    Rows are never deleted; only the active flag changes after creation.
    """

    id = models.BigAutoField(primary_key=True)
    key_text = models.CharField(max_length=64, unique=True)
    package = models.TextField(null=True, blank=True)
    duration_days = models.IntegerField(default=1)
    created_at = models.DateTimeField(db_index=True)
    expires_at = models.DateTimeField(null=True, blank=True)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "keys"
        ordering = ["-created_at", "-id"]
        verbose_name = "license key"

    def __str__(self):
        return self.key_text

    def to_domain(self) -> LicenseKeyEntity:
        """Convert the row to a LicenseKey domain entity."""
        return LicenseKeyEntity(
            id=self.id,
            key_text=self.key_text,
            package=self.package,
            duration_days=self.duration_days,
            created_at=self.created_at,
            expires_at=self.expires_at,
            active=self.active,
        )
