"""
License key domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.value_objects import ValidityReason
from licenses.domain.license_key import LicenseKey


@dataclass(frozen=True)
class ValidityResult:
    """Outcome of a license key classification."""

    valid: bool
    reason: ValidityReason

    @property
    def message(self) -> str:
        return self.reason.message


class LicenseKeyValidator:
    """Domain service for license key validation."""

    @staticmethod
    def classify(record: Optional[LicenseKey], now: datetime) -> ValidityResult:
        """
        Classify a stored license key at the given time.

        Checks run in priority order: a missing record, then the
        administrative active flag, then expiry.

        Args:
            record: Stored license key, or None when the lookup found nothing
            now: Reference time

        Returns:
            ValidityResult
        """
        if record is None:
            return ValidityResult(valid=False, reason=ValidityReason.NOT_FOUND)
        if not record.active:
            return ValidityResult(valid=False, reason=ValidityReason.INACTIVE)
        if record.is_expired(now):
            return ValidityResult(valid=False, reason=ValidityReason.EXPIRED)
        return ValidityResult(valid=True, reason=ValidityReason.VALID)
