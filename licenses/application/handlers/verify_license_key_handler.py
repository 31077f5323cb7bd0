"""
VerifyLicenseKeyHandler.

Handler for verifying a license key.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from core.domain.exceptions import ValidationError
from core.metrics import license_key_verifications_total
from licenses.application.dto.license_key_dto import VerificationResultDTO
from licenses.application.queries.verify_license_key import VerifyLicenseKeyQuery
from licenses.domain.services import LicenseKeyValidator
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)

NO_KEY_PROVIDED = "No key provided"


class VerifyLicenseKeyHandler:
    """Handler for VerifyLicenseKeyQuery."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        clock: Callable[[], datetime] = None,
    ):
        """Initialize handler with repository."""
        self.license_key_repository = license_key_repository
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def handle(self, query: VerifyLicenseKeyQuery) -> VerificationResultDTO:
        """
        Handle verify license key query.

        A key that is not in the store is a normal, invalid result.

        Args:
            query: VerifyLicenseKeyQuery

        Returns:
            VerificationResultDTO

        Raises:
            ValidationError: If no key was provided
            StorageError: If the store fails
        """
        if not query.key:
            raise ValidationError(NO_KEY_PROVIDED)

        record = await self.license_key_repository.find_by_key_text(query.key)
        result = LicenseKeyValidator.classify(record, self.clock())

        license_key_verifications_total.labels(reason=result.reason.value).inc()
        logger.info(
            "License key verified",
            extra={
                "reason": result.reason.value,
                "license_key_id": record.id if record else None,
            },
        )

        return VerificationResultDTO(
            valid=result.valid,
            message=result.message,
            package=record.package if result.valid else None,
        )
