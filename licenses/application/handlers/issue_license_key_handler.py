"""
IssueLicenseKeyHandler.

Handles the issue license key command.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from core.domain.exceptions import DuplicateKeyError, ExhaustedRetriesError
from core.metrics import license_key_issue_collisions_total, license_keys_issued_total
from licenses.application.commands.issue_license_key import IssueLicenseKeyCommand
from licenses.application.dto.license_key_dto import IssuedLicenseKeyDTO
from licenses.domain.license_key import (
    LicenseKey,
    generate_license_key,
    normalize_duration_days,
)
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class IssueLicenseKeyHandler:
    """Handler for IssueLicenseKeyCommand."""

    def __init__(
        self,
        license_key_repository: LicenseKeyRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        key_generator: Callable[[], str] = None,
        clock: Callable[[], datetime] = None,
    ):
        """
        Initialize handler.

        Args:
            license_key_repository: Store for issued keys
            max_attempts: Insert attempts before giving up on key collisions
            key_generator: Source of candidate key texts
            clock: Returns the current UTC time
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.license_key_repository = license_key_repository
        self.max_attempts = max_attempts
        self.key_generator = key_generator or generate_license_key
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def handle(self, command: IssueLicenseKeyCommand) -> IssuedLicenseKeyDTO:
        """
        Handle issue license key command.

        Args:
            command: IssueLicenseKeyCommand

        Returns:
            IssuedLicenseKeyDTO for the stored key

        Raises:
            ExhaustedRetriesError: If every generated key collided
            StorageError: If the store fails
        """
        duration_days = normalize_duration_days(command.duration_days_raw)
        license_key = LicenseKey.create(
            package=command.package_name,
            duration_days=duration_days,
            created_at=self.clock(),
            key_text=self.key_generator(),
        )

        for attempt in range(1, self.max_attempts + 1):
            try:
                saved_key = await self.license_key_repository.insert(license_key)
            except DuplicateKeyError:
                license_key_issue_collisions_total.inc()
                logger.warning(
                    "License key collision, regenerating",
                    extra={"attempt": attempt, "max_attempts": self.max_attempts},
                )
                license_key = license_key.with_key_text(self.key_generator())
                continue

            license_keys_issued_total.inc()
            logger.info(
                "License key issued",
                extra={
                    "license_key_id": saved_key.id,
                    "package": saved_key.package,
                    "duration_days": saved_key.duration_days,
                },
            )
            return IssuedLicenseKeyDTO.from_entity(saved_key)

        raise ExhaustedRetriesError(
            f"Could not generate a unique license key after {self.max_attempts} attempts"
        )
