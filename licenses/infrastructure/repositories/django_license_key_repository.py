"""
Django implementation of LicenseKeyRepository port.

This adapter converts between domain entities and Django ORM models.
"""
import logging
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import DatabaseError, IntegrityError, transaction

from core.domain.exceptions import DuplicateKeyError, StorageError
from licenses.domain.license_key import LicenseKey
from licenses.infrastructure.models import LicenseKey as LicenseKeyModel
from licenses.ports.license_key_repository import LicenseKeyRepository

logger = logging.getLogger(__name__)


class DjangoLicenseKeyRepository(LicenseKeyRepository):
    """
    Django ORM implementation of LicenseKeyRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Translates database failures into domain exceptions
    3. Implements repository interface
    """

    def _to_domain(self, model: LicenseKeyModel) -> LicenseKey:
        """
        Convert Django model to domain entity.

        Args:
            model: Django LicenseKey model

        Returns:
            LicenseKey domain entity
        """
        return model.to_domain()

    def _storage_error(self, operation: str, error: DatabaseError) -> StorageError:
        logger.error("License key store %s failed: %s", operation, error, exc_info=True)
        return StorageError(details=str(error))

    @sync_to_async
    def insert(self, license_key: LicenseKey) -> LicenseKey:
        """
        Store a new license key.

        Args:
            license_key: LicenseKey entity to store

        Returns:
            Stored license key entity with its assigned id
        """
        try:
            # Savepoint so a unique violation leaves an outer transaction usable
            with transaction.atomic():
                model = LicenseKeyModel.objects.create(
                    key_text=license_key.key_text,
                    package=license_key.package,
                    duration_days=license_key.duration_days,
                    created_at=license_key.created_at,
                    expires_at=license_key.expires_at,
                    active=True,
                )
        except IntegrityError as e:
            raise DuplicateKeyError(f"License key {license_key.key_text} already exists") from e
        except DatabaseError as e:
            raise self._storage_error("insert", e) from e
        return self._to_domain(model)

    @sync_to_async
    def list_all(self) -> List[LicenseKey]:
        """
        List every license key, newest first.

        Returns:
            List of LicenseKey entities
        """
        try:
            models = list(LicenseKeyModel.objects.order_by("-created_at", "-id"))
        except DatabaseError as e:
            raise self._storage_error("list", e) from e
        return [self._to_domain(model) for model in models]

    @sync_to_async
    def find_by_key_text(self, key_text: str) -> Optional[LicenseKey]:
        """
        Find a license key by key text.

        Args:
            key_text: License key string

        Returns:
            LicenseKey entity or None if not found
        """
        try:
            model = LicenseKeyModel.objects.get(key_text=key_text)
        except LicenseKeyModel.DoesNotExist:
            return None
        except DatabaseError as e:
            raise self._storage_error("lookup", e) from e
        return self._to_domain(model)
