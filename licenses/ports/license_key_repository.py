"""
LicenseKey repository port (interface).

This defines the contract for license key persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from licenses.domain.license_key import LicenseKey


class LicenseKeyRepository(ABC):
    """
    Abstract repository for LicenseKey entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def insert(self, license_key: LicenseKey) -> LicenseKey:
        """
        Store a new license key.

        Args:
            license_key: LicenseKey entity to store (id is ignored)

        Returns:
            Stored license key entity with its assigned id

        Raises:
            DuplicateKeyError: If the key text already exists
            StorageError: On any other storage failure
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[LicenseKey]:
        """
        List every license key, most recently created first.

        Returns:
            List of LicenseKey entities (empty when the store is empty)
        """
        pass

    @abstractmethod
    async def find_by_key_text(self, key_text: str) -> Optional[LicenseKey]:
        """
        Find a license key by its exact key text.

        Args:
            key_text: License key string

        Returns:
            LicenseKey entity or None if not found
        """
        pass
