"""
ListLicenseKeysHandler.

Handler for listing every issued license key.
"""

from typing import List

from licenses.application.dto.license_key_dto import LicenseKeyDTO
from licenses.application.queries.list_license_keys import ListLicenseKeysQuery
from licenses.ports.license_key_repository import LicenseKeyRepository


class ListLicenseKeysHandler:
    """Handler for ListLicenseKeysQuery."""

    def __init__(self, license_key_repository: LicenseKeyRepository):
        """Initialize handler with repository."""
        self.license_key_repository = license_key_repository

    async def handle(self, query: ListLicenseKeysQuery) -> List[LicenseKeyDTO]:
        """
        Handle list license keys query.

        Args:
            query: ListLicenseKeysQuery

        Returns:
            List of LicenseKeyDTO, newest first
        """
        license_keys = await self.license_key_repository.list_all()
        return [LicenseKeyDTO.from_entity(license_key) for license_key in license_keys]
