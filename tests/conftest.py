"""
Pytest configuration and shared fixtures.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from core.domain.exceptions import DuplicateKeyError
from licenses.domain.license_key import LicenseKey
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)
from licenses.ports.license_key_repository import LicenseKeyRepository

FIXED_NOW = datetime(2024, 3, 10, 12, 0, 0, tzinfo=timezone.utc)


class InMemoryLicenseKeyRepository(LicenseKeyRepository):
    """Dict-backed LicenseKeyRepository for handler tests."""

    def __init__(self):
        self._records: Dict[str, LicenseKey] = {}
        self._next_id = 1
        self.calls: List[str] = []

    async def insert(self, license_key: LicenseKey) -> LicenseKey:
        self.calls.append("insert")
        if license_key.key_text in self._records:
            raise DuplicateKeyError()
        stored = replace(license_key, id=self._next_id, active=True)
        self._next_id += 1
        self._records[stored.key_text] = stored
        return stored

    async def list_all(self) -> List[LicenseKey]:
        self.calls.append("list_all")
        return sorted(
            self._records.values(),
            key=lambda record: (record.created_at, record.id),
            reverse=True,
        )

    async def find_by_key_text(self, key_text: str) -> Optional[LicenseKey]:
        self.calls.append("find_by_key_text")
        return self._records.get(key_text)

    def deactivate(self, key_text: str):
        self._records[key_text] = replace(self._records[key_text], active=False)


@pytest.fixture
def memory_repository():
    """Fixture for an in-memory LicenseKeyRepository."""
    return InMemoryLicenseKeyRepository()


@pytest.fixture
def license_key_repository():
    """Fixture for the Django LicenseKeyRepository."""
    return DjangoLicenseKeyRepository()


@pytest.fixture
def fixed_clock():
    """Fixture for a clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def sample_license_key():
    """Fixture for a sample, not yet stored, LicenseKey entity."""
    return LicenseKey.create(package="pro", duration_days=30, created_at=FIXED_NOW)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
