"""
License key DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from licenses.domain.license_key import LicenseKey


@dataclass
class IssuedLicenseKeyDTO:
    """DTO returned when a key is issued."""

    id: int
    key: str
    package: Optional[str]
    duration_days: int
    created_at: datetime
    expires_at: Optional[datetime]

    @classmethod
    def from_entity(cls, license_key: LicenseKey) -> "IssuedLicenseKeyDTO":
        return cls(
            id=license_key.id,
            key=license_key.key_text,
            package=license_key.package,
            duration_days=license_key.duration_days,
            created_at=license_key.created_at,
            expires_at=license_key.expires_at,
        )


@dataclass
class LicenseKeyDTO:
    """DTO for a full license key record (list and download)."""

    id: int
    key_text: str
    package: Optional[str]
    duration_days: int
    created_at: datetime
    expires_at: Optional[datetime]
    active: bool

    @classmethod
    def from_entity(cls, license_key: LicenseKey) -> "LicenseKeyDTO":
        return cls(
            id=license_key.id,
            key_text=license_key.key_text,
            package=license_key.package,
            duration_days=license_key.duration_days,
            created_at=license_key.created_at,
            expires_at=license_key.expires_at,
            active=license_key.active,
        )


@dataclass
class VerificationResultDTO:
    """DTO for a verification response."""

    valid: bool
    message: str
    package: Optional[str] = None
