"""
VerifyLicenseKeyQuery.

Query to check whether a license key currently unlocks its package.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class VerifyLicenseKeyQuery:
    """Query to verify a license key."""

    key: Optional[str]
