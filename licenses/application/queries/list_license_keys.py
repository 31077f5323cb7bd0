"""
ListLicenseKeysQuery.

Query to list every issued license key.
"""
from dataclasses import dataclass


@dataclass
class ListLicenseKeysQuery:
    """Query to list all license keys, newest first."""
