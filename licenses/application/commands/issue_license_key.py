"""
IssueLicenseKeyCommand.

Command to issue a new license key for a package.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class IssueLicenseKeyCommand:
    """
    Command to issue a license key.

    duration_days_raw is passed through untouched; the handler
    normalizes it to a whole number of days.
    """

    package_name: Optional[str] = None
    duration_days_raw: Any = None
