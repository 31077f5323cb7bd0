"""
LicenseKey domain entity.

This is the core domain entity representing an issued license key.
It contains business logic and is independent of infrastructure.
"""

import base64
import math
import re
import secrets
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from core.domain.exceptions import ValidationError
from core.domain.value_objects import KEY_ALPHABET, KEY_LENGTH, KeyText

SECONDS_PER_DAY = 86400
MIN_DURATION_DAYS = 1
ENTROPY_BYTES = 12

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def generate_license_key() -> str:
    """
    Generate a human-friendly license key of 16 characters from [A-Z0-9].

    Twelve random bytes are base64 encoded, stripped of punctuation and
    upper-cased. If stripping leaves fewer than 16 characters the key is
    topped up from the same alphabet.

    Returns:
        Generated license key string
    """
    raw = base64.b64encode(secrets.token_bytes(ENTROPY_BYTES)).decode("ascii")
    key = _NON_ALPHANUMERIC.sub("", raw).upper()[:KEY_LENGTH]
    padding = "".join(secrets.choice(KEY_ALPHABET) for _ in range(KEY_LENGTH - len(key)))
    return key + padding


def normalize_duration_days(raw: Any) -> int:
    """
    Coerce a caller-supplied duration to whole days, at least one.

    Integers are taken as-is, floats are truncated and strings are parsed by
    their leading integer ("30", " 7 ", "30days"). Anything else, or a
    result below one, yields one day.

    Args:
        raw: Duration as received from the caller

    Returns:
        Duration in days (>= 1)

    Raises:
        ValidationError: If a numeric string has too many digits to convert
    """
    if raw is None or isinstance(raw, bool):
        return MIN_DURATION_DAYS

    days = None
    if isinstance(raw, int):
        days = raw
    elif isinstance(raw, float):
        if math.isfinite(raw):
            days = int(raw)
    elif isinstance(raw, str):
        match = _LEADING_INTEGER.match(raw)
        if match:
            try:
                days = int(match.group(1))
            except ValueError as e:
                # Beyond the interpreter's integer string conversion limit
                raise ValidationError("durationDays is too large") from e

    if days is None or days < MIN_DURATION_DAYS:
        return MIN_DURATION_DAYS
    return days


def compute_expires_at(created_at: datetime, duration_days: int) -> datetime:
    """
    Compute the expiry of a key as a fixed elapsed-time window.

    Args:
        created_at: Creation timestamp
        duration_days: Validity window in days

    Returns:
        created_at plus duration_days * 86400 seconds

    Raises:
        ValidationError: If the window runs past the largest representable date
    """
    try:
        return created_at + timedelta(seconds=duration_days * SECONDS_PER_DAY)
    except OverflowError as e:
        raise ValidationError(f"durationDays is too large: {duration_days}") from e


@dataclass(frozen=True)
class LicenseKey:
    """
    LicenseKey domain entity.

    id is None until the key has been stored.
    """

    id: Optional[int]
    key_text: str
    package: Optional[str]
    duration_days: int
    created_at: datetime
    expires_at: Optional[datetime]
    active: bool = True

    @classmethod
    def create(
        cls,
        package: Optional[str],
        duration_days: int,
        created_at: Optional[datetime] = None,
        key_text: Optional[str] = None,
    ) -> "LicenseKey":
        """
        Create a new, not yet stored, LicenseKey entity.

        Args:
            package: Package label the key unlocks
            duration_days: Normalized validity window in days
            created_at: Creation time (defaults to now, UTC)
            key_text: Key text (generated if not provided)

        Returns:
            LicenseKey entity instance
        """
        if duration_days < MIN_DURATION_DAYS:
            raise ValueError("Duration must be at least one day")
        created_at = created_at or datetime.now(timezone.utc)
        return cls(
            id=None,
            key_text=str(KeyText(key_text or generate_license_key())),
            package=package or None,
            duration_days=duration_days,
            created_at=created_at,
            expires_at=compute_expires_at(created_at, duration_days),
        )

    def with_key_text(self, key_text: str) -> "LicenseKey":
        """Return a copy carrying a different key text."""
        return replace(self, key_text=str(KeyText(key_text)))

    def is_expired(self, now: datetime) -> bool:
        """
        Check whether the key has expired at the given time.

        Keys without an expiry never expire.
        """
        return self.expires_at is not None and self.expires_at < now
