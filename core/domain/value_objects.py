"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import string
from abc import ABC
from dataclasses import dataclass
from enum import Enum

KEY_ALPHABET = string.ascii_uppercase + string.digits
KEY_LENGTH = 16


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class KeyText(ValueObject):
    """License key text: 16 characters of [A-Z0-9]."""

    value: str

    def __post_init__(self):
        """Validate key format."""
        if not self.value or len(self.value) != KEY_LENGTH:
            raise ValueError(f"License key must be {KEY_LENGTH} characters: {self.value!r}")
        if any(ch not in KEY_ALPHABET for ch in self.value):
            raise ValueError(f"Invalid license key characters: {self.value!r}")

    def __str__(self) -> str:
        """Return key as string."""
        return self.value


class ValidityReason(Enum):
    """Outcome of classifying a license key."""

    NOT_FOUND = "not_found"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    VALID = "valid"

    @property
    def message(self) -> str:
        """Human-readable message returned to verifying clients."""
        return _REASON_MESSAGES[self]

    def __str__(self) -> str:
        """Return reason as string."""
        return self.value


_REASON_MESSAGES = {
    ValidityReason.NOT_FOUND: "Key not found",
    ValidityReason.INACTIVE: "Key inactive",
    ValidityReason.EXPIRED: "Key expired",
    ValidityReason.VALID: "Key valid",
}
