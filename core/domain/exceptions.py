"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainException):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="VALIDATION_ERROR")


class LicenseKeyException(DomainException):
    """Base exception for license-key-related errors."""

    pass


class LicenseKeyNotFoundError(LicenseKeyException):
    """Raised when a license key is not found."""

    def __init__(self, message: str = "Key not found"):
        super().__init__(message, code="LICENSE_KEY_NOT_FOUND")


class DuplicateKeyError(LicenseKeyException):
    """Raised when a key text already exists in the store."""

    def __init__(self, message: str = "License key already exists"):
        super().__init__(message, code="DUPLICATE_KEY")


class ExhaustedRetriesError(LicenseKeyException):
    """Raised when no unique key could be issued within the attempt limit."""

    def __init__(self, message: str = "Could not generate a unique license key"):
        super().__init__(message, code="EXHAUSTED_RETRIES")


class StorageError(DomainException):
    """Raised when the underlying store fails."""

    def __init__(self, message: str = "DB error", details: str = None):
        super().__init__(message, code="STORAGE_ERROR")
        self.details = details
