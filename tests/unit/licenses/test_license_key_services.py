"""
Unit tests for license key domain services.
"""

from dataclasses import replace
from datetime import timedelta

from core.domain.value_objects import ValidityReason
from licenses.domain.services import LicenseKeyValidator


class TestLicenseKeyValidator:
    """Tests for LicenseKeyValidator service."""

    def test_missing_record_is_not_found(self, fixed_clock):
        """Test classifying an absent record."""
        result = LicenseKeyValidator.classify(None, fixed_clock())

        assert result.valid is False
        assert result.reason == ValidityReason.NOT_FOUND
        assert result.message == "Key not found"

    def test_active_unexpired_record_is_valid(self, sample_license_key):
        """Test classifying a usable key."""
        now = sample_license_key.created_at + timedelta(days=1)

        result = LicenseKeyValidator.classify(sample_license_key, now)

        assert result.valid is True
        assert result.reason == ValidityReason.VALID
        assert result.message == "Key valid"

    def test_inactive_record(self, sample_license_key):
        """Test classifying a deactivated key."""
        inactive = replace(sample_license_key, active=False)

        result = LicenseKeyValidator.classify(inactive, sample_license_key.created_at)

        assert result.valid is False
        assert result.reason == ValidityReason.INACTIVE
        assert result.message == "Key inactive"

    def test_expired_record(self, sample_license_key):
        """Test classifying a key past its expiry."""
        now = sample_license_key.expires_at + timedelta(seconds=1)

        result = LicenseKeyValidator.classify(sample_license_key, now)

        assert result.valid is False
        assert result.reason == ValidityReason.EXPIRED
        assert result.message == "Key expired"

    def test_inactive_takes_priority_over_expired(self, sample_license_key):
        """Test a deactivated and expired key reports inactive."""
        inactive = replace(sample_license_key, active=False)
        now = sample_license_key.expires_at + timedelta(days=10)

        result = LicenseKeyValidator.classify(inactive, now)

        assert result.reason == ValidityReason.INACTIVE

    def test_expiry_instant_is_still_valid(self, sample_license_key):
        """Test a key is valid at exactly its expiry time."""
        result = LicenseKeyValidator.classify(sample_license_key, sample_license_key.expires_at)

        assert result.reason == ValidityReason.VALID

    def test_record_without_expiry_never_expires(self, sample_license_key):
        """Test keys without expires_at are valid at any time."""
        open_ended = replace(sample_license_key, expires_at=None)

        for years in (0, 1, 100, 5000):
            now = sample_license_key.created_at + timedelta(days=365 * years)
            result = LicenseKeyValidator.classify(open_ended, now)
            assert result.reason == ValidityReason.VALID

    def test_classification_is_repeatable(self, sample_license_key):
        """Test the same record and time always classify the same way."""
        now = sample_license_key.expires_at + timedelta(hours=1)

        results = {LicenseKeyValidator.classify(sample_license_key, now) for _ in range(100)}

        assert len(results) == 1
