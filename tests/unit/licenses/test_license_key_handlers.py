"""
Unit tests for license key application handlers.
"""
import asyncio
import re
from datetime import timedelta

import pytest

from core.domain.exceptions import ExhaustedRetriesError, ValidationError
from licenses.application.commands.issue_license_key import IssueLicenseKeyCommand
from licenses.application.handlers.issue_license_key_handler import IssueLicenseKeyHandler
from licenses.application.handlers.list_license_keys_handler import ListLicenseKeysHandler
from licenses.application.handlers.verify_license_key_handler import VerifyLicenseKeyHandler
from licenses.application.queries.list_license_keys import ListLicenseKeysQuery
from licenses.application.queries.verify_license_key import VerifyLicenseKeyQuery

KEY_PATTERN = re.compile(r"^[A-Z0-9]{16}$")


def _sequence_generator(*keys):
    """Return a key generator yielding the given keys in order."""
    iterator = iter(keys)
    return lambda: next(iterator)


@pytest.mark.asyncio
class TestIssueLicenseKeyHandler:
    """Tests for IssueLicenseKeyHandler."""

    async def test_issue_license_key_success(self, memory_repository, fixed_clock):
        """Test issuing a key stores it and returns the stored record."""
        handler = IssueLicenseKeyHandler(license_key_repository=memory_repository, clock=fixed_clock)

        result = await handler.handle(
            IssueLicenseKeyCommand(package_name="pro", duration_days_raw=30)
        )

        assert result.id == 1
        assert KEY_PATTERN.match(result.key)
        assert result.package == "pro"
        assert result.duration_days == 30
        assert result.created_at == fixed_clock()
        assert (result.expires_at - result.created_at).total_seconds() == 2_592_000

        stored = await memory_repository.find_by_key_text(result.key)
        assert stored.expires_at == fixed_clock() + timedelta(days=30)

    @pytest.mark.parametrize("raw", ["0", "-5", "abc", None])
    async def test_issue_normalizes_duration(self, memory_repository, raw):
        """Test unusable durations issue one-day keys."""
        handler = IssueLicenseKeyHandler(license_key_repository=memory_repository)

        result = await handler.handle(IssueLicenseKeyCommand(duration_days_raw=raw))

        assert result.duration_days == 1
        assert (result.expires_at - result.created_at).total_seconds() == 86400

    @pytest.mark.parametrize("raw", [3_000_000, "3000000"])
    async def test_issue_rejects_duration_past_max_date(self, memory_repository, raw):
        """Test an overflowing duration is a validation error and nothing is stored."""
        handler = IssueLicenseKeyHandler(license_key_repository=memory_repository)

        with pytest.raises(ValidationError, match="too large"):
            await handler.handle(IssueLicenseKeyCommand(duration_days_raw=raw))

        assert memory_repository.calls == []

    async def test_issue_with_omitted_fields(self, memory_repository):
        """Test an empty command issues a one-day key without a package."""
        handler = IssueLicenseKeyHandler(license_key_repository=memory_repository)

        result = await handler.handle(IssueLicenseKeyCommand())

        assert result.duration_days == 1
        assert result.package is None

    async def test_issue_retries_on_collision(self, memory_repository):
        """Test a colliding key is regenerated and the insert retried."""
        handler = IssueLicenseKeyHandler(
            license_key_repository=memory_repository,
            key_generator=_sequence_generator(
                "AAAAAAAAAAAAAAAA", "AAAAAAAAAAAAAAAA", "AAAAAAAAAAAAAAAA", "BBBBBBBBBBBBBBBB"
            ),
        )

        first = await handler.handle(IssueLicenseKeyCommand(package_name="pro"))
        second = await handler.handle(IssueLicenseKeyCommand(package_name="pro"))

        assert first.key == "AAAAAAAAAAAAAAAA"
        assert second.key == "BBBBBBBBBBBBBBBB"
        assert memory_repository.calls.count("insert") == 4

    async def test_issue_gives_up_after_max_attempts(self, memory_repository):
        """Test repeated collisions raise ExhaustedRetriesError."""
        await IssueLicenseKeyHandler(
            license_key_repository=memory_repository,
            key_generator=lambda: "AAAAAAAAAAAAAAAA",
        ).handle(IssueLicenseKeyCommand())
        memory_repository.calls.clear()

        handler = IssueLicenseKeyHandler(
            license_key_repository=memory_repository,
            max_attempts=3,
            key_generator=lambda: "AAAAAAAAAAAAAAAA",
        )

        with pytest.raises(ExhaustedRetriesError):
            await handler.handle(IssueLicenseKeyCommand())

        assert memory_repository.calls.count("insert") == 3

    async def test_rejects_non_positive_max_attempts(self, memory_repository):
        """Test the handler needs at least one attempt."""
        with pytest.raises(ValueError):
            IssueLicenseKeyHandler(license_key_repository=memory_repository, max_attempts=0)

    async def test_concurrent_issues_produce_distinct_keys(self, memory_repository):
        """Test parallel issues never surface a collision and never share a key."""
        handler = IssueLicenseKeyHandler(license_key_repository=memory_repository)

        results = await asyncio.gather(
            *(handler.handle(IssueLicenseKeyCommand(package_name="pro")) for _ in range(100))
        )

        assert len({result.key for result in results}) == 100
        assert len({result.id for result in results}) == 100


@pytest.mark.asyncio
class TestListLicenseKeysHandler:
    """Tests for ListLicenseKeysHandler."""

    async def test_list_empty_store(self, memory_repository):
        """Test listing an empty store returns an empty list."""
        handler = ListLicenseKeysHandler(license_key_repository=memory_repository)

        assert await handler.handle(ListLicenseKeysQuery()) == []

    async def test_list_newest_first(self, memory_repository, fixed_clock):
        """Test keys are listed newest first, ties broken by id."""
        times = iter(
            [
                fixed_clock(),
                fixed_clock() + timedelta(minutes=5),
                fixed_clock() + timedelta(minutes=5),
            ]
        )
        issue = IssueLicenseKeyHandler(license_key_repository=memory_repository, clock=lambda: next(times))
        for package in ("first", "second", "third"):
            await issue.handle(IssueLicenseKeyCommand(package_name=package))

        handler = ListLicenseKeysHandler(license_key_repository=memory_repository)
        result = await handler.handle(ListLicenseKeysQuery())

        assert [item.package for item in result] == ["third", "second", "first"]
        assert all(item.active for item in result)


@pytest.mark.asyncio
class TestVerifyLicenseKeyHandler:
    """Tests for VerifyLicenseKeyHandler."""

    @pytest.mark.parametrize("key", ["", None])
    async def test_missing_key_skips_store(self, memory_repository, key):
        """Test a missing key is rejected before any lookup."""
        handler = VerifyLicenseKeyHandler(license_key_repository=memory_repository)

        with pytest.raises(ValidationError, match="No key provided"):
            await handler.handle(VerifyLicenseKeyQuery(key=key))

        assert memory_repository.calls == []

    async def test_unknown_key(self, memory_repository):
        """Test verifying a key that was never issued."""
        handler = VerifyLicenseKeyHandler(license_key_repository=memory_repository)

        result = await handler.handle(VerifyLicenseKeyQuery(key="ZZZZZZZZZZZZZZZZ"))

        assert result.valid is False
        assert result.message == "Key not found"
        assert result.package is None

    async def test_issue_then_verify(self, memory_repository):
        """Test a freshly issued key verifies with its package."""
        issued = await IssueLicenseKeyHandler(license_key_repository=memory_repository).handle(
            IssueLicenseKeyCommand(package_name="pro", duration_days_raw=30)
        )
        handler = VerifyLicenseKeyHandler(license_key_repository=memory_repository)

        result = await handler.handle(VerifyLicenseKeyQuery(key=issued.key))

        assert result.valid is True
        assert result.message == "Key valid"
        assert result.package == "pro"

    async def test_expired_key(self, memory_repository, fixed_clock):
        """Test a key verified after its window has expired."""
        issued = await IssueLicenseKeyHandler(
            license_key_repository=memory_repository, clock=fixed_clock
        ).handle(IssueLicenseKeyCommand(package_name="pro", duration_days_raw=2))
        handler = VerifyLicenseKeyHandler(
            license_key_repository=memory_repository,
            clock=lambda: fixed_clock() + timedelta(days=2, seconds=1),
        )

        result = await handler.handle(VerifyLicenseKeyQuery(key=issued.key))

        assert result.valid is False
        assert result.message == "Key expired"
        assert result.package is None

    async def test_inactive_key(self, memory_repository):
        """Test a deactivated key does not verify."""
        issued = await IssueLicenseKeyHandler(license_key_repository=memory_repository).handle(
            IssueLicenseKeyCommand(package_name="pro", duration_days_raw=30)
        )
        memory_repository.deactivate(issued.key)
        handler = VerifyLicenseKeyHandler(license_key_repository=memory_repository)

        result = await handler.handle(VerifyLicenseKeyQuery(key=issued.key))

        assert result.valid is False
        assert result.message == "Key inactive"
