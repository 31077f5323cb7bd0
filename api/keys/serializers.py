"""
Serializers for license key API endpoints.
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers


@extend_schema_field(OpenApiTypes.ANY)
class RawValueField(serializers.Field):
    """Passes the submitted value through untouched for domain-level parsing."""

    def to_internal_value(self, data):
        return data

    def to_representation(self, value):
        return value


class IssueLicenseKeyRequestSerializer(serializers.Serializer):
    """Serializer for issue license key request."""

    packageName = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    # Numbers or numeric strings; anything unparseable falls back to one day
    durationDays = RawValueField(required=False, allow_null=True)


class VerifyLicenseKeyRequestSerializer(serializers.Serializer):
    """Serializer for verify license key request."""

    key = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )


class IssuedLicenseKeySerializer(serializers.Serializer):
    """Serializer for IssuedLicenseKeyDTO."""

    id = serializers.IntegerField()
    key = serializers.CharField()
    package = serializers.CharField(allow_null=True)
    duration_days = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    expires_at = serializers.DateTimeField(allow_null=True)


class LicenseKeySerializer(serializers.Serializer):
    """Serializer for LicenseKeyDTO (list and download)."""

    id = serializers.IntegerField()
    key_text = serializers.CharField()
    package = serializers.CharField(allow_null=True)
    duration_days = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    expires_at = serializers.DateTimeField(allow_null=True)
    active = serializers.BooleanField()


class VerificationResultSerializer(serializers.Serializer):
    """Serializer for VerificationResultDTO."""

    valid = serializers.BooleanField()
    message = serializers.CharField()
    package = serializers.CharField(allow_null=True, required=False)

    def to_representation(self, instance):
        """Only valid keys report their package."""
        data = super().to_representation(instance)
        if not data["valid"]:
            data.pop("package", None)
        return data
