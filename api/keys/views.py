"""
License key API views.

These endpoints are used by operators to issue and list keys and by
client applications to verify a key before unlocking functionality.
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.keys.serializers import (
    IssuedLicenseKeySerializer,
    IssueLicenseKeyRequestSerializer,
    LicenseKeySerializer,
    VerificationResultSerializer,
    VerifyLicenseKeyRequestSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.application.commands.issue_license_key import IssueLicenseKeyCommand
from licenses.application.handlers.issue_license_key_handler import IssueLicenseKeyHandler
from licenses.application.handlers.list_license_keys_handler import ListLicenseKeysHandler
from licenses.application.handlers.verify_license_key_handler import (
    NO_KEY_PROVIDED,
    VerifyLicenseKeyHandler,
)
from licenses.application.queries.list_license_keys import ListLicenseKeysQuery
from licenses.application.queries.verify_license_key import VerifyLicenseKeyQuery
from licenses.infrastructure.repositories.django_license_key_repository import (
    DjangoLicenseKeyRepository,
)

_license_key_repo = DjangoLicenseKeyRepository()

tracer = get_tracer(__name__)


async def _list_license_keys(span) -> list:
    handler = ListLicenseKeysHandler(license_key_repository=_license_key_repo)
    result = await handler.handle(ListLicenseKeysQuery())
    span.set_attribute("license_keys.count", len(result))
    return LicenseKeySerializer(result, many=True).data


class LicenseKeyCollectionView(APIView):
    """View for issuing and listing license keys."""

    @extend_schema(
        operation_id="list_license_keys",
        summary="List License Keys",
        description="Return every issued license key, most recently created first.",
        tags=["Keys"],
        responses={200: LicenseKeySerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List all license keys."""
        return async_to_sync(self._handle_list_license_keys)(request)

    async def _handle_list_license_keys(self, request: Request) -> Response:
        """Async handler for list license keys."""
        with tracer.start_as_current_span("list_license_keys") as span:
            span.set_attribute("operation", "list_license_keys")
            data = await _list_license_keys(span)
            span.set_status(Status(StatusCode.OK))
            return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="issue_license_key",
        summary="Issue License Key",
        description=(
            "Create a new license key for a package. durationDays below one or "
            "not a number is treated as one day. The key expires exactly "
            "durationDays * 24 hours after creation."
        ),
        tags=["Keys"],
        request=IssueLicenseKeyRequestSerializer,
        responses={
            200: IssuedLicenseKeySerializer,
            400: {"description": "Bad Request"},
            500: {"description": "Storage error"},
            503: {"description": "No unique key could be generated"},
        },
    )
    def post(self, request: Request) -> Response:
        """Issue a license key."""
        return async_to_sync(self._handle_issue_license_key)(request)

    async def _handle_issue_license_key(self, request: Request) -> Response:
        """Async handler for issue license key."""
        with tracer.start_as_current_span("issue_license_key") as span:
            span.set_attribute("operation", "issue_license_key")

            serializer = IssueLicenseKeyRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            handler = IssueLicenseKeyHandler(
                license_key_repository=_license_key_repo,
                max_attempts=settings.LICENSE_KEY_MAX_ISSUE_ATTEMPTS,
            )

            command = IssueLicenseKeyCommand(
                package_name=serializer.validated_data.get("packageName"),
                duration_days_raw=serializer.validated_data.get("durationDays"),
            )

            result = await handler.handle(command)

            span.set_attribute("license_key.id", result.id)
            span.set_attribute("duration_days", result.duration_days)
            span.set_status(Status(StatusCode.OK))

            return Response(IssuedLicenseKeySerializer(result).data, status=status.HTTP_200_OK)


class DownloadLicenseKeysView(APIView):
    """View for downloading all license keys as a JSON attachment."""

    @extend_schema(
        operation_id="download_license_keys",
        summary="Download License Keys",
        description="Same payload as the key listing, served as a keys.json attachment.",
        tags=["Keys"],
        responses={200: LicenseKeySerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """Download all license keys."""
        return async_to_sync(self._handle_download_license_keys)(request)

    async def _handle_download_license_keys(self, request: Request) -> Response:
        """Async handler for download license keys."""
        with tracer.start_as_current_span("download_license_keys") as span:
            span.set_attribute("operation", "download_license_keys")
            data = await _list_license_keys(span)
            span.set_status(Status(StatusCode.OK))

            response = Response(data, status=status.HTTP_200_OK)
            response["Content-Disposition"] = (
                f"attachment; filename={settings.LICENSE_KEY_DOWNLOAD_FILENAME}"
            )
            return response


class VerifyLicenseKeyView(APIView):
    """View for verifying license keys."""

    @extend_schema(
        operation_id="verify_license_key",
        summary="Verify License Key",
        description=(
            "Check whether a key exists, is active and has not expired. "
            "Unknown, inactive and expired keys return valid=false with a reason."
        ),
        tags=["Keys"],
        request=VerifyLicenseKeyRequestSerializer,
        responses={
            200: VerificationResultSerializer,
            400: {"description": "No key provided"},
            500: {"description": "Storage error"},
        },
    )
    def post(self, request: Request) -> Response:
        """Verify a license key."""
        return async_to_sync(self._handle_verify_license_key)(request)

    async def _handle_verify_license_key(self, request: Request) -> Response:
        """Async handler for verify license key."""
        with tracer.start_as_current_span("verify_license_key") as span:
            span.set_attribute("operation", "verify_license_key")

            serializer = VerifyLicenseKeyRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            key = serializer.validated_data.get("key")
            if not key:
                span.set_attribute("error", "key_required")
                span.set_status(Status(StatusCode.ERROR, NO_KEY_PROVIDED))
                return Response(
                    {"valid": False, "message": NO_KEY_PROVIDED},
                    status=status.HTTP_400_BAD_REQUEST,
                )

            handler = VerifyLicenseKeyHandler(license_key_repository=_license_key_repo)
            result = await handler.handle(VerifyLicenseKeyQuery(key=key))

            span.set_attribute("valid", result.valid)
            span.set_attribute("message", result.message)
            span.set_status(Status(StatusCode.OK))

            return Response(VerificationResultSerializer(result).data, status=status.HTTP_200_OK)
