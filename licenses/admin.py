"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from core.domain.value_objects import ValidityReason
from licenses.domain.services import LicenseKeyValidator
from licenses.infrastructure.models import LicenseKey

_STATUS_COLORS = {
    ValidityReason.INACTIVE: "red",
    ValidityReason.EXPIRED: "gray",
    ValidityReason.VALID: "green",
}


@admin.register(LicenseKey)
class LicenseKeyAdmin(admin.ModelAdmin):
    """
    Admin interface for LicenseKey model.

    Keys are issued through the API; the admin only flips the active flag.
    """

    list_display = [
        "key_text",
        "package",
        "duration_days",
        "status_display",
        "created_at",
        "expires_at",
    ]
    list_filter = ["active", "package", "created_at"]
    search_fields = ["key_text", "package"]
    readonly_fields = [
        "id",
        "key_text",
        "package",
        "duration_days",
        "created_at",
        "expires_at",
    ]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "key_text", "package", "active"),
            },
        ),
        (
            "Validity",
            {
                "fields": ("duration_days", "created_at", "expires_at"),
            },
        ),
    )
    actions = ["deactivate_keys", "activate_keys"]

    def status_display(self, obj):
        """Display status with color coding."""
        result = LicenseKeyValidator.classify(obj.to_domain(), timezone.now())
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            _STATUS_COLORS[result.reason],
            str(result.reason).upper(),
        )

    status_display.short_description = "Status"

    @admin.action(description="Deactivate selected keys")
    def deactivate_keys(self, request, queryset):
        updated = queryset.update(active=False)
        self.message_user(request, f"Deactivated {updated} key(s)")

    @admin.action(description="Activate selected keys")
    def activate_keys(self, request, queryset):
        updated = queryset.update(active=True)
        self.message_user(request, f"Activated {updated} key(s)")

    def has_add_permission(self, request):
        """Keys are issued through the API."""
        return False

    def has_delete_permission(self, request, obj=None):
        """Keys are never deleted."""
        return False
