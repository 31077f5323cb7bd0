"""
URL configuration for license key API endpoints.
"""

from django.urls import path

from api.keys import views

app_name = "keys"

urlpatterns = [
    path(
        "keys",
        views.LicenseKeyCollectionView.as_view(),
        name="license-keys",
    ),
    path(
        "keys/download",
        views.DownloadLicenseKeysView.as_view(),
        name="download-license-keys",
    ),
    path(
        "keys/verify",
        views.VerifyLicenseKeyView.as_view(),
        name="verify-license-key",
    ),
]
