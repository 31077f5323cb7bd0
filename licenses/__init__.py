"""
Licenses module - License key issuing and verification.

This module handles:
- LicenseKey entity, key generation and expiry
- Key validity classification (not found, inactive, expired, valid)
- Issue, list and verify use cases
"""
