"""
Core module for shared service infrastructure.

This module contains:
- Domain exceptions and value objects
- Observability middleware, metrics and tracing
- Health checks and management commands
"""
