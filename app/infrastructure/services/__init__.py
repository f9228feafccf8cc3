"""
Dependency injection services.

Provides provider functions for application-scoped singletons.
"""

from infrastructure.services.providers import (
    get_settings,
    get_translator,
    get_translation_service,
)

__all__ = [
    "get_settings",
    "get_translator",
    "get_translation_service",
]
