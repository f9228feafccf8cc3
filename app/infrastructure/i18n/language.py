"""Default language providers.

The translator asks a provider for the configured default language instead of
reading process-wide configuration itself.
"""

from typing import Any, Optional, Protocol

import structlog
from infrastructure.i18n.models import FALLBACK_LANGUAGE

logger = structlog.get_logger().bind(component="i18n.language")


class DefaultLanguageProvider(Protocol):
    """Source of the configured default language."""

    def get_default_language(self) -> str:
        """Return the configured default language code."""
        ...


class StaticLanguageProvider:
    """Provider returning a fixed language, used by tools and tests."""

    def __init__(self, language: str = FALLBACK_LANGUAGE):
        self.language = language

    def get_default_language(self) -> str:
        return self.language or FALLBACK_LANGUAGE


class SettingsLanguageProvider:
    """Provider reading ``i18n.DEFAULT_LANGUAGE`` from application settings.

    Configuration may not be available (for example during environment setup),
    in which case the fallback language is returned.
    """

    def __init__(self, settings: Optional[Any] = None):
        """Initialize provider.

        Args:
            settings: Optional settings object. If not provided, the
                application settings singleton is used.
        """
        self._settings = settings

    def get_default_language(self) -> str:
        try:
            settings = self._settings
            if settings is None:
                from core.config import settings

            language = settings.i18n.DEFAULT_LANGUAGE
        except (AttributeError, ImportError, ValueError) as e:
            logger.warning("default_language_unavailable", error=str(e))
            return FALLBACK_LANGUAGE

        return language or FALLBACK_LANGUAGE
