"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from core.config import Settings
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import Translator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    Returns:
        Translator: Cached translator configured from application settings.
    """
    return create_translator(settings=get_settings())


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    Returns:
        TranslationService: Facade over the shared translator.
    """
    return TranslationService(translator=get_translator())
