"""i18n system - translation resolution and localized listings.

Main components:
- models: TranslationKey, TranslationCatalog, ListType, FormatError
- loader: TranslationLoader, JSONTranslationLoader and YAMLTranslationLoader
- translator: Translator with fallback resolution, formatting and listings
- language: default language providers
- service: TranslationService facade
"""

from infrastructure.i18n.formatting import clean, decode_entities_safe_for_html
from infrastructure.i18n.language import (
    DefaultLanguageProvider,
    SettingsLanguageProvider,
    StaticLanguageProvider,
)
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    FALLBACK_LANGUAGE,
    FormatError,
    ListType,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "FALLBACK_LANGUAGE",
    "FormatError",
    "ListType",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "JSONTranslationLoader",
    "YAMLTranslationLoader",
    "DefaultLanguageProvider",
    "SettingsLanguageProvider",
    "StaticLanguageProvider",
    "Translator",
    "clean",
    "decode_entities_safe_for_html",
]
