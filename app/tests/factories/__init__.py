"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    InMemoryTranslationLoader,
    make_messages,
    make_translation_catalog,
    make_translation_key,
    make_translator,
)

__all__ = [
    "InMemoryTranslationLoader",
    "make_messages",
    "make_translation_catalog",
    "make_translation_key",
    "make_translator",
]
