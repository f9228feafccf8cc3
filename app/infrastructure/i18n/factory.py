"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Any, Optional, Sequence

import structlog
from infrastructure.i18n.language import SettingsLanguageProvider
from infrastructure.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.translator import KeyCollector, Translator

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Return the locales directory shipped inside this package."""
    return Path(__file__).resolve().parent / "locales"


def create_loader(translations_format: str = "yaml", use_cache: bool = True) -> TranslationLoader:
    """Create a loader for the given resource format.

    Args:
        translations_format: "yaml" or "json".
        use_cache: Whether the loader keeps parsed files in memory.

    Returns:
        TranslationLoader instance.

    Raises:
        ValueError: If the format is not supported.
    """
    if translations_format == "json":
        return JSONTranslationLoader(use_cache=use_cache)
    if translations_format in ("yaml", "yml"):
        return YAMLTranslationLoader(use_cache=use_cache)
    raise ValueError(f"Unsupported translations format: {translations_format}")


def create_translator(
    directories: Optional[Sequence[Path | str]] = None,
    loader: Optional[TranslationLoader] = None,
    settings: Optional[Any] = None,
    key_collector: Optional[KeyCollector] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Directories default to settings.i18n.TRANSLATIONS_DIRS, then to the
    bundled locales directory. The loader defaults to the configured format.

    Args:
        directories: Translation directories in priority order.
        loader: Pre-built loader (default: built from settings).
        settings: Settings object (default: application settings).
        key_collector: Client side key collector (default: plugin hook).

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use defaults (bundled locales, plugin hook key collector)
        translator = create_translator()

        # Custom translations directory
        translator = create_translator(directories=[Path("/custom/lang")])
    """
    if settings is None:
        from core.config import settings

    if directories is None:
        directories = settings.i18n.translations_dirs or [default_translations_dir()]

    if loader is None:
        loader = create_loader(
            settings.i18n.TRANSLATIONS_FORMAT, use_cache=settings.i18n.LOADER_CACHE
        )

    if key_collector is None:
        from infrastructure.services.plugins import collect_client_side_translation_keys

        key_collector = collect_client_side_translation_keys

    translator = Translator(
        loader=loader,
        directories=[str(d) for d in directories],
        language_provider=SettingsLanguageProvider(settings),
        key_collector=key_collector,
    )
    logger.info(
        "translator_created",
        directories=translator.get_directories(),
        loader=type(loader).__name__,
    )
    return translator
