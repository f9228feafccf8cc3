"""Translation service for resolving identifiers to localized text.

Resolves ``domain_key`` identifiers with a fallback chain, formats positional
arguments, builds locale-aware listings and exports translations for the
client side.
"""

import json
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from core.logging import get_module_logger
from infrastructure.i18n import formatting
from infrastructure.i18n.language import DefaultLanguageProvider, StaticLanguageProvider
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    FALLBACK_LANGUAGE,
    LEGACY_DOMAIN,
    ListType,
    Messages,
    TranslationCatalog,
    TranslationKey,
    copy_messages,
)

logger = get_module_logger()

KeyCollector = Callable[[], Iterable[str]]

CLIENT_TRANSLATIONS_OBJECT = "client_translations"


class Translator:
    """Service for translating identifiers with fallback and formatting.

    Catalogs are loaded lazily, one language at a time, on first lookup. They
    stay cached until a new directory is registered.

    Attributes:
        loader: TranslationLoader used to read translation resources.
        language_provider: Provider of the configured default language.
        fallback_language: Language used when a key is missing.
        catalogs: Cache of loaded TranslationCatalogs by language.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        directories: Optional[Sequence[str]] = None,
        language_provider: Optional[DefaultLanguageProvider] = None,
        key_collector: Optional[KeyCollector] = None,
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance for loading translations.
            directories: Initial translation directories in priority order.
            language_provider: Provider of the default language (default: "en").
            key_collector: Callable returning the identifiers exported to the
                client side.
        """
        self.loader = loader
        self.language_provider = language_provider or StaticLanguageProvider()
        self.key_collector = key_collector
        self.fallback_language = FALLBACK_LANGUAGE
        self.catalogs: Dict[str, TranslationCatalog] = {}
        self._initial_directories = self._unique(str(d) for d in directories or [])
        self._directories: List[str] = list(self._initial_directories)
        self._lock = threading.Lock()
        self._current_language = self.get_default_language()
        logger.info(
            "initialized_translator",
            current_language=self._current_language,
            directory_count=len(self._directories),
        )

    @staticmethod
    def clean(text: str) -> str:
        """Trim whitespace and decode HTML entities, including quotes."""
        return formatting.clean(text)

    def translate(
        self,
        identifier: Optional[str],
        args: Any = None,
        language: Optional[str] = None,
    ) -> str:
        """Return the localized text for an identifier.

        If no translation is found, the identifier itself is used as the text.
        Identifiers without an underscore are not looked up.

        Args:
            identifier: Translation identifier, e.g. "General_Date".
            args: Positional format arguments. A list or tuple is used as is;
                any other value is a single argument.
            language: Optionally force the language.

        Returns:
            The translated and formatted string.

        Raises:
            FormatError: If the text references more arguments than supplied.
        """
        args = self._normalize_args(args)
        text = identifier or ""

        if TranslationKey.is_qualified(text):
            key = TranslationKey.from_string(text)
            language = language if isinstance(language, str) else self._current_language
            text = self._resolve(text, key, language)

        if not args:
            return text.replace("%%", "%")
        return formatting.vsprintf(text, args)

    def create_and_listing(self, items: Sequence[Any], language: Optional[str] = None) -> str:
        """Convert items into an and-listing (e.g. "One, Two, and Three")."""
        return self._create_listing(ListType.AND, items, language)

    def create_or_listing(self, items: Sequence[Any], language: Optional[str] = None) -> str:
        """Convert items into an or-listing (e.g. "One, Two, or Three")."""
        return self._create_listing(ListType.OR, items, language)

    def get_current_language(self) -> str:
        return self._current_language

    def set_current_language(self, language: Optional[str]) -> None:
        """Set the active language. A falsy value resets to the default."""
        if not language:
            language = self.get_default_language()
        self._current_language = language

    def get_default_language(self) -> str:
        """Return the configured default language, "en" if unavailable."""
        try:
            language = self.language_provider.get_default_language()
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("default_language_lookup_failed", error=str(e))
            return self.fallback_language
        return language or self.fallback_language

    def get_directories(self) -> List[str]:
        return list(self._directories)

    def add_directory(self, directory: str) -> None:
        """Add a directory containing translations.

        Loaded catalogs are always discarded since the new directory may
        override any domain or key.

        Args:
            directory: Directory to add.
        """
        directory = str(directory)
        with self._lock:
            if directory not in self._directories:
                self._directories.append(directory)
            self.catalogs.clear()
        logger.info("added_translation_directory", directory=directory)

    def reset(self) -> None:
        """Reset language, directories and loaded catalogs. Used by tests."""
        with self._lock:
            self._directories = list(self._initial_directories)
            self.catalogs.clear()
        self._current_language = self.get_default_language()

    def is_loaded(self, language: str) -> bool:
        return language in self.catalogs

    def get_all_translations(self) -> Messages:
        """Return all messages of the current language."""
        catalog = self._ensure_loaded(self._current_language)
        return copy_messages(catalog.messages) if catalog else {}

    def find_translation_key_for_translation(self, translation: str) -> Optional[str]:
        """Find the identifier whose text in the current language equals translation.

        If several keys share the text, the first one in catalog iteration
        order wins.

        Args:
            translation: Exact translated text to look for.

        Returns:
            Identifier (e.g. "General_Date") or None if not found.
        """
        catalog = self._ensure_loaded(self._current_language)
        if catalog is None:
            return None

        for key, text in catalog.iter_messages():
            if text == translation:
                return str(key)
        return None

    def get_client_side_translations(self) -> Dict[str, str]:
        """Resolve the client side identifiers in the current language.

        Identifiers without a domain are skipped with a warning. Values have
        their HTML entities decoded except ``&lt;`` and ``&gt;``.

        Returns:
            Mapping of identifier to translated text.
        """
        translations: Dict[str, str] = {}
        for identifier in self._get_client_side_translation_keys():
            if not TranslationKey.is_qualified(identifier):
                logger.warning(
                    "unexpected_client_side_translation_key",
                    translation_key=identifier,
                )
                continue
            key = TranslationKey.from_string(identifier)
            text = self._resolve(identifier, key, self._current_language)
            translations[identifier] = formatting.decode_entities_safe_for_html(text)
        return translations

    def get_javascript_translations(self) -> str:
        """Render the client side translations as a JavaScript snippet."""
        translations = self.get_client_side_translations()
        js = f"var translations = {json.dumps(translations)};"
        js += (
            f"\nif (typeof({CLIENT_TRANSLATIONS_OBJECT}) == 'undefined') "
            f"{{ var {CLIENT_TRANSLATIONS_OBJECT} = new Object; }}"
            f"for(var i in translations) {{ {CLIENT_TRANSLATIONS_OBJECT}[i] = translations[i];}} "
        )
        return js

    def _create_listing(
        self, list_type: ListType, items: Sequence[Any], language: Optional[str]
    ) -> str:
        items = list(items)
        if not items:
            return ""
        if len(items) == 1:
            return str(items[0])
        if len(items) == 2:
            pattern = self.translate(list_type.pattern_id("2"), language=language)
            return self._substitute(pattern, items[0], items[1])

        pattern_start = self.translate(list_type.pattern_id("Start"), language=language)
        pattern_middle = self.translate(list_type.pattern_id("Middle"), language=language)
        pattern_end = self.translate(list_type.pattern_id("End"), language=language)

        result = pattern_start
        while len(items) > 2:
            pattern = pattern_middle if len(items) > 3 else pattern_end
            result = self._substitute(result, items.pop(0), pattern)

        return self._substitute(result, items[0], items[1])

    def _resolve(self, identifier: str, key: TranslationKey, language: str) -> str:
        for lang in self._language_chain(language):
            catalog = self._ensure_loaded(lang)
            if catalog is None:
                continue

            text = catalog.get_message(key)
            if text is not None:
                if lang != language:
                    logger.debug(
                        "used_fallback_translation",
                        translation_key=identifier,
                        requested_language=language,
                        fallback_language=lang,
                    )
                return text

            # Keys moved into the shared domain still resolve under their old domain
            if key.domain != LEGACY_DOMAIN:
                text = catalog.get_message(TranslationKey(LEGACY_DOMAIN, key.key))
                if text is not None:
                    return text

        logger.debug("translation_not_found", translation_key=identifier, language=language)
        return identifier

    def _language_chain(self, language: str) -> List[str]:
        if language == self.fallback_language:
            return [language]
        return [language, self.fallback_language]

    def _ensure_loaded(self, language: str) -> Optional[TranslationCatalog]:
        if not language:
            return None

        catalog = self.catalogs.get(language)
        if catalog is not None:
            return catalog

        with self._lock:
            catalog = self.catalogs.get(language)
            if catalog is None:
                messages = self.loader.load(language, list(self._directories))
                catalog = TranslationCatalog(
                    language=language, messages=copy_messages(messages or {})
                )
                self.catalogs[language] = catalog
                logger.info(
                    "loaded_language_translations",
                    language=language,
                    domain_count=len(catalog.messages),
                )
        return catalog

    def _get_client_side_translation_keys(self) -> List[str]:
        if self.key_collector is None:
            return []
        return self._unique(self.key_collector())

    @staticmethod
    def _substitute(pattern: str, first: Any, second: Any) -> str:
        return pattern.replace("{0}", str(first)).replace("{1}", str(second))

    @staticmethod
    def _normalize_args(args: Any) -> List[Any]:
        if args is None:
            return []
        if isinstance(args, (list, tuple)):
            return list(args)
        return [args]

    @staticmethod
    def _unique(values: Iterable[str]) -> List[str]:
        seen: Dict[str, None] = {}
        for value in values:
            seen.setdefault(value, None)
        return list(seen)
