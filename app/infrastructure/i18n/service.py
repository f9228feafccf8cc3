"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Dict, Optional, Sequence

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    This is a thin facade - all actual work is delegated to the underlying
    Translator instance created by the factory.

    Usage:
        from infrastructure.services import get_translation_service

        service = get_translation_service()
        label = service.translate("General_Date")
        phrase = service.and_listing(["Visits", "Actions", "Goals"])
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        identifier: Optional[str],
        args: Any = None,
        language: Optional[str] = None,
    ) -> str:
        """Translate an identifier, see Translator.translate."""
        return self._translator.translate(identifier, args, language)

    def and_listing(self, items: Sequence[Any], language: Optional[str] = None) -> str:
        return self._translator.create_and_listing(items, language)

    def or_listing(self, items: Sequence[Any], language: Optional[str] = None) -> str:
        return self._translator.create_or_listing(items, language)

    def client_side_translations(self) -> Dict[str, str]:
        """Translations exported to the client side, by identifier."""
        return self._translator.get_client_side_translations()

    @property
    def language(self) -> str:
        return self._translator.get_current_language()

    @language.setter
    def language(self, language: Optional[str]) -> None:
        self._translator.set_current_language(language)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Returns:
            The underlying Translator instance
        """
        return self._translator
