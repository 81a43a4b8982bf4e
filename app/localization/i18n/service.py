"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, List, Mapping, Optional

from localization.i18n.factory import create_translator
from localization.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator so callers can depend on a service and
    tests can swap in mocks.

    Usage:
        service = TranslationService()
        message = service.translate("en", "messages.greeting", {"name": "Ann"})
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(self, language: str, key: str, *args: Mapping[str, Any]) -> str:
        """Retrieve and interpolate a translated message.

        Returns:
            Translated message, or the key itself when no translation exists
        """
        return self._translator.translate(language, key, *args)

    def has_message(self, language: str, key: str) -> bool:
        return self._translator.has_message(language, key)

    def get_available_languages(self) -> List[str]:
        return self._translator.get_available_languages()

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
