"""Translation lookup with placeholder interpolation.

A ``Translator`` owns a frozen ``TranslationTable`` built once at
construction. Lookups never fail: a missing language or key resolves to the
key itself.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from localization.i18n.formats import TranslationFormat
from localization.i18n.loader import TranslationLoader
from localization.i18n.models import TranslationTable, format_scalar
from localization.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


def interpolate(message: str, *args: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders in ``message``.

    Argument mappings are merged left to right, so a later mapping wins for
    the same name. Placeholders without a value are left as they are.
    Substituted values are not scanned again.

    Args:
        message: Message string with {name} placeholders.
        *args: Mappings of placeholder name -> value.

    Returns:
        Message with placeholders replaced.
    """
    if not args or "{" not in message:
        return message

    variables: Dict[str, Any] = {}
    for mapping in args:
        variables.update(mapping)

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return format_scalar(variables[name])

    return PLACEHOLDER_PATTERN.sub(_replace, message)


class Translator:
    """Resolves (language, key) pairs to translated, interpolated text.

    The table is built by the loader in the constructor. Either the whole
    table loads or the constructor raises, so a Translator instance always
    holds a complete table. The table is read-only afterwards and safe to
    share between threads.

    Attributes:
        loader: TranslationLoader used to build the table.
    """

    def __init__(self, loader: TranslationLoader):
        """Initialize Translator and load all translations.

        Args:
            loader: TranslationLoader for the translations root.

        Raises:
            ParseError: If a translation file cannot be decoded.
            FilesystemError: If the translations cannot be read.
        """
        self.loader = loader
        self._table = loader.load()
        logger.info(
            "initialized_translator",
            languages=self._table.languages,
            message_count=self._table.message_count,
        )

    @classmethod
    def from_directory(
        cls,
        translations_dir: Optional[Union[str, Path]],
        fmt: Union[TranslationFormat, str] = TranslationFormat.JSON,
    ) -> "Translator":
        """Create a Translator for ``translations_dir`` in ``fmt``.

        Raises:
            ConfigurationError: If the directory does not exist or the format
                is unknown.
            ParseError: If a translation file cannot be decoded.
            FilesystemError: If the translations cannot be read.
        """
        return cls(TranslationLoader(translations_dir, fmt))

    @property
    def table(self) -> TranslationTable:
        return self._table

    def translate(self, language: str, key: str, *args: Mapping[str, Any]) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            language: Language code (e.g., "en").
            key: Dotted translation key (e.g., "messages.errors.not_found").
            *args: Mappings of placeholder values, later ones win.

        Returns:
            The interpolated message, or ``key`` unchanged if the language
            or key is unknown.
        """
        message = self._table.get_message(language, key)
        if message is None:
            logger.debug("translation_not_found", key=key, language=language)
            return key
        return interpolate(message, *args)

    def has_message(self, language: str, key: str) -> bool:
        """Check if a translation exists for key in language."""
        return self._table.get_message(language, key) is not None

    def get_available_languages(self) -> List[str]:
        """Get sorted list of loaded language codes."""
        return self._table.languages

    def get_catalog(self, language: str) -> Optional[Mapping[str, str]]:
        """Get the read-only catalog for a language.

        Returns:
            Mapping of dotted key -> message, or None if not loaded.
        """
        return self._table.get_catalog(language)
