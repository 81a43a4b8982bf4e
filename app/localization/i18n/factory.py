"""Factory functions for creating i18n components.

Builds translators from the application settings.
"""

from pathlib import Path
from typing import Optional, Union

from localization.configuration import Settings
from localization.configuration import settings as default_settings
from localization.i18n.formats import TranslationFormat
from localization.i18n.loader import TranslationLoader
from localization.i18n.translator import Translator
from localization.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Union[str, Path]] = None,
    fmt: Optional[Union[TranslationFormat, str]] = None,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Root of the translation files (default:
            settings.i18n.TRANSLATIONS_DIR). An empty value disables loading.
        fmt: File format (default: settings.i18n.TRANSLATIONS_FORMAT).
        settings: Settings to read defaults from (default: module settings).

    Returns:
        Translator: Translator with every translation loaded

    Raises:
        ConfigurationError: If the directory does not exist or the format
            is unknown.
        ParseError: If a translation file cannot be decoded.
        FilesystemError: If the translations cannot be read.

    Usage:
        # Use TRANSLATIONS_DIR / TRANSLATIONS_FORMAT from the environment
        translator = create_translator()

        # Explicit directory and format
        translator = create_translator("/srv/locales", fmt="yaml")
    """
    settings = settings or default_settings
    if translations_dir is None:
        translations_dir = settings.i18n.TRANSLATIONS_DIR
    if fmt is None:
        fmt = settings.i18n.TRANSLATIONS_FORMAT

    loader = TranslationLoader(translations_dir=translations_dir, fmt=fmt)
    translator = Translator(loader=loader)

    logger.info(
        "translator_created",
        translations_dir=str(translations_dir) if translations_dir else None,
        format=loader.fmt.value,
        language_count=len(translator.get_available_languages()),
    )
    return translator
