"""i18n system - file-backed translations.

Loads per-language translation files (JSON, YAML or TOML) from a directory
tree into a flat, read-only table and resolves dotted keys with
``{placeholder}`` interpolation.

Main components:
- formats: TranslationFormat and its decoders
- models: TextNode, MapNode, TranslationTable
- loader: TranslationLoader and load_translations
- translator: Translator and interpolate
- factory: create_translator from settings
- service: TranslationService facade
"""

from localization.i18n.errors import (
    ConfigurationError,
    FilesystemError,
    ParseError,
    TranslationError,
)
from localization.i18n.factory import create_translator
from localization.i18n.formats import TranslationFormat
from localization.i18n.loader import TranslationLoader, load_translations
from localization.i18n.models import MapNode, TextNode, TranslationTable, Value
from localization.i18n.service import TranslationService
from localization.i18n.translator import Translator, interpolate

__all__ = [
    "TranslationFormat",
    "TextNode",
    "MapNode",
    "Value",
    "TranslationTable",
    "TranslationLoader",
    "load_translations",
    "Translator",
    "interpolate",
    "create_translator",
    "TranslationService",
    "TranslationError",
    "ConfigurationError",
    "ParseError",
    "FilesystemError",
]
