"""Tests for localization.i18n.factory module."""

import pytest

from localization.configuration import I18nSettings, Settings
from localization.i18n import ConfigurationError, TranslationFormat, create_translator


@pytest.mark.unit
class TestCreateTranslator:
    """Tests for create_translator()."""

    def test_explicit_directory_and_format(self, yaml_translations_dir):
        """Explicit arguments take precedence over settings."""
        translator = create_translator(yaml_translations_dir, TranslationFormat.YAML)

        assert translator.loader.fmt is TranslationFormat.YAML
        assert translator.get_available_languages() == ["en", "fr"]

    def test_defaults_from_settings(self, toml_translations_dir):
        """Directory and format default to the given settings."""
        settings = Settings(
            i18n=I18nSettings(
                TRANSLATIONS_DIR=str(toml_translations_dir),
                TRANSLATIONS_FORMAT="toml",
            )
        )

        translator = create_translator(settings=settings)

        assert translator.translate("fr", "greeting", {"name": "Ann", "count": 2}) == (
            "Bonjour Ann, vous avez 2 articles"
        )

    def test_defaults_from_environment(self, json_translations_dir, monkeypatch):
        """Settings read TRANSLATIONS_DIR and TRANSLATIONS_FORMAT from env."""
        monkeypatch.setenv("TRANSLATIONS_DIR", str(json_translations_dir))
        monkeypatch.setenv("TRANSLATIONS_FORMAT", "JSON")

        translator = create_translator(settings=Settings())

        assert translator.translate("en", "farewell") == "Goodbye"

    def test_empty_directory_setting(self):
        """An empty directory setting gives an echoing translator."""
        settings = Settings(i18n=I18nSettings(TRANSLATIONS_DIR=""))

        translator = create_translator(settings=settings)

        assert translator.translate("en", "farewell") == "farewell"

    def test_missing_directory(self, tmp_path):
        """A missing directory raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            create_translator(tmp_path / "missing", "json")
