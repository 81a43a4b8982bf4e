"""Feature-level fixtures for i18n system tests.

Provides translation trees on disk in each supported format.
"""

import pytest

from localization.i18n import TranslationFormat, TranslationLoader, Translator
from tests.factories.i18n import make_translation_tree


SAMPLE_FILES = {
    "en": {
        "greeting": "Hello {name}, you have {count} items",
        "farewell": "Goodbye",
    },
    "fr": {
        "greeting": "Bonjour {name}, vous avez {count} articles",
    },
    "messages/en": {
        "errors": {
            "not_found": "Not found",
            "forbidden": "Forbidden",
        },
        "welcome": "Hi {name}",
    },
    "messages/fr": {
        "errors": {
            "not_found": "Introuvable",
        },
    },
    "messages/errors/en": {
        "timeout": {"title": "Timed out", "body": "Try again in {seconds}s"},
    },
}


@pytest.fixture
def sample_translation_files():
    """Sample translation documents keyed by relative path without extension."""
    return SAMPLE_FILES


@pytest.fixture
def json_translations_dir(tmp_path):
    """Create temporary JSON translations tree.

    Returns a directory structure like:
    - en.json
    - fr.json
    - messages/en.json
    - messages/fr.json
    - messages/errors/en.json
    """
    return make_translation_tree(
        tmp_path / "translations", SAMPLE_FILES, TranslationFormat.JSON
    )


@pytest.fixture
def yaml_translations_dir(tmp_path):
    """Create temporary YAML translations tree with the sample documents."""
    return make_translation_tree(
        tmp_path / "translations", SAMPLE_FILES, TranslationFormat.YAML
    )


@pytest.fixture
def toml_translations_dir(tmp_path):
    """Create temporary TOML translations tree with the sample documents."""
    return make_translation_tree(
        tmp_path / "translations", SAMPLE_FILES, TranslationFormat.TOML
    )


@pytest.fixture
def json_loader(json_translations_dir):
    """Create TranslationLoader for the temporary JSON tree."""
    return TranslationLoader(json_translations_dir, TranslationFormat.JSON)


@pytest.fixture
def translator(json_loader):
    """Create Translator loaded from the temporary JSON tree."""
    return Translator(json_loader)
