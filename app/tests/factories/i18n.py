"""Test data factories for i18n system testing.

Provides deterministic builders for:
- TranslationTable
- translation file trees on disk (JSON, YAML, TOML)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w
import yaml

from localization.i18n import TranslationFormat, TranslationTable


def make_translation_table(catalogs: Optional[dict] = None) -> TranslationTable:
    """Create a frozen TranslationTable.

    Args:
        catalogs: {language: {dotted_key: message}}.

    Returns:
        TranslationTable instance.
    """
    if catalogs is None:
        catalogs = {
            "en": {
                "messages.greeting": "Hello {name}",
                "messages.errors.not_found": "Not found",
            },
            "fr": {
                "messages.greeting": "Bonjour {name}",
            },
        }
    return TranslationTable.from_dict(catalogs)


def write_translation_file(
    path: Path,
    data: Dict[str, Any],
    fmt: TranslationFormat = TranslationFormat.JSON,
) -> Path:
    """Write ``data`` to ``path`` in ``fmt``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if fmt == TranslationFormat.JSON:
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    elif fmt == TranslationFormat.YAML:
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
    else:
        path.write_text(tomli_w.dumps(data), encoding="utf-8")
    return path


def make_translation_tree(
    root: Path,
    files: Dict[str, Dict[str, Any]],
    fmt: TranslationFormat = TranslationFormat.JSON,
) -> Path:
    """Write a tree of translation files under ``root``.

    Args:
        root: Translations root directory.
        files: {relative path without extension: document}, e.g.
            {"messages/en": {"greeting": "Hello"}}.
        fmt: Format of every file.

    Returns:
        The root directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    for relative, data in files.items():
        write_translation_file(root / f"{relative}{fmt.extension}", data, fmt)
    return root
