"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_translation_table,
    make_translation_tree,
    write_translation_file,
)

__all__ = [
    "make_translation_table",
    "make_translation_tree",
    "write_translation_file",
]
