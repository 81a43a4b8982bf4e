"""Translation loading from a directory tree of structured files.

Files are named ``<language>.<format>``. Subdirectories of the root become
dotted key prefixes, so ``<root>/messages/en.json`` containing
``{"errors": {"not_found": "Not found"}}`` yields the key
``messages.errors.not_found`` for language ``en``.
"""

import os
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union

from localization.i18n.errors import ConfigurationError, FilesystemError, ParseError
from localization.i18n.formats import DECODE_ERRORS, TranslationFormat, decode
from localization.i18n.models import (
    TranslationTable,
    Value,
    flatten,
    to_value,
)
from localization.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader:
    """Builds a ``TranslationTable`` from translation files under a root directory.

    Directories and files are visited in lexicographic order, so when two
    files produce the same dotted key for a language the later path wins.

    Attributes:
        translations_dir: Root directory, or None when loading is disabled.
        fmt: Format of the translation files.
    """

    def __init__(
        self,
        translations_dir: Optional[Union[str, Path]],
        fmt: Union[TranslationFormat, str] = TranslationFormat.JSON,
    ):
        """Initialize translation loader.

        Args:
            translations_dir: Root directory of translation files. An empty
                value disables loading.
            fmt: File format, as enum or name.

        Raises:
            ConfigurationError: If the format is unknown or the directory
                does not exist.
        """
        self.fmt = (
            fmt
            if isinstance(fmt, TranslationFormat)
            else TranslationFormat.from_string(fmt)
        )
        self.translations_dir = Path(translations_dir) if translations_dir else None

        if self.translations_dir is not None and not self.translations_dir.is_dir():
            logger.error(
                "translations_dir_not_found",
                translations_dir=str(self.translations_dir),
            )
            raise ConfigurationError(
                f"Translations directory not found: {self.translations_dir}"
            )

    def load(self) -> TranslationTable:
        """Load every translation file into a new table.

        Returns:
            TranslationTable with all languages found.

        Raises:
            ParseError: If a file cannot be decoded in the selected format.
            FilesystemError: If a directory or file cannot be read.
        """
        if self.translations_dir is None:
            logger.info("translations_disabled")
            return TranslationTable.empty()

        catalogs: Dict[str, Dict[str, str]] = {}
        sources: Dict[Tuple[str, str], Path] = {}
        file_count = 0

        for path, language, prefix in self._iter_files():
            document = self._read(path)
            catalog = catalogs.setdefault(language, {})
            for key, text in flatten(document, prefix):
                previous = sources.get((language, key))
                if previous is not None:
                    logger.warning(
                        "duplicate_translation_key",
                        language=language,
                        key=key,
                        previous_file=str(previous),
                        file=str(path),
                    )
                catalog[key] = text
                sources[(language, key)] = path
            file_count += 1

        table = TranslationTable.from_dict(catalogs)
        logger.info(
            "loaded_translations",
            translations_dir=str(self.translations_dir),
            format=self.fmt.value,
            file_count=file_count,
            languages=table.languages,
            message_count=table.message_count,
        )
        return table

    def _iter_files(self) -> Iterator[Tuple[Path, str, str]]:
        """Yield ``(path, language, prefix)`` for each candidate file.

        Files are ordered by their path segments relative to the root.
        """

        def _raise(error: OSError) -> None:
            raise error

        suffix = self.fmt.extension
        candidates = []
        try:
            for dirpath, _, filenames in os.walk(
                self.translations_dir, onerror=_raise
            ):
                relative = Path(dirpath).relative_to(self.translations_dir)
                prefix = ".".join(relative.parts)
                for name in filenames:
                    if not name.endswith(suffix):
                        continue
                    path = Path(dirpath) / name
                    if not path.is_file():
                        continue
                    language = name[: -len(suffix)]
                    if not language:
                        logger.warning("skipped_unnamed_translation_file", file=str(path))
                        continue
                    candidates.append((relative.parts + (name,), path, language, prefix))
        except OSError as e:
            logger.error(
                "translations_dir_walk_error",
                path=e.filename,
                error=str(e),
            )
            raise FilesystemError(
                f"Failed to list {e.filename or self.translations_dir}: {e}",
                path=e.filename or self.translations_dir,
            ) from e

        for _, path, language, prefix in sorted(candidates, key=lambda c: c[0]):
            yield path, language, prefix

    def _read(self, path: Path) -> Value:
        """Read and decode a single translation file.

        Raises:
            ParseError: If the content is malformed or not a mapping.
            FilesystemError: If the file cannot be read.
        """
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            logger.error("translation_file_read_error", file=str(path), error=str(e))
            raise FilesystemError(f"Failed to read {path}: {e}", path=path) from e

        try:
            data = decode(self.fmt, raw)
        except DECODE_ERRORS + (RecursionError,) as e:
            raise self._parse_error(path, e) from e

        if not isinstance(data, dict):
            logger.error(
                "invalid_translation_document",
                file=str(path),
                expected="mapping",
                found=type(data).__name__,
            )
            raise ParseError(
                f"Failed to parse {path}: top-level {self.fmt.value} document must be a mapping",
                path=path,
            )

        try:
            return to_value(data)
        except (ValueError, RecursionError) as e:
            raise self._parse_error(path, e) from e

    def _parse_error(self, path: Path, error: Exception) -> ParseError:
        logger.error("translation_file_parse_error", file=str(path), error=str(error))
        return ParseError(
            f"Failed to parse {path} as {self.fmt.value}: {error}", path=path
        )


def load_translations(
    translations_dir: Optional[Union[str, Path]],
    fmt: Union[TranslationFormat, str] = TranslationFormat.JSON,
) -> TranslationTable:
    """Build a translation table in one call.

    Raises:
        ConfigurationError, ParseError, FilesystemError: see ``TranslationLoader``.
    """
    return TranslationLoader(translations_dir, fmt).load()
