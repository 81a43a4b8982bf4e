"""Translation file formats and their decoders.

Each format selects both the file extension the loader accepts and the
decoder used to turn file bytes into a nested key-value tree.
"""

import json
import tomllib
from enum import Enum
from typing import Any, Callable, Dict

import yaml

from localization.i18n.errors import ConfigurationError


class TranslationFormat(str, Enum):
    """Supported translation file formats."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"

    @classmethod
    def from_string(cls, fmt: str) -> "TranslationFormat":
        """Convert string to TranslationFormat enum.

        Args:
            fmt: Format name (e.g., "json", "yaml", "toml").

        Returns:
            Matching TranslationFormat value.

        Raises:
            ConfigurationError: If the format is not supported.
        """
        try:
            return cls(fmt)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported translation format: {fmt}") from e

    @property
    def extension(self) -> str:
        """File name suffix for this format, including the dot."""
        return f".{self.value}"


def _decode_json(raw: bytes) -> Any:
    return json.loads(raw)


def _decode_yaml(raw: bytes) -> Any:
    # An empty YAML document decodes to None
    data = yaml.safe_load(raw)
    return {} if data is None else data


def _decode_toml(raw: bytes) -> Any:
    return tomllib.loads(raw.decode("utf-8"))


DECODERS: Dict[TranslationFormat, Callable[[bytes], Any]] = {
    TranslationFormat.JSON: _decode_json,
    TranslationFormat.YAML: _decode_yaml,
    TranslationFormat.TOML: _decode_toml,
}

# json.JSONDecodeError, tomllib.TOMLDecodeError and UnicodeDecodeError are
# all ValueError subclasses.
DECODE_ERRORS = (ValueError, yaml.YAMLError)


def decode(fmt: TranslationFormat, raw: bytes) -> Any:
    """Decode raw file content with the decoder registered for ``fmt``.

    Raises:
        ValueError, yaml.YAMLError: If the content is malformed.
    """
    return DECODERS[fmt](raw)
