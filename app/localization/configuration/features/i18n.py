"""Translation loading settings."""

from typing import Any, Literal

from pydantic import Field, field_validator

from localization.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation files configuration.

    Environment Variables:
        TRANSLATIONS_DIR: Root directory of translation files. Empty disables
            loading and every lookup echoes the requested key.
        TRANSLATIONS_FORMAT: File format of the translation files
            (json, yaml or toml, default: json)

    Example:
        ```python
        from localization.configuration import settings

        root = settings.i18n.TRANSLATIONS_DIR
        fmt = settings.i18n.TRANSLATIONS_FORMAT
        ```
    """

    TRANSLATIONS_DIR: str = Field(default="", alias="TRANSLATIONS_DIR")
    TRANSLATIONS_FORMAT: Literal["json", "yaml", "toml"] = Field(
        default="json", alias="TRANSLATIONS_FORMAT"
    )

    @field_validator("TRANSLATIONS_FORMAT", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        """Accept format names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
