"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation files settings class
"""

from localization.configuration.features import I18nSettings
from localization.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
