"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings provider (main configuration entry point)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization settings section

Example:
    ```python
    from localization.configuration import get_settings

    settings = get_settings()
    source_dir = settings.i18n.source_dir
    ```
"""

from localization.configuration.i18n import I18nSettings
from localization.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
