"""Localization engine.

Packages:
- configuration: Settings management (Settings, I18nSettings, get_settings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation packs, key resolution, fallback and interpolation
"""
