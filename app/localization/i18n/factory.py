"""Factory functions for creating localization components.

Provides convenience functions for building a ready LocalizationService from
application settings.
"""

from pathlib import Path
from typing import Optional

from localization.configuration import I18nSettings, get_settings
from localization.i18n.config import LocalizationConfig
from localization.i18n.parser import PackParser
from localization.i18n.service import LocalizationService
from localization.i18n.sources import DirectorySourceReader, SourceReader
from localization.i18n.store import TranslationStore
from localization.logging import get_module_logger

logger = get_module_logger()


def default_locales_dir() -> Path:
    """Return the bundled ``app/locales`` directory."""
    # This file is at .../app/localization/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_source_reader(settings: I18nSettings) -> DirectorySourceReader:
    """Create a directory reader from settings.

    Raises:
        ValueError: If the configured directory does not exist.
    """
    directory = Path(settings.source_dir) if settings.source_dir else default_locales_dir()
    return DirectorySourceReader(
        directory,
        extension=settings.extension,
        manifest_name=settings.manifest_file,
    )


def create_localization_service(
    settings: Optional[I18nSettings] = None,
    source: Optional[SourceReader] = None,
    preload: bool = False,
) -> LocalizationService:
    """Create, configure and initialize a LocalizationService.

    Args:
        settings: I18n settings (default: application settings).
        source: Explicit source reader; overrides the settings' directory.
        preload: Whether to load every fallback language immediately instead
            of on first miss.

    Returns:
        LocalizationService: READY service with the default language loaded.

    Raises:
        ValueError: If the configured source directory does not exist.
        SourceNotFoundError: If the default (or a preloaded) language is missing.
        MalformedSourceError: If the default (or a preloaded) language is malformed.

    Usage:
        # Use defaults (bundled app/locales, lazy fallbacks)
        service = create_localization_service()

        # Warm every fallback before serving traffic
        service = create_localization_service(preload=True)
    """
    settings = settings or get_settings().i18n
    reader = source or create_source_reader(settings)

    store = TranslationStore(reader, PackParser(settings.source_format))
    service = LocalizationService(store)
    service.init(
        LocalizationConfig(
            source=reader,
            default_lang=settings.default_lang,
            fallback_langs=settings.fallback_langs,
        )
    )

    if preload:
        store.preload(settings.fallback_langs)
        logger.info(
            "localization_service_created_with_preload",
            loaded_codes=store.loaded_codes(),
        )
    else:
        logger.info(
            "localization_service_created_lazy",
            default_lang=settings.default_lang,
        )

    return service
