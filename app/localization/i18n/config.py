"""Configuration accepted by ``LocalizationService.init``."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from localization.i18n.models import LanguageManifest
from localization.i18n.sources import SourceReader


class LocalizationConfig(BaseModel):
    """Startup configuration for a LocalizationService.

    Attributes:
        source: Reader supplying raw pack documents.
        default_lang: Language activated by ``init``.
        fallback_langs: Ordered fallback chain tail consulted after the
            current language.
        manifest: Optional explicit manifest. When omitted, the manifest is
            read from ``source.read_manifest()``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    source: SourceReader
    default_lang: str
    fallback_langs: List[str] = Field(default_factory=list)
    manifest: Optional[LanguageManifest] = None

    @field_validator("default_lang")
    @classmethod
    def validate_default_lang(cls, v):
        """Validate the default language code."""
        if not isinstance(v, str) or not v:
            raise ValueError("LocalizationConfig.default_lang must be a non-empty str")
        return v

    @field_validator("fallback_langs")
    @classmethod
    def validate_fallback_langs(cls, v):
        """Validate each fallback language code."""
        for code in v:
            if not code:
                raise ValueError("LocalizationConfig.fallback_langs entries must be non-empty")
        return v
