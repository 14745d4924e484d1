"""Localization engine settings."""

import json
from typing import Annotated, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from localization.configuration.base import InfrastructureSettings

SUPPORTED_SOURCE_FORMATS = ("json", "yaml")


class I18nSettings(InfrastructureSettings):
    """Translation source and language configuration.

    Environment Variables:
        I18N_SOURCE_DIR: Directory holding one pack document per language
            (default: bundled app/locales directory)
        I18N_SOURCE_FORMAT: Pack document format, 'json' or 'yaml' (default: json)
        I18N_DEFAULT_LANG: Language activated at startup (default: en)
        I18N_FALLBACK_LANGS: Comma-separated fallback chain tail (default: en)
        I18N_MANIFEST_FILE: Manifest file name inside the source directory
            (default: languages.json)

    Example:
        ```python
        from localization.configuration import get_settings

        settings = get_settings()
        chain_tail = settings.i18n.fallback_langs
        ```
    """

    source_dir: Optional[str] = Field(
        default=None,
        alias="I18N_SOURCE_DIR",
        description="Directory containing <code>.<ext> pack documents",
    )
    source_format: str = Field(
        default="json",
        alias="I18N_SOURCE_FORMAT",
        description="Pack document format: 'json' or 'yaml'",
    )
    default_lang: str = Field(
        default="en",
        alias="I18N_DEFAULT_LANG",
        description="Language code activated at startup",
    )
    fallback_langs: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en"],
        alias="I18N_FALLBACK_LANGS",
        description="Ordered fallback languages consulted after the current one",
    )
    manifest_file: str = Field(
        default="languages.json",
        alias="I18N_MANIFEST_FILE",
        description="Manifest document mapping language code to display name",
    )

    @field_validator("source_format")
    @classmethod
    def _validate_source_format(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_SOURCE_FORMATS:
            raise ValueError(
                f"Unsupported source format: {value} "
                f"(expected one of {', '.join(SUPPORTED_SOURCE_FORMATS)})"
            )
        return value

    @field_validator("fallback_langs", mode="before")
    @classmethod
    def _split_fallback_langs(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                value = json.loads(value)
            else:
                value = value.split(",")
        return [code.strip() for code in value if code and code.strip()]

    @property
    def extension(self) -> str:
        """File extension matching the configured source format."""
        return ".yml" if self.source_format == "yaml" else ".json"
