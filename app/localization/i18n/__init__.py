"""i18n system - hierarchical key-path translation engine.

Loads one translation tree per language, resolves dotted key paths against
it, falls back across an ordered language chain, and interpolates named
parameters into the result.

Main components:
- sources: SourceReader and directory / package / in-memory implementations
- parser: PackParser building typed Leaf/Branch trees
- store: TranslationStore with single-flight lazy loading
- resolvers: KeyResolver for key paths, LanguageNegotiator for Accept-Language
- fallback: FallbackChain resolution policy
- interpolation: Interpolator for {name} and :name placeholders
- service: LocalizationService facade
"""

from localization.i18n.config import LocalizationConfig
from localization.i18n.exceptions import (
    I18nError,
    MalformedSourceError,
    NotInitializedError,
    SourceNotFoundError,
)
from localization.i18n.factory import create_localization_service
from localization.i18n.fallback import FallbackChain
from localization.i18n.interpolation import Interpolator
from localization.i18n.models import (
    Branch,
    KeyNotFound,
    LanguageManifest,
    LanguageManifestEntry,
    LanguagePack,
    Leaf,
    MissReason,
    Resolution,
    TranslationNode,
)
from localization.i18n.parser import PackParser
from localization.i18n.resolvers import KeyResolver, LanguageNegotiator
from localization.i18n.service import LocalizationService, ServiceState
from localization.i18n.sources import (
    DirectorySourceReader,
    InMemorySourceReader,
    PackageResourceSourceReader,
    SourceReader,
)
from localization.i18n.store import TranslationStore

__all__ = [
    "Branch",
    "DirectorySourceReader",
    "FallbackChain",
    "I18nError",
    "InMemorySourceReader",
    "Interpolator",
    "KeyNotFound",
    "KeyResolver",
    "LanguageManifest",
    "LanguageManifestEntry",
    "LanguageNegotiator",
    "LanguagePack",
    "Leaf",
    "LocalizationConfig",
    "LocalizationService",
    "MalformedSourceError",
    "MissReason",
    "NotInitializedError",
    "PackParser",
    "PackageResourceSourceReader",
    "Resolution",
    "ServiceState",
    "SourceNotFoundError",
    "SourceReader",
    "TranslationNode",
    "TranslationStore",
    "create_localization_service",
]
