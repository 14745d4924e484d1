"""Localization service facade.

Composes the store, fallback chain and interpolator behind the public API
consumed by host code, and owns the "current language" pointer.

Usage:
    from localization.i18n import (
        DirectorySourceReader,
        LocalizationConfig,
        LocalizationService,
        TranslationStore,
    )

    reader = DirectorySourceReader(Path("locales"))
    service = LocalizationService(TranslationStore(reader))
    service.init(LocalizationConfig(source=reader, default_lang="de", fallback_langs=["en"]))

    service.resolve("nav.greeting", {"name": "Ana"})
    service.set_language("fr")
"""

import threading
from enum import Enum
from typing import Any, List, Mapping, Optional

from localization.i18n.config import LocalizationConfig
from localization.i18n.exceptions import NotInitializedError
from localization.i18n.fallback import FallbackChain, MissSink
from localization.i18n.interpolation import Interpolator
from localization.i18n.models import LanguageManifest
from localization.i18n.resolvers import KeyResolver, LanguageNegotiator
from localization.i18n.store import TranslationStore
from localization.logging import get_module_logger

logger = get_module_logger()


class ServiceState(str, Enum):
    """Lifecycle states of a LocalizationService."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


class LocalizationService:
    """Public facade of the localization engine.

    The service starts UNINITIALIZED. A successful ``init`` loads the default
    language and moves it to READY; every other public operation requires
    READY and raises NotInitializedError otherwise.

    Attributes:
        store: TranslationStore owning the loaded packs.
        chain: FallbackChain used for resolution.
        interpolator: Interpolator applied to resolved templates.
        negotiator: LanguageNegotiator used by ``negotiate``.
    """

    def __init__(
        self,
        store: TranslationStore,
        interpolator: Optional[Interpolator] = None,
        on_miss: Optional[MissSink] = None,
    ):
        """Initialize an UNINITIALIZED service.

        Args:
            store: TranslationStore to resolve against.
            interpolator: Placeholder interpolator (default: Interpolator()).
            on_miss: Optional diagnostics sink for per-language key misses.
        """
        self.store = store
        self.resolver = KeyResolver()
        self.chain = FallbackChain(store, self.resolver, on_miss=on_miss)
        self.interpolator = interpolator or Interpolator()
        self.negotiator = LanguageNegotiator()
        self._lock = threading.Lock()
        self._state = ServiceState.UNINITIALIZED
        self._config: Optional[LocalizationConfig] = None
        self._manifest = LanguageManifest()
        self._current: Optional[str] = None

    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def config(self) -> Optional[LocalizationConfig]:
        return self._config

    def _require_ready(self, operation: str) -> None:
        if self._state is not ServiceState.READY:
            raise NotInitializedError(f"LocalizationService.{operation}() called before init()")

    def _load_manifest(self, config: LocalizationConfig) -> LanguageManifest:
        if config.manifest is not None:
            return config.manifest
        raw_manifest = config.source.read_manifest()
        if raw_manifest is None:
            return LanguageManifest()
        return self.store.parser.parse_manifest(raw_manifest)

    def init(self, config: LocalizationConfig) -> None:
        """Load the default language and make the service READY.

        Fallback languages are not loaded here; they load on first miss.

        Args:
            config: Startup configuration.

        Raises:
            ValueError: If ``config.source`` is not the reader the store
                loads packs from.
            SourceNotFoundError: If the default language has no source.
            MalformedSourceError: If the default language or the manifest is
                malformed. The service state is left unchanged.
        """
        if config.source is not self.store.reader:
            raise ValueError(
                "config.source must be the SourceReader the TranslationStore was built over"
            )

        self.store.get_or_load(config.default_lang)
        manifest = self._load_manifest(config)

        with self._lock:
            self._config = config
            self._manifest = manifest
            self._current = config.default_lang
            self._state = ServiceState.READY

        logger.info(
            "localization_initialized",
            default_lang=config.default_lang,
            fallback_langs=list(config.fallback_langs),
            manifest_languages=manifest.codes(),
        )

    def _chain_for(self, current: str) -> List[str]:
        chain = [current]
        for code in self._config.fallback_langs:
            if code not in chain:
                chain.append(code)
        return chain

    def language_chain(self) -> List[str]:
        """Return the chain ``resolve`` would consult right now."""
        self._require_ready("language_chain")
        return self._chain_for(self._current)

    def resolve(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate ``key`` in the current language and interpolate ``params``.

        The chain ``[current_language] + fallback_langs`` is built from a
        single read of the current language, so a concurrent ``set_language``
        is observed entirely or not at all. A key no language defines
        resolves to the key itself.

        Args:
            key: Dotted key path (e.g. "nav.dashboard").
            params: Optional placeholder values.

        Returns:
            Resolved and interpolated string.

        Raises:
            NotInitializedError: If ``init`` has not succeeded.
            SourceNotFoundError: If a fallback language's source is missing.
            MalformedSourceError: If a fallback language's source is malformed.
        """
        self._require_ready("resolve")
        current = self._current
        template = self.chain.resolve_across_chain(self._chain_for(current), key)
        return self.interpolator.substitute(template, params)

    def has(self, key: str) -> bool:
        """Check whether any language in the current chain defines ``key``."""
        self._require_ready("has")
        current = self._current
        return any(
            self.resolver.has(self.store.get_or_load(code), key)
            for code in self._chain_for(current)
        )

    def set_language(self, code: str) -> None:
        """Switch the current language.

        The pack is loaded first; the pointer is swapped only on success.

        Raises:
            NotInitializedError: If ``init`` has not succeeded.
            SourceNotFoundError: If ``code`` has no source. The current
                language is unchanged.
            MalformedSourceError: If ``code``'s source is malformed. The
                current language is unchanged.
        """
        self._require_ready("set_language")
        self.store.get_or_load(code)

        with self._lock:
            previous = self._current
            self._current = code

        if previous != code:
            logger.info("language_changed", previous=previous, current=code)

    def current_language(self) -> str:
        """Return the current language code."""
        self._require_ready("current_language")
        return self._current

    def available_languages(self) -> List[str]:
        """Return language codes from the manifest, in manifest order.

        Independent of which packs are loaded.
        """
        self._require_ready("available_languages")
        return self._manifest.codes()

    def language_display_name(self, code: str) -> str:
        """Return the manifest display name for ``code``, or ``code`` if unknown."""
        self._require_ready("language_display_name")
        return self._manifest.display_name(code)

    def negotiate(self, accept_language: Optional[str]) -> str:
        """Pick the best manifest language for an Accept-Language header.

        Falls back to the configured default language when the header is
        empty or nothing matches. When the manifest is empty, the loaded
        languages are offered instead.
        """
        self._require_ready("negotiate")
        available = self._manifest.codes() or self.store.loaded_codes()
        return self.negotiator.negotiate(accept_language, available, self._config.default_lang)

    def reload(self, code: Optional[str] = None) -> None:
        """Drop cached packs and reload the current language.

        Intended for development hot reload.

        Args:
            code: Language to drop, or None to drop every cached pack.

        Raises:
            NotInitializedError: If ``init`` has not succeeded.
            SourceNotFoundError: If the current language's source vanished.
            MalformedSourceError: If the current language's source is now malformed.
        """
        self._require_ready("reload")
        if code is None:
            self.store.clear()
        else:
            self.store.invalidate(code)
        self.store.get_or_load(self._current)
        logger.info("translations_reloaded", code=code or "all")
