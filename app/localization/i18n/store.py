"""Process-wide language pack cache with single-flight loading.

Provides thread-safe lazy loading of language packs: the first request for a
code reads and parses its source exactly once, however many threads ask for
it concurrently, and every later request is served from memory.
"""

import threading
from concurrent.futures import Future
from typing import Any, Dict, Iterable, List

from localization.i18n.models import LanguagePack
from localization.i18n.parser import PackParser
from localization.i18n.sources import SourceReader
from localization.logging import get_module_logger

logger = get_module_logger()


class TranslationStore:
    """Thread-safe cache mapping language code -> LanguagePack.

    Concurrent first loads of one code are collapsed into a single
    ``SourceReader.read`` + ``PackParser.parse``; all waiting callers receive
    the same pack instance or the same exception instance. Failures are not
    cached, so a later call retries. Loads of different codes do not block
    each other.

    Attributes:
        reader: SourceReader supplying raw pack documents.
        parser: PackParser turning documents into packs.
        _packs: Loaded packs by language code.
        _in_flight: Pending loads by language code.
        _lock: Guards ``_packs``, ``_in_flight`` and the counters.
    """

    def __init__(self, reader: SourceReader, parser: PackParser | None = None):
        """Initialize the store.

        Args:
            reader: Source of raw pack documents.
            parser: Pack parser (default: JSON parser).
        """
        self.reader = reader
        self.parser = parser or PackParser()
        self._packs: Dict[str, LanguagePack] = {}
        self._in_flight: Dict[str, Future] = {}
        self._lock = threading.Lock()
        self._stats = {"loads": 0, "hits": 0, "failures": 0, "waits": 0}

    def get_or_load(self, code: str) -> LanguagePack:
        """Return the pack for ``code``, loading it on first access.

        Args:
            code: Language code.

        Returns:
            The cached LanguagePack for ``code``.

        Raises:
            SourceNotFoundError: If the reader has no document for ``code``.
            MalformedSourceError: If the document violates the pack schema.
        """
        with self._lock:
            pack = self._packs.get(code)
            if pack is not None:
                self._stats["hits"] += 1
                return pack

            future = self._in_flight.get(code)
            owner = future is None
            if owner:
                future = Future()
                self._in_flight[code] = future
            else:
                self._stats["waits"] += 1

        if not owner:
            return future.result()

        try:
            pack = self._load(code)
        except BaseException as e:
            with self._lock:
                self._in_flight.pop(code, None)
                self._stats["failures"] += 1
            future.set_exception(e)
            raise

        with self._lock:
            self._packs[code] = pack
            self._in_flight.pop(code, None)
            self._stats["loads"] += 1
        future.set_result(pack)
        return pack

    def _load(self, code: str) -> LanguagePack:
        try:
            raw_text = self.reader.read(code)
            pack = self.parser.parse(code, raw_text)
        except Exception as e:
            logger.error(
                "pack_load_failed",
                code=code,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        logger.info("pack_loaded", code=code, key_count=len(pack.key_paths()))
        return pack

    def preload(self, codes: Iterable[str]) -> List[LanguagePack]:
        """Load several codes up front, e.g. before serving traffic.

        Raises:
            SourceNotFoundError: On the first code without a document.
            MalformedSourceError: On the first malformed document.
        """
        return [self.get_or_load(code) for code in codes]

    def is_loaded(self, code: str) -> bool:
        """Check whether ``code`` is cached (in-flight loads do not count)."""
        with self._lock:
            return code in self._packs

    def loaded_codes(self) -> List[str]:
        """Return cached language codes in load order."""
        with self._lock:
            return list(self._packs.keys())

    def invalidate(self, code: str) -> bool:
        """Drop ``code`` from the cache so the next access re-reads its source.

        Intended for development hot reload. A load already in flight is not
        affected.

        Returns:
            True if a cached pack was removed.
        """
        with self._lock:
            removed = self._packs.pop(code, None) is not None
        if removed:
            logger.info("pack_invalidated", code=code)
        return removed

    def clear(self) -> None:
        """Drop every cached pack."""
        with self._lock:
            self._packs.clear()
        logger.info("cleared_pack_cache")

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with loaded codes and load/hit/wait/failure counters.
        """
        with self._lock:
            stats: Dict[str, Any] = dict(self._stats)
            stats["loaded_codes"] = list(self._packs.keys())
            stats["in_flight"] = list(self._in_flight.keys())
        return stats
