"""Resolution across an ordered chain of languages.

The chain is consulted in order and the first language defining the key
wins. When every language misses, the literal key path is returned, so a
missing key never surfaces as an error. Source and parse failures from the
store do propagate.
"""

from typing import Callable, Optional, Sequence

from localization.i18n.models import KeyNotFound, Resolution
from localization.i18n.resolvers import KeyResolver
from localization.i18n.store import TranslationStore
from localization.logging import bind_language_context, get_module_logger

logger = get_module_logger()

MissSink = Callable[[str, KeyNotFound], None]


def log_miss(code: str, miss: KeyNotFound) -> None:
    """Default diagnostics sink: one debug event per language miss."""
    logger.debug(
        "translation_key_missed",
        code=code,
        key=miss.key_path,
        segment_index=miss.segment_index,
        segment=miss.segment,
        reason=miss.reason.value,
    )


class FallbackChain:
    """Resolves key paths across an ordered list of language codes.

    Attributes:
        store: TranslationStore supplying packs.
        resolver: KeyResolver walking each pack.
        on_miss: Diagnostics sink called with ``(code, KeyNotFound)`` for each
            language that misses. Sink failures are logged and ignored.
    """

    def __init__(
        self,
        store: TranslationStore,
        resolver: Optional[KeyResolver] = None,
        on_miss: Optional[MissSink] = None,
    ):
        self.store = store
        self.resolver = resolver or KeyResolver()
        self.on_miss = on_miss or log_miss

    def _report_miss(self, code: str, miss: KeyNotFound) -> None:
        try:
            self.on_miss(code, miss)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning(
                "miss_sink_failed",
                code=code,
                key=miss.key_path,
                error=str(e),
            )

    def resolve_template(self, chain: Sequence[str], key_path: str) -> Optional[Resolution]:
        """Find the first language in ``chain`` defining ``key_path``.

        Args:
            chain: Ordered, non-empty sequence of language codes.
            key_path: Dotted key path.

        Returns:
            Resolution with the template and supplying language, or None if
            every language misses.

        Raises:
            ValueError: If ``chain`` is empty.
            SourceNotFoundError: If a chain member's source is missing.
            MalformedSourceError: If a chain member's source is malformed.
        """
        if not chain:
            raise ValueError("Fallback chain must contain at least one language")

        with bind_language_context(chain=chain, key=key_path):
            for code in chain:
                pack = self.store.get_or_load(code)
                result = self.resolver.resolve(pack, key_path)
                if isinstance(result, KeyNotFound):
                    self._report_miss(code, result)
                    continue
                if code != chain[0]:
                    logger.debug(
                        "used_fallback_translation",
                        key=key_path,
                        requested_code=chain[0],
                        fallback_code=code,
                    )
                return Resolution(template=result, code=code)

            logger.warning("translation_not_found", key=key_path, chain=list(chain))
        return None

    def resolve_across_chain(self, chain: Sequence[str], key_path: str) -> str:
        """Resolve ``key_path`` across ``chain``, falling back to the key itself.

        Args:
            chain: Ordered, non-empty sequence of language codes.
            key_path: Dotted key path.

        Returns:
            The first template found, or ``key_path`` unchanged if no
            language defines it.
        """
        resolution = self.resolve_template(chain, key_path)
        if resolution is None:
            return key_path
        return resolution.template
