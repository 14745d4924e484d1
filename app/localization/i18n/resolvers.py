"""Key path resolution and language negotiation.

``KeyResolver`` walks a dotted key path against a pack's tree.
``LanguageNegotiator`` picks the best available language for an HTTP
Accept-Language header.
"""

from typing import List, Optional, Sequence, Tuple, Union

from localization.i18n.models import Branch, KeyNotFound, LanguagePack, Leaf, MissReason
from localization.logging import get_module_logger

logger = get_module_logger()


class KeyResolver:
    """Resolves dotted key paths against a LanguagePack.

    A key path must name a leaf exactly. Traversal stops at the first segment
    where it cannot continue:

    - the current branch has no child for the segment (MISSING)
    - segments remain but the current node is a leaf (LEAF)
    - all segments are consumed but the final node is a branch (BRANCH)
    """

    @staticmethod
    def split(key_path: str) -> List[str]:
        """Split a key path into its ordered segments."""
        return key_path.split(".")

    def resolve(self, pack: LanguagePack, key_path: str) -> Union[str, KeyNotFound]:
        """Resolve ``key_path`` against ``pack``.

        Args:
            pack: LanguagePack to search.
            key_path: Dot-separated key path (e.g. "nav.dashboard").

        Returns:
            The leaf's text, or KeyNotFound describing where traversal stopped.
        """
        segments = self.split(key_path)
        node: Union[Leaf, Branch] = pack.root

        for index, segment in enumerate(segments):
            if isinstance(node, Leaf):
                return KeyNotFound(key_path, index, MissReason.LEAF)
            child = node.get(segment)
            if child is None:
                return KeyNotFound(key_path, index, MissReason.MISSING)
            node = child

        if isinstance(node, Branch):
            return KeyNotFound(key_path, len(segments) - 1, MissReason.BRANCH)
        return node.text

    def has(self, pack: LanguagePack, key_path: str) -> bool:
        """Check whether ``key_path`` names a leaf in ``pack``."""
        return not isinstance(self.resolve(pack, key_path), KeyNotFound)


def _parse_quality(value: str) -> float:
    try:
        quality = float(value.strip())
    except ValueError:
        return 1.0
    # NaN fails both comparisons.
    if not 0.0 <= quality <= 1.0:
        return 1.0
    return quality


class LanguageNegotiator:
    """Performs language negotiation against the languages a host offers.

    Implements RFC 4647 style language range matching for the common
    scenarios (e.g. a client asks for "pt-BR" but only "pt" is available).
    """

    @staticmethod
    def parse_accept_language(accept_language: Optional[str]) -> List[Tuple[str, float]]:
        """Parse an Accept-Language header into ranges sorted by quality.

        "de-AT,de;q=0.9,en;q=0.8" -> [("de-AT", 1.0), ("de", 0.9), ("en", 0.8)]

        Only the ``q`` parameter is read; other parameters are ignored. A
        quality that is unparseable or outside 0..1 (including NaN) defaults
        to 1.0. Ranges with quality 0 and the "*" wildcard are dropped.
        """
        if not accept_language:
            return []

        preferences = []
        for position, part in enumerate(accept_language.split(",")):
            lang_range, *params = part.split(";")
            lang_range = lang_range.strip()
            if not lang_range or lang_range == "*":
                continue

            quality = 1.0
            for param in params:
                name, _, value = param.partition("=")
                if name.strip().lower() == "q":
                    quality = _parse_quality(value)

            if quality <= 0:
                continue
            preferences.append((lang_range, quality, position))

        preferences.sort(key=lambda x: (-x[1], x[2]))
        return [(lang_range, quality) for lang_range, quality, _ in preferences]

    @staticmethod
    def matches_language(requested: str, available: str, strict: bool = False) -> bool:
        """Check if an available language matches a requested language.

        Args:
            requested: Requested language tag (e.g. "en-US").
            available: Available language code (e.g. "en").
            strict: If True, requires an exact (case-insensitive) match. If
                False, also allows a primary-language match.

        Returns:
            True if the languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.replace("_", "-").split("-")[0].lower()
        available_lang = available.replace("_", "-").split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find the best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language codes.
            default: Returned when nothing matches.

        Returns:
            Best matching code from ``available`` (as spelled there), or default.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=False):
                    return avail_lang

        return default

    def negotiate(
        self,
        accept_language: Optional[str],
        available: Sequence[str],
        default: str,
    ) -> str:
        """Resolve a language code from an Accept-Language header.

        Args:
            accept_language: Accept-Language header value.
            available: Language codes the host can serve.
            default: Fallback when no preference matches.

        Returns:
            Matching code from ``available``, or ``default``.
        """
        requested = [lang for lang, _ in self.parse_accept_language(accept_language)]
        match = self.find_best_match(requested, available)
        if match is None:
            logger.debug(
                "no_matching_language_in_header",
                accept_language=accept_language,
                default=default,
            )
            return default
        logger.debug("resolved_from_header", code=match)
        return match
