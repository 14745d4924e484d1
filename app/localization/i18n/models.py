"""Translation models for the localization engine.

Defines the typed translation tree (``Leaf`` / ``Branch``), the immutable
``LanguagePack`` built from it, manifest entries used for language
enumeration, and the value objects returned by key resolution.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

LanguageCode = str


@dataclass(frozen=True)
class Leaf:
    """Terminal translatable string.

    Attributes:
        text: Template text, possibly containing placeholders.
    """

    text: str


@dataclass(frozen=True)
class Branch:
    """Internal grouping node mapping segment names to child nodes.

    The children mapping is copied and exposed read-only, so a branch cannot
    be mutated after construction.

    Attributes:
        children: Mapping of segment name -> TranslationNode.
    """

    children: Mapping[str, "TranslationNode"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def get(self, segment: str) -> Optional["TranslationNode"]:
        """Return the child for ``segment``, or None if absent."""
        return self.children.get(segment)

    def __contains__(self, segment: object) -> bool:
        return segment in self.children

    def __len__(self) -> int:
        return len(self.children)


TranslationNode = Union[Leaf, Branch]


@dataclass(frozen=True)
class LanguagePack:
    """Immutable parsed string tree for one language.

    Attributes:
        code: Language code this pack belongs to (e.g. "en").
        root: Root Branch of the translation tree.
        loaded_at: Timestamp (ISO 8601) when the pack was parsed.
    """

    code: LanguageCode
    root: Branch
    loaded_at: Optional[str] = field(default=None, compare=False)

    def iter_leaves(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(key_path, text)`` for every leaf, depth first in source order."""
        stack: List[Tuple[str, TranslationNode]] = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            if isinstance(node, Leaf):
                yield prefix, node.text
                continue
            children = list(node.children.items())
            for segment, child in reversed(children):
                path = f"{prefix}.{segment}" if prefix else segment
                stack.append((path, child))

    def key_paths(self) -> List[str]:
        """Return every leaf key path in source order."""
        return [path for path, _ in self.iter_leaves()]

    def to_dict(self) -> Dict[str, object]:
        """Render the tree back into plain nested dicts."""
        return _node_to_dict(self.root)


def _node_to_dict(node: TranslationNode):
    if isinstance(node, Leaf):
        return node.text
    return {segment: _node_to_dict(child) for segment, child in node.children.items()}


@dataclass(frozen=True)
class LanguageManifestEntry:
    """Enumeration metadata for one language, independent of pack content.

    Attributes:
        code: Language code (e.g. "de").
        display_name: Human-readable name (e.g. "Deutsch").
    """

    code: LanguageCode
    display_name: str


class LanguageManifest:
    """Ordered code -> display name table used only for language enumeration."""

    def __init__(self, entries: Optional[List[LanguageManifestEntry]] = None):
        self._entries: Dict[LanguageCode, LanguageManifestEntry] = {}
        for entry in entries or []:
            self._entries[entry.code] = entry

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "LanguageManifest":
        """Build a manifest from a flat ``{code: display_name}`` mapping."""
        return cls(
            [LanguageManifestEntry(code=code, display_name=name) for code, name in mapping.items()]
        )

    @property
    def entries(self) -> List[LanguageManifestEntry]:
        return list(self._entries.values())

    def codes(self) -> List[LanguageCode]:
        """Return language codes in manifest order."""
        return list(self._entries.keys())

    def display_name(self, code: LanguageCode) -> str:
        """Return the display name for ``code``, or ``code`` itself if absent."""
        entry = self._entries.get(code)
        return entry.display_name if entry else code

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class MissReason(str, Enum):
    """Why key resolution stopped before reaching a leaf."""

    MISSING = "missing"
    LEAF = "leaf"
    BRANCH = "branch"


@dataclass(frozen=True)
class KeyNotFound:
    """Result value describing where key resolution stopped.

    Attributes:
        key_path: Dotted key path that was requested.
        segment_index: Index of the segment at which traversal could not continue.
        reason: MISSING (branch lacks the segment), LEAF (segments remain past a
            leaf) or BRANCH (path ends on an internal node).
    """

    key_path: str
    segment_index: int
    reason: MissReason

    @property
    def segment(self) -> str:
        """Segment name at ``segment_index``."""
        return self.key_path.split(".")[self.segment_index]

    def __str__(self) -> str:
        return (
            f"{self.key_path} (segment {self.segment_index} "
            f"'{self.segment}': {self.reason.value})"
        )


@dataclass(frozen=True)
class Resolution:
    """Successful chain resolution: the template and the language that supplied it."""

    template: str
    code: LanguageCode
