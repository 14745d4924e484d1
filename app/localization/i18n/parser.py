"""Pack parsing: raw structured text -> typed translation tree.

Every object in the source becomes a ``Branch`` and every string becomes a
``Leaf``. Any other value (number, boolean, null, array) is a schema
violation reported with the dotted path of the offending node.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

import yaml

from localization.i18n.exceptions import MalformedSourceError
from localization.i18n.models import Branch, LanguageManifest, LanguagePack, Leaf, TranslationNode


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


class PackParser:
    """Parses one language's raw document into a ``LanguagePack``.

    Attributes:
        source_format: Document format, "json" or "yaml".
    """

    def __init__(self, source_format: str = "json"):
        source_format = source_format.lower()
        if source_format not in ("json", "yaml"):
            raise ValueError(f"Unsupported source format: {source_format}")
        self.source_format = source_format

    def decode(self, code: str, raw_text: str) -> Any:
        """Decode raw text into plain Python data.

        Raises:
            MalformedSourceError: If the text is not valid for the format
                (reported at the document root).
        """
        try:
            if self.source_format == "yaml":
                return yaml.safe_load(raw_text)
            return json.loads(raw_text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise MalformedSourceError(code, "", f"unparseable {self.source_format}: {e}") from e

    def parse(self, code: str, raw_text: str) -> LanguagePack:
        """Parse a raw pack document.

        Args:
            code: Language code the document belongs to (used in errors).
            raw_text: Raw document text.

        Returns:
            Immutable LanguagePack for ``code``.

        Raises:
            MalformedSourceError: If the document cannot be decoded or any node
                violates the leaf/branch schema.
        """
        data = self.decode(code, raw_text)
        if not isinstance(data, Mapping):
            raise MalformedSourceError(code, "", f"expected object at root, got {_describe(data)}")

        root = self._build_branch(code, data, "")
        return LanguagePack(
            code=code,
            root=root,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    def parse_manifest(self, raw_text: str) -> LanguageManifest:
        """Parse a flat ``{code: display_name}`` manifest document.

        Manifests are always JSON-compatible, so YAML sources may ship either
        syntax; decoding uses the parser's format.

        Raises:
            MalformedSourceError: With code "manifest" if the document is not a
                flat object of strings.
        """
        data = self.decode("manifest", raw_text)
        if not isinstance(data, Mapping):
            raise MalformedSourceError(
                "manifest", "", f"expected object at root, got {_describe(data)}"
            )
        entries: Dict[str, str] = {}
        for code, name in data.items():
            if not isinstance(code, str) or not isinstance(name, str):
                raise MalformedSourceError(
                    "manifest", str(code), f"expected string display name, got {_describe(name)}"
                )
            entries[code] = name
        return LanguageManifest.from_mapping(entries)

    def _build_branch(self, code: str, data: Mapping, prefix: str) -> Branch:
        children: Dict[str, TranslationNode] = {}
        for key, value in data.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            if not isinstance(key, str):
                raise MalformedSourceError(code, path, f"expected string key, got {_describe(key)}")
            # Dots separate key path segments, so such a key is unreachable.
            if "." in key:
                raise MalformedSourceError(code, path, "segment contains '.'")
            children[key] = self._build_node(code, value, path)
        return Branch(children)

    def _build_node(self, code: str, value: Any, path: str) -> TranslationNode:
        if isinstance(value, str):
            return Leaf(value)
        if isinstance(value, Mapping):
            return self._build_branch(code, value, path)
        raise MalformedSourceError(
            code, path, f"expected string or object, got {_describe(value)}"
        )
