"""Tests for localization.i18n.parser module."""

import pytest

from localization.i18n import Branch, Leaf, MalformedSourceError, PackParser


class TestPackParser:
    """Tests for PackParser."""

    @pytest.fixture
    def parser(self):
        """Create JSON PackParser."""
        return PackParser()

    def test_parse_builds_branches_and_leaves(self, parser):
        """Objects become Branches and strings become Leaves."""
        pack = parser.parse("en", '{"nav": {"dashboard": "Dashboard"}, "title": "App"}')

        assert pack.code == "en"
        assert isinstance(pack.root, Branch)
        assert isinstance(pack.root.get("nav"), Branch)
        assert pack.root.get("nav").get("dashboard") == Leaf("Dashboard")
        assert pack.root.get("title") == Leaf("App")
        assert pack.loaded_at is not None

    def test_parse_preserves_key_set_and_order(self, parser):
        """Every source key becomes exactly one node, in source order."""
        pack = parser.parse("en", '{"z": "Z", "a": {"m": "M", "b": "B"}, "k": {}}')
        assert list(pack.root.children) == ["z", "a", "k"]
        assert list(pack.root.get("a").children) == ["m", "b"]
        assert len(pack.root.get("k")) == 0

    def test_duplicate_keys_last_wins(self, parser):
        """Later duplicate definitions overwrite earlier ones."""
        pack = parser.parse("en", '{"title": "First", "title": "Second"}')
        assert pack.root.get("title") == Leaf("Second")

    @pytest.mark.parametrize(
        "document,path,kind",
        [
            ('{"nav": {"count": 3}}', "nav.count", "int"),
            ('{"nav": {"ratio": 1.5}}', "nav.ratio", "float"),
            ('{"enabled": true}', "enabled", "bool"),
            ('{"nav": {"items": null}}', "nav.items", "null"),
            ('{"a": {"b": {"list": ["x"]}}}', "a.b.list", "array"),
        ],
    )
    def test_non_string_scalar_reports_path(self, parser, document, path, kind):
        """Non-string, non-object values fail with the dotted path of the node."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("de", document)

        assert exc_info.value.code == "de"
        assert exc_info.value.path == path
        assert kind in exc_info.value.reason

    def test_dotted_key_is_malformed(self, parser):
        """A key containing '.' could never be addressed and is rejected."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("en", '{"nav": {"a.b": "x"}}')
        assert exc_info.value.path == "nav.a.b"
        assert "'.'" in exc_info.value.reason

    def test_unparseable_text_reports_root(self, parser):
        """Invalid JSON fails at the document root."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("de", '{"nav": ')
        assert exc_info.value.path == ""
        assert "document root" in str(exc_info.value)

    def test_non_object_root_reports_root(self, parser):
        """A root that is not an object is malformed."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("de", '["a", "b"]')
        assert exc_info.value.path == ""

    def test_malformed_source_is_value_error(self, parser):
        """MalformedSourceError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parser.parse("de", '{"a": 1}')

    def test_unsupported_format(self):
        """Constructing a parser for an unknown format raises ValueError."""
        with pytest.raises(ValueError):
            PackParser("toml")


class TestYAMLPackParser:
    """Tests for PackParser in YAML mode."""

    @pytest.fixture
    def parser(self):
        """Create YAML PackParser."""
        return PackParser("yaml")

    def test_parse_yaml_document(self, parser):
        """YAML documents parse into the same tree shape."""
        pack = parser.parse("en", "nav:\n  dashboard: Dashboard\n")
        assert pack.root.get("nav").get("dashboard") == Leaf("Dashboard")

    def test_yaml_number_is_malformed(self, parser):
        """Unquoted YAML numbers are schema violations."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("en", "nav:\n  count: 3\n")
        assert exc_info.value.path == "nav.count"

    def test_yaml_non_string_key_is_malformed(self, parser):
        """YAML keys that are not strings are schema violations."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("en", "nav:\n  1: one\n")
        assert exc_info.value.path == "nav.1"

    def test_empty_yaml_document_is_malformed(self, parser):
        """An empty YAML document has no object at the root."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("en", "")
        assert exc_info.value.path == ""

    def test_invalid_yaml_reports_root(self, parser):
        """Invalid YAML fails at the document root."""
        with pytest.raises(MalformedSourceError) as exc_info:
            parser.parse("en", "invalid: yaml: content: [")
        assert exc_info.value.path == ""


class TestParseManifest:
    """Tests for PackParser.parse_manifest()."""

    def test_parse_manifest(self):
        """A flat object becomes an ordered manifest."""
        manifest = PackParser().parse_manifest('{"en": "English", "de": "Deutsch"}')
        assert manifest.codes() == ["en", "de"]
        assert manifest.display_name("de") == "Deutsch"

    def test_nested_manifest_is_malformed(self):
        """Manifest values must be strings."""
        with pytest.raises(MalformedSourceError) as exc_info:
            PackParser().parse_manifest('{"en": {"name": "English"}}')
        assert exc_info.value.code == "manifest"
        assert exc_info.value.path == "en"
