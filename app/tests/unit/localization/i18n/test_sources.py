"""Tests for localization.i18n.sources module."""

import sys

import pytest

from localization.i18n import (
    DirectorySourceReader,
    I18nError,
    InMemorySourceReader,
    MalformedSourceError,
    PackageResourceSourceReader,
    SourceNotFoundError,
    TranslationStore,
)


class TestDirectorySourceReader:
    """Tests for DirectorySourceReader."""

    def test_reader_initialization(self, temp_translations_dir):
        """DirectorySourceReader initializes with valid directory."""
        reader = DirectorySourceReader(temp_translations_dir)
        assert reader.directory == temp_translations_dir
        assert reader.extension == ".json"

    def test_reader_initialization_nonexistent_directory(self, tmp_path):
        """DirectorySourceReader raises ValueError for missing directory."""
        with pytest.raises(ValueError):
            DirectorySourceReader(tmp_path / "nonexistent")

    def test_read_returns_raw_text(self, directory_reader):
        """read() returns the document text unparsed."""
        raw = directory_reader.read("de")
        assert isinstance(raw, str)
        assert "Übersicht" in raw

    def test_read_missing_code_raises(self, directory_reader):
        """read() raises SourceNotFoundError for unknown codes."""
        with pytest.raises(SourceNotFoundError) as exc_info:
            directory_reader.read("xx")
        assert exc_info.value.code == "xx"

    def test_read_rejects_path_traversal(self, directory_reader):
        """Codes pointing outside the directory are treated as missing."""
        with pytest.raises(SourceNotFoundError):
            directory_reader.read("../en")

    def test_read_invalid_utf8_is_malformed(self, tmp_path):
        """A document that is not valid UTF-8 raises MalformedSourceError."""
        (tmp_path / "en.json").write_bytes(b'{"a": "\xff\xfe"}')
        reader = DirectorySourceReader(tmp_path)

        with pytest.raises(MalformedSourceError) as exc_info:
            reader.read("en")

        assert exc_info.value.code == "en"
        assert exc_info.value.path == ""
        assert "invalid utf-8" in exc_info.value.reason

    def test_invalid_utf8_surfaces_as_i18n_error_from_store(self, tmp_path):
        """Undecodable documents reach store callers as I18nError."""
        (tmp_path / "en.json").write_bytes(b'{"a": "\xff\xfe"}')
        store = TranslationStore(DirectorySourceReader(tmp_path))

        with pytest.raises(I18nError):
            store.get_or_load("en")

    def test_read_directory_in_place_of_file(self, tmp_path):
        """A directory named like a pack file is reported as a missing source."""
        (tmp_path / "en.json").mkdir()
        reader = DirectorySourceReader(tmp_path)

        with pytest.raises(SourceNotFoundError) as exc_info:
            reader.read("en")

        assert exc_info.value.code == "en"

    def test_read_manifest_invalid_utf8(self, tmp_path):
        """An undecodable manifest raises MalformedSourceError for "manifest"."""
        (tmp_path / "languages.json").write_bytes(b"\xff\xfe")
        reader = DirectorySourceReader(tmp_path)

        with pytest.raises(MalformedSourceError) as exc_info:
            reader.read_manifest()

        assert exc_info.value.code == "manifest"

    def test_read_manifest(self, directory_reader):
        """read_manifest() returns the raw manifest document."""
        assert '"Deutsch"' in directory_reader.read_manifest()

    def test_read_manifest_absent(self, tmp_path):
        """read_manifest() returns None when no manifest file exists."""
        assert DirectorySourceReader(tmp_path).read_manifest() is None

    def test_available_codes_excludes_manifest(self, directory_reader):
        """available_codes() lists pack files only."""
        assert directory_reader.available_codes() == ["de", "en", "fr"]

    def test_yaml_extension(self, temp_yaml_translations_dir):
        """Readers can serve YAML documents by extension."""
        reader = DirectorySourceReader(temp_yaml_translations_dir, extension=".yml")
        assert "créé" in reader.read("fr")
        assert reader.available_codes() == ["en", "fr"]


class TestInMemorySourceReader:
    """Tests for InMemorySourceReader."""

    def test_read(self):
        """read() returns the stored document."""
        reader = InMemorySourceReader({"en": "{}"})
        assert reader.read("en") == "{}"

    def test_read_missing(self):
        """read() raises SourceNotFoundError for unknown codes."""
        with pytest.raises(SourceNotFoundError):
            InMemorySourceReader({}).read("en")

    def test_source_not_found_is_lookup_error(self):
        """SourceNotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            InMemorySourceReader({}).read("en")

    def test_manifest(self):
        """read_manifest() returns the configured manifest or None."""
        assert InMemorySourceReader({}).read_manifest() is None
        assert InMemorySourceReader({}, manifest="{}").read_manifest() == "{}"


class TestPackageResourceSourceReader:
    """Tests for PackageResourceSourceReader."""

    @pytest.fixture
    def resource_package(self, tmp_path, monkeypatch):
        """Create an importable package with embedded locale files."""
        package_dir = tmp_path / "bundled_locales_pkg"
        locales_dir = package_dir / "locales"
        locales_dir.mkdir(parents=True)
        (package_dir / "__init__.py").write_text("", encoding="utf-8")
        (locales_dir / "en.json").write_text('{"nav": {"dashboard": "Dashboard"}}', encoding="utf-8")
        (locales_dir / "languages.json").write_text('{"en": "English"}', encoding="utf-8")
        monkeypatch.delitem(sys.modules, "bundled_locales_pkg", raising=False)
        monkeypatch.syspath_prepend(str(tmp_path))
        return "bundled_locales_pkg"

    def test_read_embedded_document(self, resource_package):
        """read() loads documents from package data."""
        reader = PackageResourceSourceReader(resource_package)
        assert "Dashboard" in reader.read("en")

    def test_read_missing_embedded_document(self, resource_package):
        """read() raises SourceNotFoundError for absent resources."""
        reader = PackageResourceSourceReader(resource_package)
        with pytest.raises(SourceNotFoundError):
            reader.read("de")

    def test_read_invalid_utf8_embedded_document(self, resource_package, tmp_path):
        """Undecodable package data raises MalformedSourceError."""
        locales_dir = tmp_path / resource_package / "locales"
        (locales_dir / "de.json").write_bytes(b'{"a": "\xff"}')
        reader = PackageResourceSourceReader(resource_package)

        with pytest.raises(MalformedSourceError) as exc_info:
            reader.read("de")

        assert exc_info.value.code == "de"

    def test_manifest_and_codes(self, resource_package):
        """Manifest and code discovery work over package resources."""
        reader = PackageResourceSourceReader(resource_package)
        assert reader.read_manifest() == '{"en": "English"}'
        assert reader.available_codes() == ["en"]
