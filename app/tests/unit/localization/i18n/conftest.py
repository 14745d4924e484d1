"""Feature-level fixtures for localization engine tests.

Provides translation directories on disk and ready-made readers, stores and
services for resolution scenarios.
"""

import json

import pytest
import yaml

from localization.i18n import (
    DirectorySourceReader,
    PackParser,
    TranslationStore,
)
from tests.factories.i18n import DEFAULT_MANIFEST, make_reader, make_service


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample JSON pack files.

    Returns a directory structure like:
    - en.json
    - de.json
    - fr.json (malformed: a number at nav.count)
    - languages.json
    """
    en = {
        "nav": {"dashboard": "Dashboard", "settings": "Settings"},
        "common": {"welcome": "Welcome, {name}!"},
    }
    de = {"nav": {"dashboard": "Übersicht"}, "common": {}}
    fr = {"nav": {"dashboard": "Tableau de bord", "count": 3}}

    (tmp_path / "en.json").write_text(json.dumps(en), encoding="utf-8")
    (tmp_path / "de.json").write_text(json.dumps(de, ensure_ascii=False), encoding="utf-8")
    (tmp_path / "fr.json").write_text(json.dumps(fr), encoding="utf-8")
    (tmp_path / "languages.json").write_text(json.dumps(DEFAULT_MANIFEST), encoding="utf-8")
    return tmp_path


@pytest.fixture
def temp_yaml_translations_dir(tmp_path):
    """Create temporary directory with sample YAML pack files."""
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"incident": {"created": "Incident {incident_id} created"}}, f)
    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump({"incident": {"created": "Incident {incident_id} créé"}}, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def directory_reader(temp_translations_dir):
    """Create DirectorySourceReader for the temporary JSON directory."""
    return DirectorySourceReader(temp_translations_dir)


@pytest.fixture
def memory_reader():
    """Create InMemorySourceReader over the default packs."""
    return make_reader()


@pytest.fixture
def store(memory_reader):
    """Create TranslationStore over the default in-memory packs."""
    return TranslationStore(memory_reader, PackParser())


@pytest.fixture
def service():
    """Create READY LocalizationService with chain [de, en]."""
    return make_service()
