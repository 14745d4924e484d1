import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `localization.i18n`) works during pytest collection however
# pytest is invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from localization.configuration import get_settings  # noqa: E402
from localization.logging import configure_logging  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Install the test logging configuration once per session."""
    configure_logging()


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop the cached Settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
