"""Tests for localization.logging module."""

import os
import subprocess
import sys
from pathlib import Path

import structlog

from localization.logging import bind_language_context, configure_logging, get_module_logger

APP_ROOT = Path(__file__).resolve().parents[3]


class TestLoggingSetup:
    """Tests for logging configuration."""

    def test_configure_logging_returns_logger(self):
        """configure_logging() returns a usable logger under pytest."""
        logger = configure_logging()
        logger.info("test_event", key="value")

    def test_get_module_logger_carries_module_context(self):
        """get_module_logger() carries component and module_path."""
        logger = get_module_logger()
        context = structlog.get_context(logger.bind())
        assert context["component"] == __name__.split(".")[-1]
        assert context["module_path"] == __name__

    def test_import_does_not_configure_logging(self):
        """Importing the engine neither reads settings nor touches root logging."""
        env = dict(os.environ, I18N_SOURCE_FORMAT="xml", PYTHONPATH=str(APP_ROOT))
        script = (
            "import logging, structlog\n"
            "import localization.i18n\n"
            "import localization.i18n.interpolation\n"
            "assert not logging.root.handlers\n"
            "assert not structlog.is_configured()\n"
        )

        result = subprocess.run(
            [sys.executable, "-c", script],
            env=env,
            cwd=str(APP_ROOT),
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert result.returncode == 0, result.stderr


class TestBindLanguageContext:
    """Tests for bind_language_context()."""

    def test_binds_and_unbinds(self):
        """Context is visible inside the block and removed afterwards."""
        with bind_language_context(chain=["de", "en"], key="nav.dashboard", extra="x"):
            context = structlog.contextvars.get_contextvars()
            assert context["language_chain"] == ["de", "en"]
            assert context["translation_key"] == "nav.dashboard"
            assert context["extra"] == "x"

        context = structlog.contextvars.get_contextvars()
        assert "language_chain" not in context
        assert "translation_key" not in context
        assert "extra" not in context
