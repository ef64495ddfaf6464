"""
tests/conftest.py
=================
Shared pytest fixtures — breakpoint tables, isolated configuration,
and an offscreen QApplication for the Qt tests.
"""
import os

import pytest

# Qt tests never open a window
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

CONFIG_KEYS = (
    "BREAKPOINTS",
    "BREAKPOINT_EPSILON",
    "LOG_LEVEL",
    "LOG_DIR",
    "RESPONSIVE_KIT_CONFIG",
)


# ─── Tables ──────────────────────────────────────────────────────────────────

@pytest.fixture
def device_table():
    """A project-specific three-tier table"""
    from responsive_kit.config.themes.breakpoints import BreakpointTable
    return BreakpointTable([("mobile", 0), ("tablet", 640), ("desktop", 1024)])


# ─── Configuration (per test, no real .env or JSON touched) ─────────────────

@pytest.fixture
def clean_config(tmp_path, monkeypatch):
    """
    Fresh Config singleton rooted in tmp_path.

    load_dotenv writes straight into os.environ, so keys are removed
    again on teardown.
    """
    from responsive_kit.core.config import Config

    monkeypatch.chdir(tmp_path)
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    Config.clear_instance()

    yield tmp_path

    Config.clear_instance()
    for key in CONFIG_KEYS:
        os.environ.pop(key, None)


# ─── Qt ──────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PySide6.QtWidgets")
    return widgets.QApplication.instance() or widgets.QApplication([])
