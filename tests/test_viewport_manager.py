# -*- coding: utf-8 -*-
"""
tests/test_viewport_manager.py
==============================
ViewportManager tier tracking (QtCore) and widget styling (QtWidgets).
"""
import pytest

pytest.importorskip("PySide6.QtCore")

from responsive_kit.config.themes import ResponsiveStyleBuilder
from responsive_kit.config.themes.breakpoints import range_up
from responsive_kit.core.viewport_manager import ViewportManager


@pytest.fixture
def manager():
    return ViewportManager()


@pytest.fixture
def emitted(manager):
    seen = []
    manager.breakpoint_changed.connect(lambda name: seen.append(name))
    return seen


class TestTierTracking:

    def test_initial_state(self, manager):
        assert manager.get_current_breakpoint() is None
        assert manager.get_current_width() is None
        assert not manager.matches(range_up("xs"))

    def test_emits_on_tier_change_only(self, manager, emitted):
        assert manager.update_width(800) is True
        assert manager.update_width(900) is False
        assert manager.update_width(1300) is True
        assert emitted == ["md", "xl"]
        assert manager.current_breakpoint == "xl"
        assert manager.current_width == 1300

    def test_matches(self, manager):
        manager.update_width(1000)
        assert manager.matches(range_up("lg"))
        assert not manager.matches(range_up("xl"))

    def test_custom_table(self, device_table):
        manager = ViewportManager(table=device_table)
        manager.update_width(700)
        assert manager.current_breakpoint == "tablet"

    def test_table_follows_builder(self, device_table):
        builder = ResponsiveStyleBuilder(table=device_table)
        assert ViewportManager(builder=builder).table is device_table

    def test_negative_width(self, manager):
        with pytest.raises(ValueError):
            manager.update_width(-10)


class TestSingleton:

    def test_get_instance(self):
        ViewportManager.clear_instance()
        try:
            assert ViewportManager.get_instance() is ViewportManager.get_instance()
        finally:
            ViewportManager.clear_instance()


class TestWidgetStyling:

    def test_watch_applies_flattened_sheet(self, qapp):
        from PySide6.QtWidgets import QWidget

        widget = QWidget()
        widget.resize(400, 300)
        manager = ViewportManager(builder=ResponsiveStyleBuilder())
        manager.watch(widget)

        assert manager.current_breakpoint == "xs"
        sheet = widget.styleSheet()
        assert ".d-none" in sheet
        assert ".d-sm-none" not in sheet
        assert "@media" not in sheet

    def test_resize_event_updates_tier(self, qapp):
        from PySide6.QtCore import QSize
        from PySide6.QtGui import QResizeEvent
        from PySide6.QtWidgets import QApplication, QWidget

        widget = QWidget()
        widget.resize(400, 300)
        manager = ViewportManager(builder=ResponsiveStyleBuilder())
        manager.watch(widget)

        QApplication.sendEvent(widget, QResizeEvent(QSize(1000, 300), QSize(400, 300)))

        assert manager.current_breakpoint == "lg"
        assert "max-width: 960px;" in widget.styleSheet()

    def test_unwatch(self, qapp):
        from PySide6.QtCore import QSize
        from PySide6.QtGui import QResizeEvent
        from PySide6.QtWidgets import QApplication, QWidget

        widget = QWidget()
        widget.resize(400, 300)
        manager = ViewportManager()
        manager.watch(widget)
        manager.unwatch()

        QApplication.sendEvent(widget, QResizeEvent(QSize(1000, 300), QSize(400, 300)))
        assert manager.current_breakpoint == "xs"
