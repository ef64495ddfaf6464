"""
Viewport Manager - responsive-kit
=================================

• Tracks the width of a watched widget and the breakpoint tier it falls in
• Emits breakpoint_changed when the tier changes
• Re-applies the flattened responsive stylesheet on tier change
"""

import logging
from typing import Optional

from PySide6.QtCore import QCoreApplication, QEvent, QObject, Signal

from responsive_kit.config.themes.breakpoints import (
    BreakpointTable,
    Number,
    ResolvedRange,
    resolve_table,
)
from responsive_kit.core.singleton import QObjectSingletonMixin

logger = logging.getLogger(__name__)


class ViewportManager(QObject, QObjectSingletonMixin):
    """
    Breakpoint tracker for a Qt widget.

    Usage:
        >>> manager = ViewportManager(builder=ResponsiveStyleBuilder())
        >>> manager.breakpoint_changed.connect(on_tier)
        >>> manager.watch(main_window)
    """

    breakpoint_changed = Signal(str)   # emitted with the new tier name

    def __init__(
        self,
        table: Optional[BreakpointTable] = None,
        builder=None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.builder = builder
        self.table = builder.table if builder is not None else resolve_table(table)
        self.current_breakpoint: Optional[str] = None
        self.current_width: Optional[Number] = None
        self._widget = None

    # --------------------------------------------------
    # Watching
    # --------------------------------------------------
    def watch(self, widget) -> None:
        """Follow ``widget``'s resizes (replaces any previous widget)"""
        self.unwatch()
        self._widget = widget
        widget.installEventFilter(self)
        logger.debug(f"Watching {type(widget).__name__} for viewport changes")
        self.update_width(widget.width())

    def unwatch(self) -> None:
        if self._widget is not None:
            self._widget.removeEventFilter(self)
            self._widget = None

    def eventFilter(self, watched, event) -> bool:
        if watched is self._widget and event.type() == QEvent.Type.Resize:
            self.update_width(event.size().width())
        return False

    # --------------------------------------------------
    # State
    # --------------------------------------------------
    def update_width(self, width: Number) -> bool:
        """
        Record a new viewport width.

        Returns True when the active tier changed.
        """
        name = self.table.breakpoint_for_width(width)
        self.current_width = width

        if name == self.current_breakpoint:
            return False

        previous = self.current_breakpoint
        self.current_breakpoint = name
        logger.info(f"Breakpoint changed: {previous} -> {name} ({width}px)")

        if self.builder is not None:
            self._apply_stylesheet(width)

        self.breakpoint_changed.emit(name)
        return True

    def matches(self, media_range: ResolvedRange) -> bool:
        """Whether the current width falls in ``media_range``"""
        if self.current_width is None:
            return False
        return media_range.contains(self.current_width)

    def get_current_breakpoint(self) -> Optional[str]:
        return self.current_breakpoint

    def get_current_width(self) -> Optional[Number]:
        return self.current_width

    # --------------------------------------------------
    # Stylesheet
    # --------------------------------------------------
    def _apply_stylesheet(self, width: Number) -> None:
        target = self._widget if self._widget is not None else QCoreApplication.instance()
        if target is None or not hasattr(target, "setStyleSheet"):
            logger.debug("No widget or QApplication to style, skipping stylesheet")
            return

        target.setStyleSheet(self.builder.build_for_width(width))

