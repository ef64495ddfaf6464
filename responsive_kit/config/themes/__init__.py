"""
responsive-kit Themes Module
============================

Breakpoint tables, media-query helpers and a responsive stylesheet
builder with component styles.

Quick Start:
    >>> from responsive_kit.config.themes import ResponsiveStyleBuilder
    >>> builder = ResponsiveStyleBuilder()
    >>> builder.only("md", ".nav { flex-direction: column; }")
    >>> stylesheet = builder.build()

Or use presets:
    >>> from responsive_kit.config.themes.presets import default
    >>> stylesheet = default.get_stylesheet(width=800)
"""

from .breakpoints import (
    DEFAULT_BREAKPOINTS,
    BreakpointTable,
    ResolvedRange,
    breakpoint_for_width,
    infix,
    max_boundary,
    min_boundary,
    next_breakpoint,
    range_between,
    range_down,
    range_only,
    range_up,
)
from .builder import ResponsiveStyleBuilder
from .containers import ContainerWidths
from .media import (
    MediaBlock,
    media_breakpoint_between,
    media_breakpoint_down,
    media_breakpoint_only,
    media_breakpoint_up,
    media_query,
)

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "BreakpointTable",
    "ResolvedRange",
    "breakpoint_for_width",
    "infix",
    "max_boundary",
    "min_boundary",
    "next_breakpoint",
    "range_between",
    "range_down",
    "range_only",
    "range_up",
    "ResponsiveStyleBuilder",
    "ContainerWidths",
    "MediaBlock",
    "media_breakpoint_between",
    "media_breakpoint_down",
    "media_breakpoint_only",
    "media_breakpoint_up",
    "media_query",
]
