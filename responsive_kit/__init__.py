"""
responsive-kit
==============

Named viewport breakpoints and media-query boundary helpers for
style-sheet authoring (CSS and Qt style sheets).

    >>> from responsive_kit import range_between
    >>> range_between("sm", "lg")
    ResolvedRange(min=576, max=991.98)
"""

from .config.themes import (
    DEFAULT_BREAKPOINTS,
    BreakpointTable,
    ResolvedRange,
    ResponsiveStyleBuilder,
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
from .exceptions import (
    BreakpointError,
    ConfigurationError,
    InvalidBreakpointTableError,
    ResponsiveKitError,
    UnknownBreakpointError,
)
from .version import VERSION as __version__

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "BreakpointTable",
    "ResolvedRange",
    "ResponsiveStyleBuilder",
    "breakpoint_for_width",
    "infix",
    "max_boundary",
    "min_boundary",
    "next_breakpoint",
    "range_between",
    "range_down",
    "range_only",
    "range_up",
    "BreakpointError",
    "ConfigurationError",
    "InvalidBreakpointTableError",
    "ResponsiveKitError",
    "UnknownBreakpointError",
]
