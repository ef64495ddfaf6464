"""
exceptions.py
=============
responsive-kit — Hierarchical Exception System

All toolkit exceptions inherit from ResponsiveKitError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
ResponsiveKitError
├── BreakpointError
│   ├── UnknownBreakpointError
│   └── InvalidBreakpointTableError
└── ConfigurationError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class ResponsiveKitError(Exception):
    """Base exception for all responsive-kit errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "BREAKPOINT_UNKNOWN"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Breakpoints ─────────────────────────────────────────────────────────────

class BreakpointError(ResponsiveKitError):
    """Base for errors raised while resolving breakpoints."""


class UnknownBreakpointError(BreakpointError):
    """Raised when a breakpoint name is not present in the table."""

    def __init__(self, name: str = "", **kwargs):
        kwargs.setdefault("code", "BREAKPOINT_UNKNOWN")
        super().__init__(f"Unknown breakpoint: {name!r}", **kwargs)
        self.name = name


class InvalidBreakpointTableError(BreakpointError):
    """Raised when a breakpoint table violates its ordering invariants."""

    def __init__(self, message: str = "Invalid breakpoint table", **kwargs):
        kwargs.setdefault("code", "BREAKPOINT_TABLE_INVALID")
        super().__init__(message, **kwargs)


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(ResponsiveKitError):
    """Raised when the toolkit configuration is invalid or incomplete."""


__all__ = [
    "ResponsiveKitError",
    "BreakpointError",
    "UnknownBreakpointError",
    "InvalidBreakpointTableError",
    "ConfigurationError",
]
