# core/__init__.py
"""
responsive-kit Core Module
==========================

Runtime services around the breakpoint toolkit.

Public API:
    - Configuration: Config, load_breakpoint_table
    - Logging: LoggingConfig
    - Utilities: SingletonMeta, QObjectSingletonMixin

The Qt viewport tracker lives in ``responsive_kit.core.viewport_manager``
and is imported from there, so configuration and logging work without
loading Qt.
"""

# Configuration
from .config import Config, load_breakpoint_table

# Logging
from .logging_config import LoggingConfig

# Utilities
from .singleton import SingletonMeta, QObjectSingletonMixin

__all__ = [
    "Config",
    "load_breakpoint_table",
    "LoggingConfig",
    "SingletonMeta",
    "QObjectSingletonMixin",
]
