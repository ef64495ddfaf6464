"""
Components Package
==================

Breakpoint-driven component styles. Each module exposes
``get_styles(builder)`` returning a list of ``MediaBlock``.
"""

from . import containers
from . import display

DEFAULT_COMPONENTS = (containers, display)

__all__ = [
    "containers",
    "display",
    "DEFAULT_COMPONENTS",
]
