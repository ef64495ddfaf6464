"""Stylesheet presets"""

from . import default

__all__ = ["default"]
