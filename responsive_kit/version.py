"""
version.py — responsive-kit
============================
Single source of the version number.
Used by:
  - pyproject.toml (dynamic version, [tool.setuptools.dynamic])
  - responsive_kit.__version__
"""

APP_NAME    = "responsive-kit"
VERSION     = "1.0.0"
BUILD       = "2026.10.16"
