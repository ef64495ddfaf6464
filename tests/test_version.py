# -*- coding: utf-8 -*-
"""
tests/test_version.py
=====================
Package version comes from version.py only.
"""
from pathlib import Path

import responsive_kit
from responsive_kit.version import VERSION

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_package_version():
    assert responsive_kit.__version__ == VERSION


def test_pyproject_reads_version_module():
    text = PYPROJECT.read_text(encoding="utf-8")
    assert 'dynamic = ["version"]' in text
    assert 'version = {attr = "responsive_kit.version.VERSION"}' in text
