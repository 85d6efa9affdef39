"""Checks on what the distribution installs."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_only_library_modules_are_installed():
    config = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
    modules = config["tool"]["setuptools"]["py-modules"]
    assert modules == ["user_endpoint_client"]
    assert "run" not in modules
