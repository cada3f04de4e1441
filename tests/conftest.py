"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def write_go(tmp_path):
    """Write Go files under tmp_path: ``write_go("pkg/a.go", source)``."""

    def _write(rel_path: str, source: str):
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write
