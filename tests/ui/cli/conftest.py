"""Fixtures isolating CLI tests from any on-disk configuration."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``MBSEARCH_CONFIG`` at a file that does not exist yet."""

    path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("MBSEARCH_CONFIG", str(path))
    return path
