"""Shared fixtures: every test gets its own settings and credential directory."""

import pytest

from cineprompt.core import config


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.delenv("CINEPROMPT_API_KEY", raising=False)
    monkeypatch.setenv("CINEPROMPT_CONFIG_DIR", str(tmp_path / "cineprompt-config"))
    monkeypatch.setattr(config, "_settings", None)
    yield


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "cineprompt-config" / "config.json"
