"""Tests for the local credential record and API key precedence."""

import json

from cineprompt.adapters.credential_store import CredentialStore, get_credential_store, resolve_api_key


def test_missing_record_loads_empty(tmp_path):
    store = CredentialStore(tmp_path / "nope" / "config.json")
    assert store.load() == {}
    assert store.get_api_key() is None


def test_corrupt_record_loads_empty(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert CredentialStore(path).load() == {}


def test_non_object_record_loads_empty(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('["cp_abc"]', encoding="utf-8")
    assert CredentialStore(path).load() == {}


def test_save_api_key_creates_directory_and_keeps_other_keys(tmp_path):
    path = tmp_path / "nested" / "config.json"
    path.parent.mkdir()
    path.write_text(json.dumps({"theme": "dark", "apiKey": "cp_old"}), encoding="utf-8")

    store = CredentialStore(path)
    store.save_api_key("cp_new")

    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark", "apiKey": "cp_new"}
    assert store.get_api_key() == "cp_new"


def test_store_location_follows_settings(config_file):
    assert get_credential_store().path == config_file


def test_resolve_prefers_override(monkeypatch):
    monkeypatch.setenv("CINEPROMPT_API_KEY", "cp_env")
    get_credential_store().save_api_key("cp_stored")
    assert resolve_api_key("cp_flag") == "cp_flag"


def test_resolve_prefers_env_over_stored(monkeypatch):
    monkeypatch.setenv("CINEPROMPT_API_KEY", "cp_env")
    get_credential_store().save_api_key("cp_stored")
    assert resolve_api_key() == "cp_env"


def test_resolve_falls_back_to_stored():
    get_credential_store().save_api_key("cp_stored")
    assert resolve_api_key() == "cp_stored"


def test_resolve_without_any_source():
    assert resolve_api_key() is None
