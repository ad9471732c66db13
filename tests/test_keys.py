"""Tests for API key loading backends."""

import json
from unittest.mock import patch

import pytest

from airename.keys import load_api_key
from airename.keys.backends import load_from_json, load_from_keyring


def test_direct_key():
    assert load_api_key("ai_rename", {"type": "direct", "value": "sk-direct"}) == "sk-direct"


def test_env_key(monkeypatch):
    monkeypatch.setenv("RENAME_KEY", "sk-env\n")
    assert load_api_key("ai_rename", {"type": "env", "key": "RENAME_KEY"}) == "sk-env"


def test_missing_env_key_raises(monkeypatch):
    monkeypatch.delenv("RENAME_KEY", raising=False)
    with pytest.raises(ValueError, match="RENAME_KEY"):
        load_api_key("ai_rename", {"type": "env", "key": "RENAME_KEY"})


def test_json_key_with_dotted_path(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text(json.dumps({"openai": {"rename": " sk-json "}}), encoding="utf-8")

    assert load_api_key("ai_rename", {"type": "json", "path": str(path), "key": "openai.rename"}) == "sk-json"


def test_json_key_missing_entry_raises(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text(json.dumps({"openai": {}}), encoding="utf-8")

    with pytest.raises(ValueError, match="not found"):
        load_from_json(str(path), "openai.rename")


def test_json_key_missing_file_raises(tmp_path):
    with pytest.raises(ValueError, match="not found"):
        load_from_json(str(tmp_path / "nope.json"), "k")


def test_json_key_must_be_string(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text(json.dumps({"k": 42}), encoding="utf-8")

    with pytest.raises(ValueError, match="not a string"):
        load_from_json(str(path), "k")


@pytest.mark.parametrize("key_type", ["keychain", "credential"])
def test_keyring_key(key_type):
    with patch("airename.keys.backends.keyring.get_password", return_value="sk-ring") as mock_get:
        key = load_api_key(
            "ai_rename",
            {"type": key_type, "service": "airename", "account": "api-key"},
        )

    assert key == "sk-ring"
    mock_get.assert_called_once_with("airename", "api-key")


def test_keyring_missing_entry_raises():
    with patch("airename.keys.backends.keyring.get_password", return_value=None):
        with pytest.raises(ValueError, match="API key not found"):
            load_from_keyring("airename", "api-key")


def test_keyring_backend_failure_raises_value_error():
    with patch(
        "airename.keys.backends.keyring.get_password",
        side_effect=RuntimeError("no backend"),
    ):
        with pytest.raises(ValueError, match="no backend"):
            load_from_keyring("airename", "api-key")


def test_unknown_key_type_raises():
    with pytest.raises(ValueError, match="Unknown key type 'vault'"):
        load_api_key("ai_rename", {"type": "vault"})


def test_blank_env_key_raises(monkeypatch):
    monkeypatch.setenv("RENAME_KEY", "   ")
    with pytest.raises(ValueError, match="not set"):
        load_api_key("ai_rename", {"type": "env", "key": "RENAME_KEY"})


def test_json_key_invalid_file_raises(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid JSON"):
        load_from_json(str(path), "k")


def test_keyring_missing_entry_names_add_command(monkeypatch):
    monkeypatch.setattr("airename.keys.backends.sys.platform", "darwin")
    with patch("airename.keys.backends.keyring.get_password", return_value=""):
        with pytest.raises(ValueError, match="macOS Keychain") as exc_info:
            load_from_keyring("airename", "api-key")

    assert "security add-generic-password -s airename -a api-key" in str(exc_info.value)
