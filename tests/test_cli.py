"""Tests for the airename command-line entry point."""

import io
import json
from unittest.mock import patch

import pytest

from airename import cli
from airename.errors import APIStatusError


async def _fake_generate(config, kind, name, message_text):
    return f"{kind}:{message_text}:{name}", None


def _write_config(tmp_path, section):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"ai_rename": section}), encoding="utf-8")
    return str(path)


def test_disabled_config_prints_original_name(tmp_path, capsys):
    config_path = _write_config(tmp_path, {"enabled": False})

    cli.main(["-c", config_path, "-t", "Some caption", "file", "IMG_0001.jpg"])

    captured = capsys.readouterr()
    assert captured.out == "IMG_0001.jpg\n"
    assert captured.err == ""


def test_generated_name_is_printed(tmp_path, capsys):
    config_path = _write_config(tmp_path, {"enabled": True})

    with patch("airename.cli._generate", side_effect=_fake_generate):
        cli.main(["-c", config_path, "-t", "caption", "folder", "album_1"])

    assert capsys.readouterr().out == "folder:caption:album_1\n"


def test_message_text_is_read_from_stdin(tmp_path, capsys, monkeypatch):
    config_path = _write_config(tmp_path, {"enabled": True})
    monkeypatch.setattr("sys.stdin", io.StringIO("piped caption"))

    with patch("airename.cli._generate", side_effect=_fake_generate):
        cli.main(["-c", config_path, "file", "a.txt"])

    assert capsys.readouterr().out == "file:piped caption:a.txt\n"


def test_failure_prints_warning_and_fallback(tmp_path, capsys):
    config_path = _write_config(tmp_path, {"enabled": True})

    async def failing_generate(config, kind, name, message_text):
        return name, APIStatusError(401, "bad key sk-abcdefghijklmnopqrst")

    with patch("airename.cli._generate", side_effect=failing_generate):
        cli.main(["-c", config_path, "-t", "caption", "file", "a.txt"])

    captured = capsys.readouterr()
    assert captured.out == "a.txt\n"
    assert "Warning: AI rename failed" in captured.err
    assert "sk-abcdefghij" not in captured.err


def test_invalid_config_exits_with_error(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-c", str(path), "-t", "caption", "file", "a.txt"])

    assert exc_info.value.code == 1
    assert "Error: Invalid JSON" in capsys.readouterr().err


def test_unknown_kind_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-t", "caption", "album", "a.txt"])

    assert exc_info.value.code == 2


@pytest.mark.asyncio
async def test_generate_dispatches_on_kind(make_config):
    with patch("airename.cli.NameGenerator.generate_folder_name", return_value=("F", None)) as folder:
        with patch("airename.cli.NameGenerator.generate_file_name", return_value=("f", None)) as file:
            assert await cli._generate(make_config(), "folder", "d", "t") == ("F", None)
            assert await cli._generate(make_config(), "file", "n", "t") == ("f", None)

    folder.assert_awaited_once_with("t", "d")
    file.assert_awaited_once_with("t", "n")
