"""Tests for naming prompt templates."""

from airename.prompts import (
    DEFAULT_FILE_PROMPT,
    DEFAULT_FOLDER_PROMPT,
    build_file_name_prompt,
    build_folder_name_prompt,
    fill_template,
)


def test_default_templates_have_two_slots():
    assert DEFAULT_FILE_PROMPT.count("%s") == 2
    assert DEFAULT_FOLDER_PROMPT.count("%s") == 2


def test_file_prompt_substitutes_text_then_name():
    prompt = build_file_name_prompt("Minutes of the March board meeting", "scan_001")

    assert "Message: Minutes of the March board meeting\n" in prompt
    assert "Original file name: scan_001\n" in prompt
    assert "within 50 characters" in prompt
    assert "no extension" in prompt
    assert "%s" not in prompt


def test_file_prompt_defaults_to_message_language():
    prompt = build_file_name_prompt("text", "name")
    assert "Write it in the same language as the message" in prompt
    assert "{language}" not in prompt


def test_file_prompt_uses_configured_language():
    prompt = build_file_name_prompt("text", "name", language="German")
    assert "Write it in German" in prompt


def test_folder_prompt_uses_folder_limit():
    prompt = build_folder_name_prompt("Team offsite photos", "album_42")

    assert "Default folder name: album_42\n" in prompt
    assert "within 30 characters" in prompt


def test_custom_template_replaces_default_wholesale():
    prompt = build_file_name_prompt(
        "hello",
        "notes",
        custom_template="Name this: %s / %s",
        language="German",
    )
    assert prompt == "Name this: hello / notes"


def test_custom_template_is_shared_by_folder_prompt():
    prompt = build_folder_name_prompt("hello", "album", custom_template="[%s] [%s]")
    assert prompt == "[hello] [album]"


def test_fill_template_does_not_rescan_substituted_text():
    assert fill_template("%s|%s", "50%s off", "sale") == "50%s off|sale"


def test_fill_template_tolerates_missing_slots():
    assert fill_template("only %s", "a", "b") == "only a"
    assert fill_template("no slots", "a", "b") == "no slots"


def test_fill_template_leaves_surplus_slots():
    assert fill_template("%s %s %s", "a", "b") == "a b %s"


def test_fill_template_keeps_literal_percent_and_braces():
    assert fill_template("100% {sure}: %s", "x") == "100% {sure}: x"
