"""Tests for timeout policy helpers."""

import httpx
import pytest

from airename.timeouts import (
    DEFAULT_RENAME_TIMEOUT_SEC,
    build_rename_httpx_timeout,
    normalize_timeout_value,
    parse_duration,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("30s", 30.0),
        ("1m30s", 90.0),
        ("1h", 3600.0),
        ("250ms", 0.25),
        ("1.5s", 1.5),
        ("45", 45.0),
        (" 10s ", 10.0),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "10x", "s10", "10 s", "-5s", "1m-2s"])
def test_parse_duration_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_normalize_timeout_value_falls_back_on_bad_input():
    assert normalize_timeout_value(None, 30) == 30
    assert normalize_timeout_value(True, 30) == 30
    assert normalize_timeout_value(-1, 30) == 30
    assert normalize_timeout_value(float("nan"), 30) == 30
    assert normalize_timeout_value(12.0, 30) == 12
    assert normalize_timeout_value(0.5, 30) == 0.5


def test_zero_timeout_means_no_httpx_timeout():
    assert build_rename_httpx_timeout(0) is None


def test_httpx_timeout_buckets():
    timeout = build_rename_httpx_timeout(60)

    assert isinstance(timeout, httpx.Timeout)
    assert timeout.read == 60
    assert timeout.connect == 10.0
    assert timeout.write == 15.0
    assert timeout.pool == 5.0


def test_short_timeout_caps_every_bucket():
    timeout = build_rename_httpx_timeout(2)

    assert timeout is not None
    assert timeout.read == 2
    assert timeout.connect == 2
    assert timeout.write == 2
    assert timeout.pool == 2


def test_invalid_timeout_uses_default():
    timeout = build_rename_httpx_timeout(-3)

    assert timeout is not None
    assert timeout.read == DEFAULT_RENAME_TIMEOUT_SEC
