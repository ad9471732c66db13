"""Typed rename configuration and config-file loading."""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, cast

from .constants import CONFIG_PATH_ENV_VAR, CONFIG_SECTION, DEFAULT_CONFIG_PATH
from .errors import ConfigError
from .keys import KeyConfig, load_api_key
from .timeouts import DEFAULT_RENAME_TIMEOUT_SEC, parse_duration


def _read_str(config: Mapping[str, Any], key: str) -> str:
    value = config.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string")
    return value


def _read_timeout(raw_value: Any) -> float:
    if raw_value is None:
        return float(DEFAULT_RENAME_TIMEOUT_SEC)
    if isinstance(raw_value, str):
        try:
            timeout = parse_duration(raw_value)
        except ValueError as e:
            raise ConfigError(f"'timeout' is not a valid duration: {e}") from e
    elif isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
        raise ConfigError("'timeout' must be a number of seconds or a duration string")
    else:
        timeout = float(raw_value)
    if not math.isfinite(timeout) or timeout < 0:
        raise ConfigError("'timeout' must be a non-negative finite duration")
    return timeout


def _read_max_tokens(raw_value: Any) -> int | None:
    if raw_value is None:
        return None
    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise ConfigError("'max_tokens' must be an integer")
    # 0 (or less) means "let the endpoint decide".
    return raw_value if raw_value > 0 else None


def _read_temperature(raw_value: Any) -> float | None:
    if raw_value is None:
        return None
    if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
        raise ConfigError("'temperature' must be a number")
    return float(raw_value)


def _resolve_api_key(raw_value: Any, *, enabled: bool) -> tuple[str, dict[str, Any] | None]:
    """Return ``(api_key, key_reference)``.

    Key references are only resolved for an enabled config, so a disabled
    section never fails on a missing secret.
    """
    if raw_value is None:
        return "", None
    if isinstance(raw_value, str):
        return raw_value, None
    if not isinstance(raw_value, Mapping):
        raise ConfigError("'api_key' must be a string or a key configuration")

    key_ref = dict(raw_value)
    if not enabled:
        return "", key_ref
    if "type" not in key_ref:
        raise ConfigError("'api_key' configuration is missing 'type'")
    try:
        return load_api_key(CONFIG_SECTION, cast(KeyConfig, key_ref)), key_ref
    except (KeyError, ValueError) as e:
        raise ConfigError(f"Error loading API key: {e}") from e


@dataclass(slots=True, frozen=True)
class RenameConfig:
    """Settings for AI-assisted renaming.

    ``enabled=False`` makes the generator a pure pass-through regardless
    of the other fields.
    """

    enabled: bool = False
    endpoint: str = ""
    model: str = ""
    api_key: str = field(default="", repr=False)
    prompt: str = ""
    timeout: float = float(DEFAULT_RENAME_TIMEOUT_SEC)
    max_tokens: int | None = None
    temperature: float | None = None
    language: str = ""
    api_key_ref: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> RenameConfig:
        """Create a config from a raw ``ai_rename`` mapping.

        Accepts ``enable`` as an alias of ``enabled``.

        Raises:
            ConfigError: If a field has the wrong type or the key cannot be loaded
        """
        if not isinstance(config, Mapping):
            raise ConfigError(f"'{CONFIG_SECTION}' must be a dictionary-like mapping")

        enabled = config.get("enabled", config.get("enable", False))
        if not isinstance(enabled, bool):
            raise ConfigError("'enabled' must be a boolean")

        api_key, api_key_ref = _resolve_api_key(config.get("api_key"), enabled=enabled)

        return cls(
            enabled=enabled,
            endpoint=_read_str(config, "endpoint"),
            model=_read_str(config, "model"),
            api_key=api_key,
            prompt=_read_str(config, "prompt"),
            timeout=_read_timeout(config.get("timeout")),
            max_tokens=_read_max_tokens(config.get("max_tokens")),
            temperature=_read_temperature(config.get("temperature")),
            language=_read_str(config, "language"),
            api_key_ref=api_key_ref,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``ai_rename`` mapping shape.

        Keys loaded from a reference are written back as the reference.
        """
        config: dict[str, Any] = {
            "enabled": self.enabled,
            "endpoint": self.endpoint,
            "model": self.model,
            "api_key": dict(self.api_key_ref) if self.api_key_ref is not None else self.api_key,
            "timeout": self.timeout,
        }
        if self.prompt:
            config["prompt"] = self.prompt
        if self.max_tokens is not None:
            config["max_tokens"] = self.max_tokens
        if self.temperature is not None:
            config["temperature"] = self.temperature
        if self.language:
            config["language"] = self.language
        return config


def resolve_config_path(path: Optional[str] = None) -> Path:
    """Pick the config path: argument, then environment, then default."""
    raw_path = path or os.environ.get(CONFIG_PATH_ENV_VAR) or DEFAULT_CONFIG_PATH
    return Path(raw_path).expanduser()


def load_rename_config(path: Optional[str] = None) -> RenameConfig:
    """Load the rename config from a JSON file's ``ai_rename`` section.

    A missing file or section yields a disabled config.

    Raises:
        ConfigError: If the file is unreadable, not JSON or holds an invalid section
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        return RenameConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    section = data.get(CONFIG_SECTION)
    if section is None:
        return RenameConfig()
    return RenameConfig.from_dict(section)
