"""Unified API key loading interface for airename."""

from typing import Required, TypedDict, cast


class KeyConfig(TypedDict, total=False):
    """Typed configuration for API key loading.

    Discriminated by ``type`` field. Additional fields depend on the type:
      env                      → key
      keychain / credential    → service, account  (aliases; both use keyring)
      json                     → path, key
      direct                   → value
    """

    type: Required[str]
    key: str
    value: str
    service: str
    account: str
    path: str


def load_api_key(owner: str, config: KeyConfig) -> str:
    """Load API key based on configuration.

    Args:
        owner: Config section the key belongs to (for error messages)
        config: Key configuration mapping

    Returns:
        API key string

    Raises:
        ValueError: If key cannot be loaded

    Example configs:
        {"type": "env", "key": "AIRENAME_API_KEY"}
        {"type": "keychain", "service": "airename", "account": "api-key"}
        {"type": "json", "path": "~/.secrets/keys.json", "key": "openai.rename"}
        {"type": "direct", "value": "sk-..."}
    """
    key_type = config.get("type")

    if key_type == "direct":
        return cast(str, config["value"])

    elif key_type == "env":
        from .backends import load_from_env

        return load_from_env(cast(str, config["key"]))

    elif key_type in ("keychain", "credential"):
        from .backends import load_from_keyring

        return load_from_keyring(
            cast(str, config["service"]),
            cast(str, config["account"]),
        )

    elif key_type == "json":
        from .backends import load_from_json

        return load_from_json(cast(str, config["path"]), cast(str, config["key"]))

    else:
        raise ValueError(f"Unknown key type '{key_type}' for '{owner}'")
