"""Where an ``ai_rename`` API key can live: environment, JSON file, credential store."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

import keyring

# platform -> (store name, command that adds the rename key)
_CREDENTIAL_STORES: dict[str, tuple[str, str]] = {
    "darwin": (
        "macOS Keychain",
        "security add-generic-password -s {service} -a {account} -w <api-key>",
    ),
    "win32": (
        "Windows Credential Manager",
        "cmdkey /generic:{service} /user:{account} /pass:<api-key>",
    ),
}
_DEFAULT_CREDENTIAL_STORE = (
    "system credential store",
    "secret-tool store --label='{service}' service {service} account {account}",
)


def _credential_store(service: str, account: str) -> tuple[str, str]:
    """Return ``(store name, add-key command)`` for this platform."""
    name, command = _CREDENTIAL_STORES.get(sys.platform, _DEFAULT_CREDENTIAL_STORE)
    return name, command.format(service=service, account=account)


def _lookup_dotted(data: Any, dotted_key: str) -> Any:
    """Walk nested objects along ``a.b.c``; ``KeyError`` when a step is missing."""
    value = data
    for part in dotted_key.split("."):
        if not isinstance(value, dict) or part not in value:
            raise KeyError(dotted_key)
        value = value[part]
    return value


def load_from_env(var_name: str) -> str:
    """Read the rename API key from ``var_name``; surrounding whitespace is dropped."""
    value = (os.environ.get(var_name) or "").strip()
    if not value:
        raise ValueError(
            f"Environment variable '{var_name}' holding the rename API key is not set"
        )
    return value


def load_from_json(file_path: str, key_name: str) -> str:
    """Read the rename API key stored under dotted ``key_name`` in a JSON file."""
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise ValueError(f"API key file not found: {file_path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"API key file {file_path} is not valid JSON: {e}") from e

    try:
        value = _lookup_dotted(data, key_name)
    except KeyError:
        raise ValueError(f"Key '{key_name}' not found in {file_path}") from None

    if not isinstance(value, str):
        raise ValueError(f"Key '{key_name}' in {file_path} is not a string")
    return value.strip()


def load_from_keyring(service: str, account: str) -> str:
    """Read the rename API key from the platform credential store via keyring."""
    store_name, add_command = _credential_store(service, account)
    try:
        key = keyring.get_password(service, account)
    except Exception as e:
        # keyring backends raise their own exception types.
        raise ValueError(
            f"Failed to access {store_name} (service={service}, account={account}): {e}"
        ) from e

    if not key:
        raise ValueError(
            f"API key not found in {store_name} (service={service}, account={account}). "
            f"Add it with: {add_command}"
        )
    return key
