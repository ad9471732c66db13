"""Process-wide name generator.

The shared instance is built from the config file on first use, at most
once even when several threads race for it. ``init_name_generator``
installs an explicitly configured instance instead.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import httpx

from .config import RenameConfig, load_rename_config
from .generator import NameGenerator
from .logging import log_event

_generator: Optional[NameGenerator] = None
_generator_lock = threading.Lock()


def get_name_generator() -> NameGenerator:
    """Return the shared generator, creating it from the config file if needed.

    The first call reads the config file and may query the credential store,
    both blocking; make it during startup rather than inside a coroutine.

    Raises:
        ConfigError: If the config file exists but is invalid
    """
    global _generator

    generator = _generator
    if generator is not None:
        return generator

    with _generator_lock:
        if _generator is None:
            config = load_rename_config()
            _generator = NameGenerator(config)
            log_event(
                "rename_generator_init",
                level=logging.INFO,
                source="config_file",
                enabled=config.enabled,
                model=config.model,
            )
        return _generator


def init_name_generator(
    config: RenameConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> NameGenerator:
    """Install a generator built from ``config`` as the shared instance."""
    global _generator

    generator = NameGenerator(config, client=client)
    with _generator_lock:
        _generator = generator
    log_event(
        "rename_generator_init",
        level=logging.INFO,
        source="explicit",
        enabled=config.enabled,
        model=config.model,
    )
    return generator


def reset_name_generator() -> Optional[NameGenerator]:
    """Forget the shared generator and return it so the caller can close it."""
    global _generator

    with _generator_lock:
        generator = _generator
        _generator = None
    return generator
