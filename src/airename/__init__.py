"""AI-assisted naming for saved files and folders."""

__version__ = "0.1.0"

from .config import RenameConfig, load_rename_config
from .errors import (
    AIRenameError,
    APIResponseError,
    APIStatusError,
    ConfigError,
    EmptyChoicesError,
    ProtocolError,
    RenameCancelledError,
    RenameError,
    RenameTimeoutError,
    TransportError,
)
from .generator import NameGenerator
from .runtime import get_name_generator, init_name_generator, reset_name_generator
from .sanitizer import sanitize_file_name, sanitize_folder_name, sanitize_name

__all__ = [
    "AIRenameError",
    "APIResponseError",
    "APIStatusError",
    "ConfigError",
    "EmptyChoicesError",
    "NameGenerator",
    "ProtocolError",
    "RenameCancelledError",
    "RenameConfig",
    "RenameError",
    "RenameTimeoutError",
    "TransportError",
    "get_name_generator",
    "init_name_generator",
    "load_rename_config",
    "reset_name_generator",
    "sanitize_file_name",
    "sanitize_folder_name",
    "sanitize_name",
]
