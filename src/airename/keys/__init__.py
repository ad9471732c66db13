"""API key loading for the rename endpoint."""

from .loader import KeyConfig, load_api_key

__all__ = ["KeyConfig", "load_api_key"]
