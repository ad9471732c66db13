"""File and folder name sanitization for model suggestions."""

from __future__ import annotations

import re

from .constants import FILE_NAME_MAX_LENGTH, FOLDER_NAME_MAX_LENGTH

_QUOTE_CHARS = "\"'`"
_EDGE_CHARS = "_" + _QUOTE_CHARS
# Characters rejected by common filesystems (Windows is the strictest).
_RESERVED_CHAR_PATTERN = re.compile(r'[<>:"/\\|?*]')
_SEPARATOR_RUN_PATTERN = re.compile(r"[\s_]+")


def sanitize_name(raw: str, max_length: int) -> str:
    """Turn a raw model suggestion into a safe file/folder name.

    Quotes and surrounding whitespace are stripped, reserved characters
    become ``_``, whitespace/underscore runs collapse to one ``_``, edge
    underscores are trimmed, and the result is cut to ``max_length`` code
    points. May return an empty string.

    The output is a fixed point: sanitizing it again returns it unchanged.
    To keep it one, an ``_`` (or quote) left at the end by the cut is
    dropped, so a long candidate can come back one or more code points
    shorter than ``max_length``.
    """
    name = raw.strip().strip(_QUOTE_CHARS).strip()
    name = _RESERVED_CHAR_PATTERN.sub("_", name)
    name = _SEPARATOR_RUN_PATTERN.sub("_", name)
    # Quotes can resurface at the edges once underscores are gone.
    name = name.strip(_EDGE_CHARS)
    name = truncate_code_points(name, max_length)
    return name.rstrip(_EDGE_CHARS)


def truncate_code_points(text: str, max_length: int) -> str:
    """Cut ``text`` to at most ``max_length`` Unicode code points."""
    if max_length < 0:
        raise ValueError("max_length must be non-negative")
    # str indexing is by code point, so a slice never splits a character.
    return text[:max_length]


def sanitize_file_name(raw: str) -> str:
    return sanitize_name(raw, FILE_NAME_MAX_LENGTH)


def sanitize_folder_name(raw: str) -> str:
    return sanitize_name(raw, FOLDER_NAME_MAX_LENGTH)


def split_extension(name: str) -> tuple[str, str]:
    """Split ``name`` into ``(base, extension)``.

    The extension runs from the last ``.`` of the final path segment to the
    end, dot included; it is empty when that segment has no dot.
    """
    segment_start = max(name.rfind("/"), name.rfind("\\")) + 1
    dot = name.rfind(".", segment_start)
    if dot < 0:
        return name, ""
    return name[:dot], name[dot:]
