"""Prompt template builders for file and folder naming.

Templates carry two positional ``%s`` slots: the message text first, then
the original file name (without extension) or the default folder name.
"""

from __future__ import annotations

from typing import Optional

from .constants import FILE_NAME_MAX_LENGTH, FOLDER_NAME_MAX_LENGTH

TEMPLATE_SLOT = "%s"

_ANY_LANGUAGE = "the same language as the message"

DEFAULT_FILE_PROMPT = f"""Suggest a file name for the file attached to the message below. Requirements:
1. The name is concise and reflects what the file contains
2. Write it in {{language}}
3. Use only letters, digits, underscores and hyphens; no other special characters
4. Keep it within {FILE_NAME_MAX_LENGTH} characters
5. Reply with the name only: no extension, no quotes, no explanation

Message: {TEMPLATE_SLOT}
Original file name: {TEMPLATE_SLOT}

New file name:"""

DEFAULT_FOLDER_PROMPT = f"""Suggest a folder name for the album attached to the message below. Requirements:
1. The name is concise and reflects what the album contains
2. Write it in {{language}}
3. Use only letters, digits, underscores and hyphens; no other special characters
4. Keep it within {FOLDER_NAME_MAX_LENGTH} characters
5. Reply with the folder name only, no quotes, no explanation

Message: {TEMPLATE_SLOT}
Default folder name: {TEMPLATE_SLOT}

New folder name:"""


def fill_template(template: str, *values: str) -> str:
    """Substitute ``values`` into the ``%s`` slots of ``template`` in order.

    Substituted text is never rescanned for slots. Surplus slots stay as
    written and surplus values are dropped; this never raises.
    """
    parts = template.split(TEMPLATE_SLOT, len(values))
    pieces = [parts[0]]
    for value, part in zip(values, parts[1:]):
        pieces.append(value)
        pieces.append(part)
    return "".join(pieces)


def _default_template(template: str, language: Optional[str]) -> str:
    return template.replace("{language}", language or _ANY_LANGUAGE)


def build_file_name_prompt(
    message_text: str,
    original_base_name: str,
    *,
    custom_template: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """Build the file-naming prompt."""
    template = custom_template or _default_template(DEFAULT_FILE_PROMPT, language)
    return fill_template(template, message_text, original_base_name)


def build_folder_name_prompt(
    message_text: str,
    default_name: str,
    *,
    custom_template: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """Build the folder-naming prompt."""
    template = custom_template or _default_template(DEFAULT_FOLDER_PROMPT, language)
    return fill_template(template, message_text, default_name)


__all__ = [
    "DEFAULT_FILE_PROMPT",
    "DEFAULT_FOLDER_PROMPT",
    "build_file_name_prompt",
    "build_folder_name_prompt",
    "fill_template",
]
