"""Command-line entry point: suggest a name for one file or folder."""

import argparse
import asyncio
import sys
from typing import Optional

from . import __version__
from .config import RenameConfig, load_rename_config
from .errors import ConfigError, RenameError
from .generator import KIND_FILE, KIND_FOLDER, NameGenerator
from .logging import sanitize_error_message, setup_logging


def _read_message_text(text: Optional[str]) -> str:
    """Return ``--text`` or, when omitted, whatever is piped on stdin."""
    if text is not None:
        return text
    if sys.stdin is None or sys.stdin.isatty():
        return ""
    return sys.stdin.read()


async def _generate(
    config: RenameConfig,
    kind: str,
    name: str,
    message_text: str,
) -> tuple[str, RenameError | None]:
    async with NameGenerator(config) as generator:
        if kind == KIND_FOLDER:
            return await generator.generate_folder_name(message_text, name)
        return await generator.generate_file_name(message_text, name)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the airename CLI."""
    parser = argparse.ArgumentParser(
        prog="airename",
        description="Suggest a descriptive file or folder name from message text",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to config file (default: $AIRENAME_CONFIG or ~/.airename/config.json)",
    )
    parser.add_argument("-l", "--log", help="Path to log file (optional)")
    parser.add_argument(
        "-t",
        "--text",
        help="Message text (read from stdin when omitted)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("kind", choices=(KIND_FILE, KIND_FOLDER), help="What to name")
    parser.add_argument("name", help="Original file name or default folder name")

    args = parser.parse_args(argv)
    setup_logging(args.log)

    try:
        config = load_rename_config(args.config)
    except ConfigError as e:
        print(f"Error: {sanitize_error_message(str(e))}", file=sys.stderr)
        sys.exit(1)

    message_text = _read_message_text(args.text)
    name, error = asyncio.run(_generate(config, args.kind, args.name, message_text))
    if error is not None:
        print(
            f"Warning: AI rename failed, keeping original name: "
            f"{sanitize_error_message(str(error))}",
            file=sys.stderr,
        )
    print(name)
