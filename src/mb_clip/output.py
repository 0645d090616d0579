"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 — this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import sys
from typing import NoReturn, cast

import typer


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    # --- Clipboard ---

    def print_text(self, text: str) -> None:
        """Print clipboard contents as-is, without a trailing newline."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"text": text}}))
        else:
            sys.stdout.write(text)

    def print_written(self, length: int) -> None:
        """Print clipboard write confirmation."""
        self._success({"length": length}, f"Copied {length} characters to clipboard.")

    def print_cleared(self, *, cleared: bool) -> None:
        """Print clipboard clear result."""
        self._success({"cleared": cleared}, "Clipboard cleared." if cleared else "Clipboard changed; left as is.")

    # --- Diagnostics ---

    def print_exists(self, command: str, *, exists: bool) -> None:
        """Print command probe result."""
        self._success({"command": command, "exists": exists}, f"{command}: {'found' if exists else 'not found'}")

    def print_info(self, info: dict[str, object]) -> None:
        """Print detected OS and bound clipboard commands."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": info}))
            return
        print(f"OS: {info['os']}")
        print(f"Read: {' '.join(cast(list[str], info['read_command']))}")
        print(f"Write: {' '.join(cast(list[str], info['write_command']))}")
        print(f"Post-process: {'yes' if info['post_process'] else 'no'}")
