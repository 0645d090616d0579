"""Copy text to the clipboard."""

import sys

import typer

from mb_clip import clipboard
from mb_clip.app_context import use_context


def write(ctx: typer.Context, text: str | None = typer.Argument(default=None, help="Text to copy; read from stdin when omitted")) -> None:
    """Copy TEXT (or stdin) to the clipboard."""
    app = use_context(ctx)
    if text is None:
        text = sys.stdin.read()
    app.run(clipboard.write_text(text))
    app.out.print_written(len(text))
