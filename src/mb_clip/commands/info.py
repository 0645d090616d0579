"""Show the detected OS and clipboard commands."""

import typer

from mb_clip import clipboard
from mb_clip.app_context import use_context
from mb_clip.errors import ClipboardError


def info(ctx: typer.Context) -> None:
    """Show detected OS and the commands used for the clipboard."""
    app = use_context(ctx)
    try:
        cb = clipboard.get_clipboard()
    except ClipboardError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_info(cb.describe())
