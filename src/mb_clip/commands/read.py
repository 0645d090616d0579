"""Print clipboard contents."""

import typer

from mb_clip import clipboard
from mb_clip.app_context import use_context


def read(ctx: typer.Context) -> None:
    """Print the current clipboard contents."""
    app = use_context(ctx)
    text = app.run(clipboard.read_text())
    app.out.print_text(text)
