"""Clear the clipboard."""

import typer

from mb_clip import clipboard
from mb_clip.app_context import use_context


def clear(
    ctx: typer.Context,
    *,
    expected: str | None = typer.Option(default=None, help="Clear only if the clipboard still holds this value"),
) -> None:
    """Clear the clipboard."""
    app = use_context(ctx)
    cleared = app.run(clipboard.clear(expected=expected))
    app.out.print_cleared(cleared=cleared)
