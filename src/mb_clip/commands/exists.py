"""Check whether an executable is installed."""

import asyncio

import typer

from mb_clip.app_context import use_context
from mb_clip.probe import command_exists


def exists(ctx: typer.Context, command: str) -> None:
    """Report whether COMMAND is on the search path (exit 1 if not)."""
    app = use_context(ctx)
    found = asyncio.run(command_exists(command))
    app.out.print_exists(command, exists=found)
    if not found:
        raise typer.Exit(code=1)
