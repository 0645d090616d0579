"""Application context shared across CLI commands."""

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass
from typing import Any, TypeVar

import typer

from mb_clip.config import Config
from mb_clip.errors import ClipboardError
from mb_clip.output import Output

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    cfg: Config

    def run(self, operation: Coroutine[Any, Any, T]) -> T:
        """Run a clipboard coroutine to completion, turning ClipboardError into a CLI error exit."""
        try:
            return asyncio.run(operation)
        except ClipboardError as e:
            self.out.print_error_and_exit(e.code, str(e))


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result
