"""CLI entry point for mb-clip."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

import mb_clip
from mb_clip.app_context import AppContext
from mb_clip.commands.clear import clear
from mb_clip.commands.exists import exists
from mb_clip.commands.info import info
from mb_clip.commands.read import read
from mb_clip.commands.write import write
from mb_clip.config import Config
from mb_clip.log import setup_logging
from mb_clip.output import Output

app = TyperPlus(package_name="mb-clip")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path.")] = None,
) -> None:
    """Read and write the system clipboard from the terminal."""
    cfg = Config.build(data_dir)
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, cfg.log_level)
    # Bind the clipboard before any command runs
    mb_clip.init()
    ctx.obj = AppContext(out=Output(json_mode=json_output), cfg=cfg)


# Clipboard
app.command(aliases=["r"])(read)
app.command(aliases=["w"])(write)
app.command()(clear)

# Diagnostics
app.command()(exists)
app.command()(info)
