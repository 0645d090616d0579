"""Pipe text through an external clipboard program."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import cast

from mb_clip.errors import ClipboardError
from mb_clip.platforms import OperatingSystem

logger = logging.getLogger(__name__)

CommandSpec = tuple[str, ...]
PostProcess = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class ClipboardImplementation:
    """Read/write commands for one operating system, plus an optional read-side text transform."""

    os: OperatingSystem
    read_command: CommandSpec
    write_command: CommandSpec
    post_process: PostProcess | None = None

    def __post_init__(self) -> None:
        if not self.read_command or not self.write_command:
            msg = f"Empty clipboard command for {self.os}."
            raise ValueError(msg)

    async def read_text(self) -> str:
        """Run the read command and return its standard output as text.

        Raises:
            ClipboardError: The command could not be spawned or its output could not be collected.

        """
        try:
            proc = await asyncio.create_subprocess_exec(
                *self.read_command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except (OSError, ValueError) as e:
            raise ClipboardError("read_failed", f"Failed to read from clipboard: {e}") from e

        if proc.returncode != 0:
            logger.warning("%s exited with %s: %s", self.read_command[0], proc.returncode, stderr.decode(errors="replace").strip())

        text = stdout.decode("utf-8", errors="replace")
        if self.post_process is not None:
            text = self.post_process(text)
        return text

    async def write_text(self, text: str) -> None:
        """Feed text to the write command's standard input and wait for it to exit.

        Raises:
            ClipboardError: Encoding, spawning or writing to the command failed.

        """
        proc: asyncio.subprocess.Process | None = None
        try:
            data = text.encode("utf-8")
            # stderr is not a pipe: xclip -i leaves a forked child holding it after the parent exits
            proc = await asyncio.create_subprocess_exec(
                *self.write_command,
                stdin=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
            stdin = cast(asyncio.StreamWriter, proc.stdin)
            stdin.write(data)
            await stdin.drain()
            stdin.close()  # end of input
            await stdin.wait_closed()
            returncode = await proc.wait()
        except (OSError, ValueError) as e:
            if proc is not None:
                await _reap(proc)
            raise ClipboardError("write_failed", f"Failed to write to clipboard: {e}") from e

        if returncode != 0:
            logger.warning("%s exited with %s", self.write_command[0], returncode)


async def _reap(proc: asyncio.subprocess.Process) -> None:
    """Close the child's stdin and wait for it after a failed write."""
    if proc.stdin is not None:
        proc.stdin.close()
    await proc.wait()
