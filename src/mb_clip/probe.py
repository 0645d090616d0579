"""Advisory check for external programs on the search path."""

import asyncio
import logging
import sys

logger = logging.getLogger(__name__)


def _probe_command(command: str) -> list[str]:
    """Return the path-search invocation for the host: ``where`` on Windows, ``which`` elsewhere."""
    return ["where", command] if sys.platform == "win32" else ["which", command]


async def command_exists(command: str) -> bool:
    """Report whether an executable is available on the search path.

    Never raises: a probe that cannot be spawned counts as "not found".
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            *_probe_command(command),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        code = await proc.wait()
    except (OSError, ValueError) as e:
        logger.debug("Probe for %r failed: %s", command, e)
        return False
    return code == 0
