"""Per-OS clipboard commands."""

import asyncio
import logging
from collections.abc import Mapping
from types import MappingProxyType

from mb_clip.executor import ClipboardImplementation
from mb_clip.platforms import OperatingSystem
from mb_clip.probe import command_exists

logger = logging.getLogger(__name__)

CommandRegistry = Mapping[OperatingSystem, ClipboardImplementation]

# Both Linux tools target the CLIPBOARD selection, not PRIMARY
_XSEL_READ = ("xsel", "-b", "-o")
_XSEL_WRITE = ("xsel", "-b", "-i")
_XCLIP_READ = ("xclip", "-selection", "clipboard", "-o")
_XCLIP_WRITE = ("xclip", "-selection", "clipboard", "-i")

_POWERSHELL = ("powershell", "-noprofile", "-command")


def strip_crlf(text: str) -> str:
    """Drop carriage returns and one trailing newline added by ``Get-Clipboard``."""
    text = text.replace("\r", "")
    return text.removesuffix("\n")


async def _linux() -> ClipboardImplementation:
    """Prefer xsel when installed, otherwise xclip."""
    if await command_exists("xsel"):
        logger.debug("Using xsel for the Linux clipboard")
        return ClipboardImplementation(OperatingSystem.LINUX, _XSEL_READ, _XSEL_WRITE)
    logger.debug("xsel not found, falling back to xclip")
    return ClipboardImplementation(OperatingSystem.LINUX, _XCLIP_READ, _XCLIP_WRITE)


async def build_registry() -> CommandRegistry:
    """Build the read-only OS -> implementation mapping.

    Only Linux, macOS and Windows are registered; other systems in
    OperatingSystem have no entry.
    """
    implementations = {
        OperatingSystem.LINUX: await _linux(),
        OperatingSystem.DARWIN: ClipboardImplementation(OperatingSystem.DARWIN, ("pbpaste",), ("pbcopy",)),
        OperatingSystem.WINDOWS: ClipboardImplementation(
            OperatingSystem.WINDOWS,
            (*_POWERSHELL, "Get-Clipboard"),
            (*_POWERSHELL, "$input|Set-Clipboard"),
            post_process=strip_crlf,
        ),
    }
    return MappingProxyType(implementations)


def build_registry_sync() -> CommandRegistry:
    """Build the registry from synchronous code (no running event loop)."""
    return asyncio.run(build_registry())
