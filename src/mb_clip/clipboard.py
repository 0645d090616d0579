"""Clipboard facade bound to the current operating system."""

import logging

from mb_clip.errors import ClipboardError, UnsupportedPlatformError
from mb_clip.executor import ClipboardImplementation
from mb_clip.platforms import OperatingSystem, detect_os
from mb_clip.registry import CommandRegistry, build_registry_sync

logger = logging.getLogger(__name__)


class Clipboard:
    """Text clipboard for one operating system, backed by external commands."""

    def __init__(self, os: OperatingSystem, implementations: CommandRegistry) -> None:
        """Bind the implementation registered for ``os``.

        Args:
            os: Operating system to resolve.
            implementations: Registry of per-OS implementations.

        Raises:
            UnsupportedPlatformError: No implementation is registered for ``os``.

        """
        impl = implementations.get(os)
        if impl is None:
            raise UnsupportedPlatformError(os)
        self._impl = impl

    @property
    def os(self) -> OperatingSystem:
        """Operating system this clipboard is bound to."""
        return self._impl.os

    @property
    def implementation(self) -> ClipboardImplementation:
        """Bound implementation."""
        return self._impl

    async def read_text(self) -> str:
        """Return the current clipboard contents."""
        return await self._impl.read_text()

    async def write_text(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""
        await self._impl.write_text(text)

    async def clear(self, *, expected: str | None = None) -> bool:
        """Clear the clipboard. Return False if it was left untouched.

        If expected is provided, only clear when the clipboard still contains that value.
        """
        if expected is not None and await self.read_text() != expected:
            return False
        await self.write_text("")
        return True

    def describe(self) -> dict[str, object]:
        """Summarize the bound commands."""
        return {
            "os": str(self._impl.os),
            "read_command": list(self._impl.read_command),
            "write_command": list(self._impl.write_command),
            "post_process": self._impl.post_process is not None,
        }


# Process-wide default, set by init()
_clipboard: Clipboard | None = None
_unsupported_os: str | None = None


def init(os: OperatingSystem | None = None, implementations: CommandRegistry | None = None) -> Clipboard | None:
    """Detect the OS, build the registry and bind the process-wide clipboard.

    Call once from the process entry point, outside any running event loop
    when ``implementations`` is omitted. An unsupported OS is not fatal: a
    warning is logged and later clipboard calls raise UnsupportedPlatformError.
    """
    global _clipboard, _unsupported_os  # noqa: PLW0603
    _clipboard = None
    _unsupported_os = None
    try:
        resolved = detect_os() if os is None else os
        registry = build_registry_sync() if implementations is None else implementations
        _clipboard = Clipboard(resolved, registry)
    except UnsupportedPlatformError as e:
        logger.warning("Clipboard support not available for %s", e.os_name)
        _unsupported_os = e.os_name
        return None
    logger.debug("Clipboard bound to %s: %s", _clipboard.os, _clipboard.implementation.read_command[0])
    return _clipboard


def get_clipboard() -> Clipboard:
    """Return the clipboard bound by init().

    Raises:
        UnsupportedPlatformError: init() found no implementation for this OS.
        ClipboardError: init() was never called.

    """
    if _clipboard is not None:
        return _clipboard
    if _unsupported_os is not None:
        raise UnsupportedPlatformError(_unsupported_os)
    raise ClipboardError("not_initialized", "Clipboard is not initialized; call mb_clip.init() first.")


async def read_text() -> str:
    """Read text from the process-wide clipboard."""
    return await get_clipboard().read_text()


async def write_text(text: str) -> None:
    """Write text to the process-wide clipboard."""
    await get_clipboard().write_text(text)


async def clear(*, expected: str | None = None) -> bool:
    """Clear the process-wide clipboard, optionally only if it still holds ``expected``."""
    return await get_clipboard().clear(expected=expected)
