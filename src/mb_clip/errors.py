"""Exceptions raised by clipboard operations."""


class ClipboardError(OSError):
    """I/O error raised when a clipboard operation fails."""

    def __init__(self, code: str, message: str) -> None:
        """Initialize with a machine-readable code and a human-readable message.

        Args:
            code: Machine-readable error code (e.g. "read_failed").
            message: Human-readable error description.

        """
        super().__init__(message)
        self.code = code


class UnsupportedPlatformError(ClipboardError):
    """The current operating system has no registered clipboard commands."""

    def __init__(self, os_name: str) -> None:
        super().__init__("unsupported_os", f"Clipboard: unsupported OS: {os_name}")
        self.os_name = os_name
