"""Tests for the per-OS command registry."""

import asyncio
from unittest import mock

import pytest

from mb_clip.platforms import OperatingSystem
from mb_clip.registry import build_registry, build_registry_sync, strip_crlf

SUPPORTED = (OperatingSystem.LINUX, OperatingSystem.DARWIN, OperatingSystem.WINDOWS)


def _build_with(available: set[str]):
    """Build the registry as if only ``available`` commands were installed."""
    probe = mock.AsyncMock(side_effect=lambda command: command in available)
    with mock.patch("mb_clip.registry.command_exists", probe):
        return asyncio.run(build_registry())


class TestLinuxSelection:
    """xsel is preferred, xclip is the fallback."""

    def test_xsel_preferred(self):
        """xsel present → xsel forms targeting the clipboard selection."""
        impl = _build_with({"xsel", "xclip"})[OperatingSystem.LINUX]
        assert impl.read_command == ("xsel", "-b", "-o")
        assert impl.write_command == ("xsel", "-b", "-i")

    def test_xclip_fallback(self):
        """xsel absent → exact xclip argument forms."""
        impl = _build_with({"xclip"})[OperatingSystem.LINUX]
        assert impl.read_command == ("xclip", "-selection", "clipboard", "-o")
        assert impl.write_command == ("xclip", "-selection", "clipboard", "-i")

    def test_xclip_when_nothing_installed(self):
        """With neither tool present the registry still names xclip."""
        impl = _build_with(set())[OperatingSystem.LINUX]
        assert impl.read_command[0] == "xclip"

    def test_no_post_process(self):
        """Linux output is returned unmodified."""
        assert _build_with({"xsel"})[OperatingSystem.LINUX].post_process is None


class TestRegistryShape:
    """Registered systems and entry contents."""

    def test_supported_keys(self):
        """Only Linux, macOS and Windows are registered."""
        assert set(_build_with(set())) == set(SUPPORTED)

    @pytest.mark.parametrize("os_", SUPPORTED)
    def test_entries_non_empty(self, os_):
        """Every entry has non-empty read and write commands bound to its OS."""
        impl = _build_with(set())[os_]
        assert impl.os is os_
        assert impl.read_command
        assert impl.write_command

    def test_darwin(self):
        """macOS uses pbpaste/pbcopy without arguments."""
        impl = _build_with(set())[OperatingSystem.DARWIN]
        assert impl.read_command == ("pbpaste",)
        assert impl.write_command == ("pbcopy",)
        assert impl.post_process is None

    def test_windows(self):
        """Windows uses PowerShell clipboard cmdlets and strips CRLF on read."""
        impl = _build_with(set())[OperatingSystem.WINDOWS]
        assert impl.read_command == ("powershell", "-noprofile", "-command", "Get-Clipboard")
        assert impl.write_command == ("powershell", "-noprofile", "-command", "$input|Set-Clipboard")
        assert impl.post_process is strip_crlf

    def test_read_only(self):
        """The registry cannot be modified after construction."""
        registry = _build_with(set())
        with pytest.raises(TypeError):
            registry[OperatingSystem.FREEBSD] = registry[OperatingSystem.LINUX]  # type: ignore[index]

    def test_sync_builder(self):
        """build_registry_sync returns the same shape from synchronous code."""
        with mock.patch("mb_clip.registry.command_exists", mock.AsyncMock(return_value=False)):
            registry = build_registry_sync()
        assert set(registry) == set(SUPPORTED)


class TestStripCrlf:
    """Windows read post-processing."""

    def test_crlf_lines(self):
        """CRs are removed along with a single trailing newline."""
        assert strip_crlf("line1\r\nline2\r\n") == "line1\nline2"

    def test_only_one_trailing_newline(self):
        """Intentional blank lines before the final newline survive."""
        assert strip_crlf("a\r\n\r\n") == "a\n"

    def test_no_trailing_newline(self):
        """Text without a trailing newline is unchanged apart from CRs."""
        assert strip_crlf("a\rb") == "ab"

    def test_empty(self):
        """Empty input stays empty."""
        assert strip_crlf("") == ""
