"""Shared fixtures: a file-backed stand-in for the OS clipboard tools."""

import sys
from pathlib import Path

import pytest

from mb_clip import clipboard
from mb_clip.executor import ClipboardImplementation
from mb_clip.platforms import OperatingSystem


def _python_command(code: str) -> tuple[str, ...]:
    """Command spec running a Python snippet with the current interpreter."""
    return (sys.executable, "-c", code)


@pytest.fixture
def clip_file(tmp_path: Path) -> Path:
    """File that plays the role of the OS clipboard."""
    path = tmp_path / "clipboard.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def file_implementation(clip_file: Path) -> ClipboardImplementation:
    """Implementation whose read/write commands copy bytes to and from clip_file."""
    path = str(clip_file)
    read_cmd = _python_command(f"import sys, pathlib; sys.stdout.buffer.write(pathlib.Path({path!r}).read_bytes())")
    # Write to a temp file then rename, so concurrent writers never interleave
    write_cmd = _python_command(
        "import os, sys, pathlib; "
        f"p = pathlib.Path({path!r}); tmp = p.with_name(p.name + '.' + str(os.getpid())); "
        "tmp.write_bytes(sys.stdin.buffer.read()); os.replace(tmp, p)"
    )
    return ClipboardImplementation(OperatingSystem.LINUX, read_cmd, write_cmd)


@pytest.fixture
def reset_clipboard(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start from an uninitialized process-wide clipboard."""
    monkeypatch.setattr(clipboard, "_clipboard", None)
    monkeypatch.setattr(clipboard, "_unsupported_os", None)
