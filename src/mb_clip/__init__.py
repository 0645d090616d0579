"""Cross-platform text clipboard via external OS commands."""

from mb_clip.clipboard import Clipboard as Clipboard
from mb_clip.clipboard import clear as clear
from mb_clip.clipboard import get_clipboard as get_clipboard
from mb_clip.clipboard import init as init
from mb_clip.clipboard import read_text as read_text
from mb_clip.clipboard import write_text as write_text
from mb_clip.errors import ClipboardError as ClipboardError
from mb_clip.errors import UnsupportedPlatformError as UnsupportedPlatformError
from mb_clip.platforms import OperatingSystem as OperatingSystem
from mb_clip.probe import command_exists as command_exists
