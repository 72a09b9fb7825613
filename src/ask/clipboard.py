"""Copy text to the system clipboard through a platform tool."""

import logging
import shutil
import subprocess
import sys

log = logging.getLogger(__name__)

# Tried in order; the first one found on PATH is used.
CLIPBOARD_COMMANDS = (
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
)


def find_clipboard_command() -> list[str] | None:
    """Return the argv of the first clipboard tool available on this system."""
    candidates = CLIPBOARD_COMMANDS
    if sys.platform == "win32":
        candidates = (["clip"],)
    for argv in candidates:
        if shutil.which(argv[0]):
            return argv
    return None


def copy_to_clipboard(text: str) -> bool:
    """Return whether ``text`` was handed to the clipboard."""
    argv = find_clipboard_command()
    if argv is None:
        log.debug("no clipboard tool found")
        return False
    try:
        result = subprocess.run(
            argv,
            input=text,
            text=True,
            capture_output=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError) as e:
        log.debug("%s failed: %s", argv[0], e)
        return False
    if result.returncode != 0:
        log.debug("%s returned rc=%d", argv[0], result.returncode)
        return False
    return True
