"""Gather facts about the machine and working directory for the prompt.

Every probe is best-effort: an I/O failure yields an absence value
(``"unavailable"``, an empty tuple, ``is_repository=False``) instead of an
exception, so capturing a snapshot never aborts a request.
"""

import getpass
import logging
import os
import platform
import subprocess
from pathlib import Path

from pydantic import ValidationError

from ask.models import EnvironmentSnapshot, ProjectHints, VcsInfo
from ask.models.environment import UNAVAILABLE

log = logging.getLogger(__name__)

TOOL_CANDIDATES = (
    "git",
    "npm",
    "node",
    "pnpm",
    "yarn",
    "python",
    "pip",
    "docker",
    "go",
    "ruby",
    "java",
)
MAX_FILES = 20
MAX_STATUS_LINES = 5
PROJECT_DESCRIPTOR = ".ask.json"
VCS_MARKER = ".git"


def _get_distro() -> str:
    """Return the OS distribution name (e.g. 'Debian GNU/Linux 12', 'macOS 14.0')."""
    system = platform.system()
    if system == "Darwin":
        mac_ver = platform.mac_ver()[0]
        return f"macOS {mac_ver}" if mac_ver else "macOS"
    if system == "Windows":
        return f"Windows {platform.version()}"
    try:
        info = platform.freedesktop_os_release()
        return info.get("PRETTY_NAME", info.get("NAME", system))
    except OSError:
        return system or UNAVAILABLE


def get_platform() -> str:
    """Return the OS name followed by the kernel release."""
    return f"{_get_distro()} ({platform.release()})"


def get_shell() -> str:
    # On Windows COMSPEC usually points to cmd.exe or powershell
    return os.environ.get("SHELL") or os.environ.get("COMSPEC") or "unknown"


def get_user() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError, ImportError) as e:
        log.debug("user lookup failed: %s", e)
        return UNAVAILABLE


def list_files(cwd: Path, max_files: int = MAX_FILES) -> tuple[list[str], bool] | None:
    """Return up to ``max_files`` visible names and whether more exist."""
    try:
        visible = sorted(name for name in os.listdir(cwd) if not name.startswith("."))
    except OSError as e:
        log.debug("listing %s failed: %s", cwd, e)
        return None
    return visible[:max_files], len(visible) > max_files


def command_in_path(name: str) -> bool:
    """Return whether ``name`` resolves to an executable on PATH."""
    resolver = "where" if os.name == "nt" else "which"
    try:
        result = subprocess.run(
            [resolver, name],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.SubprocessError) as e:
        log.debug("%s %s failed: %s", resolver, name, e)
        return False
    return result.returncode == 0


def detect_tools(candidates: tuple[str, ...] = TOOL_CANDIDATES) -> list[str]:
    """Return the installed candidates, in candidate order."""
    found = [name for name in candidates if command_in_path(name)]
    log.debug("tools found: %s", found)
    return found


def _git(cwd: Path, *args: str) -> str | None:
    """Run a git query in ``cwd`` and return stdout, or None on any failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        log.debug("git %s failed: %s", " ".join(args), e)
        return None
    if result.returncode != 0:
        log.debug("git %s returned rc=%d", " ".join(args), result.returncode)
        return None
    return result.stdout


def get_branch(cwd: Path) -> str | None:
    output = _git(cwd, "rev-parse", "--abbrev-ref", "HEAD")
    if output is None:
        return None
    return output.strip() or None


def get_status_lines(cwd: Path, max_lines: int = MAX_STATUS_LINES) -> list[str]:
    output = _git(cwd, "status", "--porcelain")
    if output is None:
        return []
    return [line for line in output.splitlines() if line.strip()][:max_lines]


def detect_vcs(cwd: Path) -> VcsInfo:
    """Describe the git state of ``cwd``.

    Branch and status are queried independently; one failing leaves the
    other intact.
    """
    try:
        is_repo = (cwd / VCS_MARKER).exists()
    except OSError as e:
        log.debug("vcs marker check failed: %s", e)
        is_repo = False
    if not is_repo:
        return VcsInfo(is_repository=False)
    return VcsInfo(
        is_repository=True,
        branch=get_branch(cwd),
        recent_status_lines=tuple(get_status_lines(cwd)),
    )


def read_project_hints(cwd: Path) -> ProjectHints | None:
    """Parse ``.ask.json`` in ``cwd``; unreadable or malformed means absent."""
    descriptor = cwd / PROJECT_DESCRIPTOR
    try:
        raw = descriptor.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        log.debug("%s unreadable: %s", descriptor, e)
        return None
    try:
        hints = ProjectHints.model_validate_json(raw)
    except ValidationError as e:
        log.debug("%s ignored: %s", descriptor, e)
        return None
    return None if hints.is_empty() else hints


def capture_basic(cwd: Path | None = None) -> EnvironmentSnapshot:
    """Capture only platform, shell and cwd, the context used to explain a command."""
    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError as e:
            log.debug("cwd lookup failed: %s", e)
            cwd = Path(os.environ.get("PWD", "."))
    return EnvironmentSnapshot(
        platform=get_platform(),
        shell=get_shell(),
        cwd=str(cwd),
    )


def capture(cwd: Path | None = None) -> EnvironmentSnapshot:
    """Capture the full environment snapshot used for command generation."""
    basic = capture_basic(cwd)
    cwd = Path(basic.cwd)

    listing = list_files(cwd)
    files, truncated = listing if listing is not None else ([], False)
    snapshot = basic.model_copy(
        update={
            "user": get_user(),
            "files": tuple(files),
            "files_truncated": truncated,
            "files_available": listing is not None,
            "tools": tuple(detect_tools()),
            "vcs": detect_vcs(cwd),
            "project": read_project_hints(cwd),
        }
    )
    log.debug("snapshot: %s", snapshot)
    return snapshot
