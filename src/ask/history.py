"""Append-only log of answered requests."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ask import config
from ask.models import HistoryEntry, Mode

log = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[HistoryEntry])


def history_file() -> Path:
    return config.CONFIG_DIR / "history.json"


def read_history(path: Path | None = None) -> list[HistoryEntry]:
    """Return stored entries; a missing or corrupt log yields an empty list."""
    path = path or history_file()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        log.debug("history unreadable (%s), starting empty", e)
        return []
    try:
        return _ENTRIES.validate_json(raw)
    except ValidationError as e:
        log.debug("history corrupt, starting empty: %s", e)
        return []


def append_history(entry: HistoryEntry, path: Path | None = None) -> None:
    path = path or history_file()
    entries = read_history(path)
    entries.append(entry)
    config.write_json_atomic(path, _ENTRIES.dump_python(entries, mode="json"))


def record(mode: Mode, question: str, answer: str, path: Path | None = None) -> HistoryEntry:
    """Build a timestamped entry for a finished request and persist it."""
    entry = HistoryEntry(
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
        mode=mode,
        question=question,
        answer=answer,
    )
    append_history(entry, path)
    return entry
