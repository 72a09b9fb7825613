"""Configuration and credential handling for ask."""

import json
import logging
import os
import time
from pathlib import Path

from pydantic import ValidationError

from ask.models import DEFAULT_MODEL, StoredConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".ask-cli"
CONFIG_FILE = CONFIG_DIR / "config.json"

API_KEY_ENV_VARS = ("ASK_CLI_API_KEY", "GOOGLE_API_KEY")
MODEL_ENV_VAR = "ASK_MODEL"


def get_model() -> str:
    """Return the LLM model identifier from env or default."""
    return os.environ.get(MODEL_ENV_VAR, DEFAULT_MODEL)


def write_json_atomic(path: Path, payload: object) -> None:
    """Replace ``path`` with ``payload`` serialized as indented JSON."""
    os.makedirs(path.parent, mode=0o700, exist_ok=True)
    temp_file = path.with_name(f".{path.name}.{os.getpid()}.{time.time_ns()}.tmp")
    fd = os.open(temp_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, path)
    except OSError:
        temp_file.unlink(missing_ok=True)
        raise


def read_config(path: Path | None = None) -> StoredConfig:
    """Load the stored config, treating a missing or corrupt file as empty."""
    path = path or CONFIG_FILE
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return StoredConfig()
    except (OSError, UnicodeDecodeError) as e:
        log.debug("config unreadable (%s), using defaults", e)
        return StoredConfig()
    try:
        return StoredConfig.model_validate_json(raw)
    except ValidationError as e:
        log.debug("config corrupt, using defaults: %s", e)
        return StoredConfig()


def write_config(config: StoredConfig, path: Path | None = None) -> None:
    write_json_atomic(path or CONFIG_FILE, config.model_dump(by_alias=True, exclude_none=True))


def update_api_key(api_key: str | None, path: Path | None = None) -> StoredConfig:
    """Store a new credential, or remove it when ``api_key`` is None."""
    config = read_config(path)
    config.api_key = api_key
    write_config(config, path)
    return config


def resolve_api_key(config: StoredConfig) -> str | None:
    """Return the first non-empty credential: stored value, then env vars."""
    candidates = [config.api_key] + [os.environ.get(name) for name in API_KEY_ENV_VARS]
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()
    return None
