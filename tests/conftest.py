import pytest

from ask import config


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path, monkeypatch):
    """Point config and history at a temp dir and clear credential env vars."""
    storage = tmp_path / ".ask-cli"
    monkeypatch.setattr(config, "CONFIG_DIR", storage)
    monkeypatch.setattr(config, "CONFIG_FILE", storage / "config.json")
    for name in (*config.API_KEY_ENV_VARS, config.MODEL_ENV_VAR, "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    return storage
