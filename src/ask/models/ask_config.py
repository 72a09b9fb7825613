"""Persisted configuration model for ask."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL = "gemini/gemini-2.0-flash"


class StoredConfig(BaseModel):
    """Contents of ``config.json``. Unknown keys survive a rewrite."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    api_key: str | None = Field(default=None, alias="apiKey")
