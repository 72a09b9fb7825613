"""Model package for ask."""

from ask.models.answer import ParsedAnswer, RawCompletion
from ask.models.ask_config import DEFAULT_MODEL, StoredConfig
from ask.models.environment import EnvironmentSnapshot, ProjectHints, VcsInfo
from ask.models.history_entry import HistoryEntry
from ask.models.request import ExplainRequest, GenerateRequest, Mode, PromptRequest

__all__ = [
    "DEFAULT_MODEL",
    "EnvironmentSnapshot",
    "ExplainRequest",
    "GenerateRequest",
    "HistoryEntry",
    "Mode",
    "ParsedAnswer",
    "ProjectHints",
    "PromptRequest",
    "RawCompletion",
    "StoredConfig",
    "VcsInfo",
]
