"""Request variants that select a prompt template."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class Mode(str, Enum):
    GENERATE = "generate"
    EXPLAIN = "explain"


class GenerateRequest(BaseModel):
    """Turn a natural-language question into a command."""

    kind: Literal["generate"] = "generate"
    question: str

    @property
    def mode(self) -> Mode:
        return Mode.GENERATE

    @property
    def text(self) -> str:
        return self.question


class ExplainRequest(BaseModel):
    """Explain an existing command."""

    kind: Literal["explain"] = "explain"
    command_text: str

    @property
    def mode(self) -> Mode:
        return Mode.EXPLAIN

    @property
    def text(self) -> str:
        return self.command_text


PromptRequest = GenerateRequest | ExplainRequest
