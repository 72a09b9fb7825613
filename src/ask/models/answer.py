"""Completion result models."""

from pydantic import BaseModel, Field

from ask.models.request import ExplainRequest, GenerateRequest


class RawCompletion(BaseModel):
    """Unprocessed model output paired with the request that produced it."""

    text: str
    request: GenerateRequest | ExplainRequest


class ParsedAnswer(BaseModel):
    """Normalized answer split into primary text and annotation lines."""

    primary_text: str
    annotations: list[str] = Field(default_factory=list)
    needs_clarification: bool = False

    @property
    def annotation_text(self) -> str:
        """Annotations joined for display."""
        return " ".join(self.annotations)
