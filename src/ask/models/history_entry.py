"""History log entry model."""

from pydantic import BaseModel

from ask.models.request import Mode


class HistoryEntry(BaseModel):
    timestamp: str
    # Entries written before explain mode existed carry no mode.
    mode: Mode = Mode.GENERATE
    question: str
    answer: str
