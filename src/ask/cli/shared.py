"""Shared CLI presentation helpers."""

import json
import os
import sys
import time
from collections.abc import Callable
from enum import Enum
from typing import TextIO

from ask.constants import BOLD, CYAN, RESET, YELLOW
from ask.models import ExplainRequest, HistoryEntry, ParsedAnswer, PromptRequest

MARKER = "> "
INDENT = "  "
TYPEWRITER_DELAY_SECONDS = 0.015


class RenderMode(str, Enum):
    PLAIN = "plain"
    JSON = "json"
    PROGRESSIVE = "progressive"


def supports_color(stream: TextIO | None = None) -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    stream = stream if stream is not None else sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def format_answer(answer: ParsedAnswer, color: bool = False) -> str:
    """Return the marker-prefixed, indented text shown for an answer."""
    marker = f"{BOLD}{CYAN}{MARKER}{RESET}" if color else MARKER
    lines = answer.primary_text.splitlines() or [""]
    formatted = [f"{marker}{lines[0]}"]
    formatted.extend(f"{INDENT}{line}" for line in lines[1:])
    if answer.annotations:
        note = f"# {answer.annotation_text}"
        formatted.append(f"{INDENT}{YELLOW}{note}{RESET}" if color else f"{INDENT}{note}")
    return "\n".join(formatted)


def answer_payload(request: PromptRequest, answer: ParsedAnswer) -> dict[str, str]:
    """Return the structured object printed in JSON mode."""
    if isinstance(request, ExplainRequest):
        explanation = "\n".join(filter(None, [answer.primary_text, *answer.annotations]))
        return {
            "mode": request.mode.value,
            "command": request.command_text,
            "explanation": explanation,
        }
    return {
        "mode": request.mode.value,
        "question": request.question,
        "command": answer.primary_text,
        "explanation": answer.annotation_text,
    }


def typewrite(
    text: str,
    stream: TextIO,
    delay: float = TYPEWRITER_DELAY_SECONDS,
    sleep: Callable[[float], None] | None = None,
) -> None:
    """Write ``text`` one character at a time. Ctrl-C prints the rest at once."""
    sleep = sleep or time.sleep
    for index, char in enumerate(text):
        stream.write(char)
        stream.flush()
        try:
            sleep(delay)
        except KeyboardInterrupt:
            stream.write(text[index + 1 :])
            break
    stream.write("\n")
    stream.flush()


def render(
    request: PromptRequest,
    answer: ParsedAnswer,
    mode: RenderMode = RenderMode.PLAIN,
    stream: TextIO | None = None,
) -> None:
    """Print an answer in the requested presentation mode."""
    stream = stream if stream is not None else sys.stdout
    if mode is RenderMode.JSON:
        print(json.dumps(answer_payload(request, answer), indent=2), file=stream)
        return

    formatted = format_answer(answer, color=supports_color(stream))
    if mode is RenderMode.PROGRESSIVE:
        typewrite(formatted, stream)
    else:
        print(formatted, file=stream)


def format_history(entries: list[HistoryEntry]) -> str:
    """Return stored history in the listing format used by ``ask --history``."""
    if not entries:
        return "No history yet."
    blocks = [
        f"[{entry.timestamp}] {entry.mode.value}\nQ: {entry.question}\n{MARKER}{entry.answer}"
        for entry in entries
    ]
    return "\n\n".join(blocks)
