"""Core logic for ask."""

import logging
from collections.abc import Callable
from pathlib import Path

from ask import history
from ask.config import get_model
from ask.context import capture, capture_basic
from ask.errors import CompletionError, ErrorKind
from ask.llm import complete
from ask.models import (
    ExplainRequest,
    GenerateRequest,
    ParsedAnswer,
    PromptRequest,
    RawCompletion,
)
from ask.prompt import build_prompt
from ask.response import normalize, split

log = logging.getLogger("ask")
MAX_QUERY_LENGTH = 1000

Completer = Callable[[str, str], str]


def build_request(words: list[str], explain: bool = False) -> PromptRequest | None:
    """Join CLI words into a request; None when nothing was asked."""
    text = " ".join(words).strip()
    if not text:
        return None
    if explain:
        return ExplainRequest(command_text=text)
    return GenerateRequest(question=text)


def validate_query_length(query: str) -> None:
    """Raise when query exceeds the supported maximum length."""
    query_len = len(query)
    if query_len > MAX_QUERY_LENGTH:
        raise ValueError(
            f"Query is too long ({query_len} characters). "
            f"Please keep queries under {MAX_QUERY_LENGTH} characters."
        )


def _default_completer(prompt: str, credential: str) -> str:
    return complete(prompt, credential, model=get_model())


def fetch_completion(
    request: PromptRequest,
    api_key: str,
    cwd: Path | None = None,
    completer: Completer | None = None,
) -> RawCompletion:
    """Probe the environment, build the prompt and ask the model."""
    if isinstance(request, GenerateRequest):
        env = capture(cwd)
    else:
        env = capture_basic(cwd)
    prompt = build_prompt(request, env)
    log.debug("prompt:\n%s", prompt)
    text = (completer or _default_completer)(prompt, api_key)
    return RawCompletion(text=text, request=request)


def interpret(raw: RawCompletion) -> tuple[str, ParsedAnswer]:
    """Normalize raw output; empty results are an EMPTY_CONTENT failure."""
    normalized = normalize(raw.text)
    if not normalized:
        raise CompletionError(ErrorKind.EMPTY_CONTENT)
    log.debug("normalized: %r", normalized)
    return normalized, split(normalized)


def run(
    request: PromptRequest,
    api_key: str,
    cwd: Path | None = None,
    completer: Completer | None = None,
) -> ParsedAnswer:
    """Run the ask pipeline for one request and record it in history.

    Raises CompletionError when the model gives no usable answer; nothing is
    recorded in that case.
    """
    validate_query_length(request.text)
    raw = fetch_completion(request, api_key, cwd=cwd, completer=completer)
    normalized, answer = interpret(raw)
    try:
        history.record(request.mode, request.text, normalized)
    except OSError as e:
        log.warning("could not write history: %s", e)
    return answer
